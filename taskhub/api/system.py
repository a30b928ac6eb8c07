from fastapi import APIRouter, Depends

from .. import __version__
from ..storage.task_store import TaskStore
from .deps import get_task_store

router = APIRouter(tags=["系统"])


@router.get("/", summary="服务信息")
def root():
    """获取 API 服务信息"""
    return {"message": "TaskHub API is running", "version": __version__}


@router.get("/health", summary="健康检查")
def health(store: TaskStore = Depends(get_task_store)):
    """检查服务健康状态"""
    return {"status": "healthy", "tasks": store.count()}
