"""任务管理 API"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from fastapi.responses import JSONResponse

from ..models.task import Task, TaskPayload
from ..storage.task_store import TaskStore
from .deps import get_task_payload, get_task_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["任务管理"])

# 请求体由 get_task_payload 手动解析，这里补充文档中的请求体结构
TASK_BODY_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": TaskPayload.model_json_schema()}},
    }
}


@router.get(
    "",
    responses={200: {"model": List[Task]}},
    summary="列出所有任务",
    description="返回当前所有任务，顺序不保证"
)
def list_tasks(store: TaskStore = Depends(get_task_store)):
    """
    列出所有任务

    - 序列化失败时返回 500
    """
    tasks = store.list_all()
    try:
        return JSONResponse(content=[task.model_dump(mode="json") for task in tasks])
    except (TypeError, ValueError) as e:
        logger.error(f"任务列表序列化失败: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="任务列表序列化失败")


@router.post(
    "",
    response_model=Task,
    status_code=201,
    summary="创建任务",
    description="创建新任务，id 由服务端分配",
    openapi_extra=TASK_BODY_SCHEMA,
)
def create_task(
    payload: TaskPayload = Depends(get_task_payload),
    store: TaskStore = Depends(get_task_store),
):
    """
    创建任务

    - **title**: 任务标题
    - **completed**: 是否已完成
    - 请求体中的 id 会被忽略
    """
    task = payload.to_task()
    task_id = store.add(task)
    logger.info(f"任务已创建: {task_id}, 标题: {task.title}")
    return Task(id=task_id, title=task.title, completed=task.completed)


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="获取任务",
    description="根据任务 ID 获取任务"
)
def get_task(
    task_id: int = Path(..., gt=0, description="任务ID（正整数）"),
    store: TaskStore = Depends(get_task_store),
):
    task = store.get(task_id)
    if task is None:
        logger.info(f"任务不存在: {task_id}")
        raise HTTPException(status_code=404, detail="任务不存在")

    return task


@router.put(
    "/{task_id}",
    summary="更新任务",
    description="整体替换任务的标题和完成状态",
    openapi_extra=TASK_BODY_SCHEMA,
)
def update_task(
    payload: TaskPayload = Depends(get_task_payload),
    task_id: int = Path(..., gt=0, description="任务ID（正整数）"),
    store: TaskStore = Depends(get_task_store),
):
    """
    更新任务

    - **task_id**: 任务ID，请求体中的 id 会被忽略
    - 成功返回 200 空响应体
    """
    if not store.update(task_id, payload.to_task()):
        logger.info(f"更新失败，任务不存在: {task_id}")
        raise HTTPException(status_code=404, detail="任务不存在")

    logger.info(f"任务已更新: {task_id}")
    return Response(status_code=200)


@router.delete(
    "/{task_id}",
    summary="删除任务",
    description="根据任务 ID 删除任务"
)
def delete_task(
    task_id: int = Path(..., gt=0, description="任务ID（正整数）"),
    store: TaskStore = Depends(get_task_store),
):
    if not store.delete(task_id):
        logger.info(f"删除失败，任务不存在: {task_id}")
        raise HTTPException(status_code=404, detail="任务不存在")

    logger.info(f"任务已删除: {task_id}")
    return Response(status_code=200)
