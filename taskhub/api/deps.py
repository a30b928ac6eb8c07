"""路由共用的依赖"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..models.task import TaskPayload
from ..storage.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """从应用状态中获取任务存储（启动时由 create_app 创建）"""
    return request.app.state.task_store


async def get_task_payload(request: Request) -> TaskPayload:
    """
    按 JSON 解析请求体，不检查 Content-Type

    Raises:
        RequestValidationError: 请求体不是合法的任务 JSON，统一返回 400
    """
    body = await request.body()
    try:
        return TaskPayload.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)],
            body=body.decode("utf-8", errors="replace"),
        )
