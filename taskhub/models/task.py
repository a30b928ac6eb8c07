from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Task(BaseModel):
    """任务模型"""
    id: int = Field(default=0, description="任务ID（由存储分配）")
    title: str = Field(default="", description="任务标题")
    completed: bool = Field(default=False, description="是否已完成")


class TaskPayload(BaseModel):
    """创建/更新任务请求体

    客户端提交的 id 会被忽略，由存储统一分配。
    """
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(None, description="忽略，仅为兼容完整任务结构")
    title: str = Field(default="", strict=True, description="任务标题")
    completed: bool = Field(default=False, strict=True, description="是否已完成")

    def to_task(self) -> Task:
        """转换为任务模型（id 交由存储分配）"""
        return Task(title=self.title, completed=self.completed)
