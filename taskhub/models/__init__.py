from .task import Task, TaskPayload

__all__ = ["Task", "TaskPayload"]
