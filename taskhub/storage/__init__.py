from .task_store import ReadWriteLock, TaskStore

__all__ = ["ReadWriteLock", "TaskStore"]
