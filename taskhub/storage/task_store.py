"""任务存储 - 线程安全的内存任务表"""
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Optional

from ..models.task import Task

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """读写锁

    读操作之间可以并发，写操作与任何其他操作互斥。
    有写者等待时，新到达的读者需要排队，避免写者饥饿。
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
                self._cond.notify_all()
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        """共享（读）锁上下文"""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        """独占（写）锁上下文"""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class TaskStore:
    """任务存储（内存）

    id 从 1 开始自增，删除后不会复用。存入和取出的都是副本，
    调用方修改返回的任务不会影响存储内容。
    """

    def __init__(self):
        self._store: Dict[int, Task] = {}
        self._next_id = 1
        self._lock = ReadWriteLock()

    def add(self, task: Task) -> int:
        """新增任务，忽略传入的 id，返回分配的 id"""
        with self._lock.write_locked():
            task_id = self._next_id
            self._store[task_id] = task.model_copy(update={"id": task_id})
            self._next_id += 1
        logger.debug(f"任务已写入存储: {task_id}")
        return task_id

    def get(self, task_id: int) -> Optional[Task]:
        """获取任务，不存在时返回 None"""
        with self._lock.read_locked():
            task = self._store.get(task_id)
            return task.model_copy() if task is not None else None

    def update(self, task_id: int, task: Task) -> bool:
        """整体替换任务的标题和完成状态，id 保持不变"""
        with self._lock.write_locked():
            if task_id not in self._store:
                return False
            self._store[task_id] = task.model_copy(update={"id": task_id})
            return True

    def delete(self, task_id: int) -> bool:
        """删除任务"""
        with self._lock.write_locked():
            if task_id in self._store:
                del self._store[task_id]
                return True
            return False

    def list_all(self) -> list[Task]:
        """列出所有任务（快照，顺序不保证）"""
        with self._lock.read_locked():
            return [task.model_copy() for task in self._store.values()]

    def count(self) -> int:
        """当前任务数量"""
        with self._lock.read_locked():
            return len(self._store)
