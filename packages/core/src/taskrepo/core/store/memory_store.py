"""TaskStore 内存实现

dict 存储，遍历按键排序（与 B-tree 映射的键序一致）。
读写都复制记录，调用方拿到的对象不是映射内部对象的别名。
"""

from ..models.task import Task


class MemoryTaskStore:
    """TaskStore 的内存实现"""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    async def put(self, task: Task) -> None:
        self._tasks[task.task_id] = task.model_copy()

    async def get(self, task_id: str) -> Task | None:
        task = self._tasks.get(task_id)
        return task.model_copy() if task is not None else None

    async def remove(self, task_id: str) -> Task | None:
        return self._tasks.pop(task_id, None)

    async def values(self) -> list[Task]:
        return [self._tasks[key].model_copy() for key in sorted(self._tasks)]

    async def contains(self, task_id: str) -> bool:
        return task_id in self._tasks

    async def count(self) -> int:
        return len(self._tasks)

    async def commit(self) -> None:
        """写入即时生效，无需提交"""

    async def rollback(self) -> None:
        """仓库在任何写入之前完成校验，无可撤销内容"""

    async def close(self) -> None:
        self._tasks.clear()
