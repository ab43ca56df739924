"""Store Protocol 接口定义

TaskStore 是以 task_id 为键的有序映射：插入或替换、点查、点删、按键序遍历。
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol

from ..models.task import Task


class TaskStore(Protocol):
    """Task 有序映射接口

    写操作不自动提交：由调用方（TaskRepository）在一次操作结束时
    commit，失败时 rollback。
    """

    async def put(self, task: Task) -> None:
        """以 task.task_id 为键插入或替换记录"""
        ...

    async def get(self, task_id: str) -> Task | None:
        """点查，返回记录副本或 None"""
        ...

    async def remove(self, task_id: str) -> Task | None:
        """点删，返回被删除的记录或 None"""
        ...

    async def values(self) -> list[Task]:
        """按键序返回全部记录（已物化的列表）"""
        ...

    async def contains(self, task_id: str) -> bool:
        """键是否存在"""
        ...

    async def count(self) -> int:
        """记录总数"""
        ...

    async def commit(self) -> None:
        """提交本次操作的写入"""
        ...

    async def rollback(self) -> None:
        """撤销本次操作的写入"""
        ...

    async def close(self) -> None:
        """释放底层资源"""
        ...
