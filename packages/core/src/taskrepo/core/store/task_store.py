"""TaskStore SQLite 实现

tasks 表即有序映射：主键 task_id，遍历按 task_id 升序。
此处仅提供数据库操作，事务边界由 TaskRepository 控制。
"""

import aiosqlite

from ..models.task import Task


class SqliteTaskStore:
    """TaskStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def put(self, task: Task) -> None:
        """插入或替换任务记录"""
        await self._conn.execute(
            """
            INSERT INTO tasks (task_id, description, status)
            VALUES (?, ?, ?)
            ON CONFLICT(task_id) DO UPDATE SET
                description = excluded.description,
                status = excluded.status
            """,
            (task.task_id, task.description, task.status),
        )

    async def get(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        cursor = await self._conn.execute(
            "SELECT task_id, description, status FROM tasks WHERE task_id = ?",
            (task_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def remove(self, task_id: str) -> Task | None:
        """删除任务，返回删除前的记录"""
        task = await self.get(task_id)
        if task is None:
            return None
        await self._conn.execute("DELETE FROM tasks WHERE task_id = ?", (task_id,))
        return task

    async def values(self) -> list[Task]:
        """按 task_id 升序返回全部任务"""
        cursor = await self._conn.execute(
            "SELECT task_id, description, status FROM tasks ORDER BY task_id"
        )
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def contains(self, task_id: str) -> bool:
        cursor = await self._conn.execute(
            "SELECT 1 FROM tasks WHERE task_id = ?",
            (task_id,),
        )
        return await cursor.fetchone() is not None

    async def count(self) -> int:
        cursor = await self._conn.execute("SELECT COUNT(*) FROM tasks")
        row = await cursor.fetchone()
        return int(row[0]) if row is not None else 0

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()

    async def close(self) -> None:
        await self._conn.close()

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(
            task_id=row[0],
            description=row[1],
            status=row[2],
        )
