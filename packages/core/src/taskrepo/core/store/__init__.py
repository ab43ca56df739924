"""taskrepo Core Store -- 有序映射实现

提供工厂函数按配置创建 TaskStore（内存或 SQLite）。
"""

from pathlib import Path

import aiosqlite
import structlog

from .memory_store import MemoryTaskStore
from .protocols import TaskStore
from .sqlite_init import init_db, verify_wal_mode
from .task_store import SqliteTaskStore

log = structlog.get_logger()


async def create_task_store(backend: str, db_path: str | None = None) -> TaskStore:
    """创建 TaskStore 实例

    Args:
        backend: "sqlite" 或 "memory"
        db_path: SQLite 数据库文件路径（sqlite 后端必填）

    Returns:
        TaskStore 实例
    """
    if backend == "memory":
        log.info("task_store_opened", backend=backend)
        return MemoryTaskStore()

    if backend != "sqlite":
        raise ValueError(f"unknown task store backend: {backend}")
    if not db_path:
        raise ValueError("db_path is required for the sqlite backend")

    # 确保数据库目录存在
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await init_db(conn)

    log.info("task_store_opened", backend=backend, db_path=db_path)
    return SqliteTaskStore(conn)


__all__ = [
    "TaskStore",
    "MemoryTaskStore",
    "SqliteTaskStore",
    "create_task_store",
    "init_db",
    "verify_wal_mode",
]
