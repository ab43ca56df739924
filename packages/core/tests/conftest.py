"""packages/core 测试配置 -- 核心层 fixture"""

from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from taskrepo.core.repository import TaskRepository
from taskrepo.core.store import create_task_store
from taskrepo.core.store.protocols import TaskStore
from ulid import ULID


class SequentialIdGenerator:
    """确定性 ID 生成器：按给定序列返回 ULID 字符串"""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls = 0

    def new_id(self) -> str:
        value = self._values[min(self.calls, len(self._values) - 1)]
        self.calls += 1
        return str(ULID.from_int(value))


@pytest.fixture
def make_id_generator() -> Callable[[list[int]], SequentialIdGenerator]:
    """构造确定性 ID 生成器"""
    return SequentialIdGenerator


@pytest_asyncio.fixture
async def core_db_path(tmp_path: Path) -> Path:
    """核心层临时数据库路径"""
    return tmp_path / "core_test.db"


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def task_store(request, core_db_path: Path) -> AsyncGenerator[TaskStore, None]:
    """两种后端各跑一遍的 TaskStore"""
    store = await create_task_store(request.param, str(core_db_path))
    yield store
    await store.close()


@pytest_asyncio.fixture
async def repository(task_store: TaskStore) -> TaskRepository:
    """默认配置的 TaskRepository（关闭由 task_store fixture 负责）"""
    return TaskRepository(task_store)
