"""集成测试共享 fixture"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from taskrepo.core.config import RepositoryConfig, load_repository_config
from taskrepo.core.repository import TaskRepository, create_repository


@pytest.fixture
def integration_config(tmp_path: Path, monkeypatch) -> RepositoryConfig:
    """集成测试用配置：SQLite 后端，数据库位于临时目录"""
    monkeypatch.setenv("TASKREPO_DB_PATH", str(tmp_path / "sqlite" / "integration.db"))
    monkeypatch.setenv("TASKREPO_STORE", "sqlite")
    monkeypatch.delenv("TASKREPO_REJECT_EMPTY_TEXT", raising=False)
    monkeypatch.delenv("TASKREPO_VALIDATE_TASK_IDS", raising=False)
    return load_repository_config()


@pytest_asyncio.fixture
async def integration_repository(
    integration_config: RepositoryConfig,
) -> AsyncGenerator[TaskRepository, None]:
    repository = await create_repository(integration_config)
    yield repository
    await repository.close()
