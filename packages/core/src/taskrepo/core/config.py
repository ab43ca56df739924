"""配置模块 -- 可通过环境变量覆盖

包含数据库路径、存储后端选择和仓库输入校验策略。
"""

import os
from pathlib import Path
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

_DEFAULT_MAX_ID_ATTEMPTS = 8
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TASKREPO_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TASKREPO_DB_PATH",
        str(_get_base_dir() / "sqlite" / "taskrepo.db"),
    )


class RepositoryConfig(BaseModel):
    """TaskRepository 配置 -- 从环境变量加载

    环境变量:
        TASKREPO_DB_PATH: SQLite 数据库路径
        TASKREPO_STORE: 存储后端（sqlite/memory）
        TASKREPO_REJECT_EMPTY_TEXT: 是否拒绝空 description / status
        TASKREPO_VALIDATE_TASK_IDS: 是否在查找前校验 task_id 语法
        TASKREPO_MAX_ID_ATTEMPTS: task_id 冲突时的最大生成次数
    """

    db_path: str = Field(
        default_factory=get_db_path,
        description="SQLite 数据库路径",
    )
    store_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="存储后端：sqlite / memory",
    )
    reject_empty_text: bool = Field(
        default=False,
        description="拒绝空 description / status",
    )
    validate_task_ids: bool = Field(
        default=True,
        description="查找前校验 task_id 为合法 ULID",
    )
    max_id_attempts: int = Field(
        default=_DEFAULT_MAX_ID_ATTEMPTS,
        ge=1,
        description="task_id 冲突重试上限",
    )


def _parse_bool(env_var: str, value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    log.warning("invalid_bool_config", env_var=env_var, value=value)
    return None


def load_repository_config() -> RepositoryConfig:
    """从环境变量加载仓库配置

    环境变量映射:
        TASKREPO_DB_PATH -> db_path (默认 "<TASKREPO_DATA_DIR>/sqlite/taskrepo.db")
        TASKREPO_STORE -> store_backend (默认 "sqlite")
        TASKREPO_REJECT_EMPTY_TEXT -> reject_empty_text (默认 False)
        TASKREPO_VALIDATE_TASK_IDS -> validate_task_ids (默认 True)
        TASKREPO_MAX_ID_ATTEMPTS -> max_id_attempts (默认 8)

    Returns:
        RepositoryConfig 实例
    """
    kwargs: dict = {"db_path": get_db_path()}

    if val := os.environ.get("TASKREPO_STORE"):
        kwargs["store_backend"] = val

    if val := os.environ.get("TASKREPO_REJECT_EMPTY_TEXT"):
        parsed = _parse_bool("TASKREPO_REJECT_EMPTY_TEXT", val)
        if parsed is not None:
            kwargs["reject_empty_text"] = parsed

    if val := os.environ.get("TASKREPO_VALIDATE_TASK_IDS"):
        parsed = _parse_bool("TASKREPO_VALIDATE_TASK_IDS", val)
        if parsed is not None:
            kwargs["validate_task_ids"] = parsed

    if val := os.environ.get("TASKREPO_MAX_ID_ATTEMPTS"):
        try:
            kwargs["max_id_attempts"] = int(val)
        except ValueError:
            log.warning(
                "invalid_max_id_attempts_config",
                env_var="TASKREPO_MAX_ID_ATTEMPTS",
                value=val,
                fallback=_DEFAULT_MAX_ID_ATTEMPTS,
            )
            # 使用默认值，不阻塞启动

    return RepositoryConfig(**kwargs)
