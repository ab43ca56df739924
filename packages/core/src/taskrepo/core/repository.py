"""TaskRepository -- 任务增删改查

仓库独占持有一个 TaskStore（以 task_id 为键的有序映射）和一个 IdGenerator，
两者均通过构造参数注入，不依赖全局状态。

结果形态：
- 读操作 get_task_details 以 None 表示任务不存在（结构化缺失，不是错误）
- 写操作在任务不存在时抛出 TaskDoesNotExistError

所有操作在同一把 asyncio.Lock 下执行，update/delete 的
读-改-写序列不会与其他操作交错。错误路径上存储保持调用前的状态。
"""

import asyncio

import structlog

from .config import RepositoryConfig
from .exceptions import InvalidInputError, TaskDoesNotExistError, TaskIdExhaustedError
from .ids import IdGenerator, UlidGenerator, parse_task_id
from .models.task import Task
from .store import create_task_store
from .store.protocols import TaskStore

log = structlog.get_logger()


class TaskRepository:
    """任务仓库"""

    def __init__(
        self,
        store: TaskStore,
        id_generator: IdGenerator | None = None,
        *,
        reject_empty_text: bool = False,
        validate_task_ids: bool = True,
        max_id_attempts: int = 8,
    ) -> None:
        if max_id_attempts < 1:
            raise ValueError("max_id_attempts must be >= 1")
        self._store = store
        self._id_generator = id_generator or UlidGenerator()
        self._reject_empty_text = reject_empty_text
        self._validate_task_ids = validate_task_ids
        self._max_id_attempts = max_id_attempts
        self._lock = asyncio.Lock()

    async def add_task(self, description: str, status: str) -> Task:
        """创建任务并返回新记录

        Raises:
            InvalidInputError: 开启 reject_empty_text 时 description / status 为空
            TaskIdExhaustedError: ID 生成器连续冲突
        """
        self._check_text("description", description)
        self._check_text("status", status)

        async with self._lock:
            task_id = await self._generate_unique_id()
            task = Task(task_id=task_id, description=description, status=status)
            await self._write(self._store.put(task))

        log.info("task_added", task_id=task_id)
        return task

    async def delete_task(self, task_id: str) -> Task:
        """删除任务，返回删除前的记录

        Raises:
            InvalidTaskIdError: task_id 语法非法
            TaskDoesNotExistError: 任务不存在
        """
        key = self._normalize_id(task_id)

        async with self._lock:
            if not await self._store.contains(key):
                raise TaskDoesNotExistError(task_id)
            task = await self._write(self._store.remove(key))

        log.info("task_deleted", task_id=key)
        return task

    async def get_task_list(self) -> list[Task]:
        """按键序返回全部任务的快照"""
        async with self._lock:
            return await self._store.values()

    async def get_task_details(self, task_id: str) -> Task | None:
        """查询任务详情，不存在时返回 None

        Raises:
            InvalidTaskIdError: task_id 语法非法
        """
        key = self._normalize_id(task_id)
        async with self._lock:
            return await self._store.get(key)

    async def update_task_status(self, task_id: str, new_status: str) -> Task:
        """替换任务 status，task_id 与 description 不变"""
        self._check_text("status", new_status)
        return await self._update_field(task_id, "status", new_status)

    async def update_task_description(self, task_id: str, new_description: str) -> Task:
        """替换任务 description，task_id 与 status 不变"""
        self._check_text("description", new_description)
        return await self._update_field(task_id, "description", new_description)

    async def close(self) -> None:
        await self._store.close()

    async def _update_field(self, task_id: str, field: str, value: str) -> Task:
        key = self._normalize_id(task_id)

        async with self._lock:
            current = await self._store.get(key)
            if current is None:
                raise TaskDoesNotExistError(task_id)
            updated = current.model_copy(update={field: value})
            await self._write(self._store.put(updated))

        log.info("task_updated", task_id=key, field=field)
        return updated

    async def _generate_unique_id(self) -> str:
        for attempt in range(1, self._max_id_attempts + 1):
            candidate = self._id_generator.new_id()
            if not await self._store.contains(candidate):
                return candidate
            log.warning("task_id_collision", task_id=candidate, attempt=attempt)
        raise TaskIdExhaustedError(self._max_id_attempts)

    async def _write(self, operation):
        """执行一次写入并提交，失败或被取消时回滚"""
        try:
            result = await operation
            await self._store.commit()
        except BaseException:
            await self._store.rollback()
            raise
        return result

    def _normalize_id(self, task_id: str) -> str:
        if self._validate_task_ids:
            return parse_task_id(task_id)
        return task_id

    def _check_text(self, field: str, value: str) -> None:
        if not isinstance(value, str):
            raise InvalidInputError(field, "must be text")
        if self._reject_empty_text and not value.strip():
            raise InvalidInputError(field, "must not be empty")


async def create_repository(
    config: RepositoryConfig,
    id_generator: IdGenerator | None = None,
) -> TaskRepository:
    """按配置创建 TaskRepository（含底层 TaskStore）"""
    store = await create_task_store(config.store_backend, config.db_path)
    return TaskRepository(
        store,
        id_generator,
        reject_empty_text=config.reject_empty_text,
        validate_task_ids=config.validate_task_ids,
        max_id_attempts=config.max_id_attempts,
    )
