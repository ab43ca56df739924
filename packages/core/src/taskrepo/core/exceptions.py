"""Task Repository 异常体系

所有错误以类型化异常返回给直接调用方，仓库本身不重试、不记录、不吞掉错误。
错误路径上存储保持调用前的状态。
"""

from typing import Any


class TaskRepositoryError(Exception):
    """Repository 基础异常"""

    code: str = "TASK_REPOSITORY_ERROR"

    def __init__(self, message: str, retryable: bool = False) -> None:
        """
        Args:
            message: 错误描述
            retryable: 调用方不修改输入能否重试成功
        """
        super().__init__(message)
        self.message = message
        self.retryable = retryable

    def detail(self) -> dict[str, Any]:
        """错误附带的结构化字段"""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """序列化为 {"code", "message", ...detail}"""
        return {"code": self.code, "message": self.message, **self.detail()}


class TaskDoesNotExistError(TaskRepositoryError):
    """目标任务不存在

    调用方需提供已存在的 task_id（或先创建任务）。
    """

    code = "TASK_DOES_NOT_EXIST"

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with id {task_id} does not exist")
        self.task_id = task_id

    def detail(self) -> dict[str, Any]:
        return {"task_id": self.task_id}


class InvalidTaskIdError(TaskRepositoryError):
    """task_id 语法非法（在查找之前拒绝）

    与 TaskDoesNotExistError 区分：前者是输入格式错误，后者是键不存在。
    """

    code = "INVALID_TASK_ID"

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Invalid task id: {task_id!r}")
        self.task_id = task_id

    def detail(self) -> dict[str, Any]:
        return {"task_id": self.task_id}


class InvalidInputError(TaskRepositoryError):
    """文本字段非法（如策略开启时的空 description / status）"""

    code = "INVALID_INPUT"

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason

    def detail(self) -> dict[str, Any]:
        return {"field": self.field, "reason": self.reason}


class TaskIdExhaustedError(TaskRepositoryError):
    """ID 生成器连续产生已存在的 task_id，超过最大尝试次数"""

    code = "TASK_ID_EXHAUSTED"

    def __init__(self, attempts: int) -> None:
        super().__init__(f"Failed to generate a unique task id after {attempts} attempts")
        self.attempts = attempts

    def detail(self) -> dict[str, Any]:
        return {"attempts": self.attempts}
