"""Task ID 生成与校验

ID 生成抽象为可注入的 IdGenerator（单方法协议），测试可替换为确定性实现。
默认实现生成 ULID（128 bit，26 字符 Crockford base32）。
"""

from typing import Protocol

from ulid import ULID

from .exceptions import InvalidTaskIdError


class IdGenerator(Protocol):
    """Task ID 生成器接口"""

    def new_id(self) -> str:
        """生成一个新的 task_id"""
        ...


class UlidGenerator:
    """默认生成器：每次调用生成新的 ULID"""

    def new_id(self) -> str:
        return str(ULID())


def parse_task_id(raw: str) -> str:
    """校验 task_id 语法并返回规范形式（大写 ULID 字符串），大小写不敏感

    Raises:
        InvalidTaskIdError: 不是合法的 ULID
    """
    if not isinstance(raw, str):
        raise InvalidTaskIdError(raw)
    try:
        return str(ULID.from_str(raw.upper()))
    except (TypeError, ValueError) as e:
        raise InvalidTaskIdError(raw) from e
