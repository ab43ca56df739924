"""taskrepo Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .task import Task

__all__ = [
    "Task",
]
