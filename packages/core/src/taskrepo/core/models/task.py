"""Task Domain Model

任务记录：task_id + description + status。
task_id 创建后不可变，description / status 为调用方自定义的自由文本。
"""

from pydantic import BaseModel, Field


class Task(BaseModel):
    """Task 数据模型

    description 与 status 始终存在（允许为空字符串），
    status 不做词表或状态流转约束。
    """

    task_id: str = Field(description="唯一标识，ULID 格式")
    description: str = Field(default="", description="任务描述")
    status: str = Field(default="", description="任务状态（自由文本）")
