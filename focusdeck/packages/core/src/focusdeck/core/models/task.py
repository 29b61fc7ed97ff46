"""Task / Note 数据模型

任务按创建时间倒序存放（新任务插入表头），通过 task_id 就地修改。
归档只打标记，不会删除任务。
"""

from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import EisenhowerQuadrant, Priority


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _default_due_date() -> datetime:
    return _utcnow() + timedelta(days=1)


def _as_aware(value: datetime) -> datetime:
    """无时区的时间按本地时间解释，统一转为 UTC"""
    if value.tzinfo is None:
        return value.astimezone(UTC)
    return value


class Task(BaseModel):
    """Task 数据模型

    quadrant 与 priority 可独立设置，但通过 store 修改象限时
    priority 会被重置为象限默认值。
    shared_with 保存成员 ID（弱引用），读取时解析，悬空 ID 视为不存在。
    """

    # update_task 等就地修改同样经过时间戳校验
    model_config = ConfigDict(validate_assignment=True)

    task_id: str = Field(description="唯一标识，ULID 格式")
    title: str = Field(description="任务标题")
    is_completed: bool = Field(default=False, description="是否完成")
    is_archived: bool = Field(default=False, description="是否归档")
    created_at: datetime = Field(default_factory=_utcnow, description="创建时间")
    due_date: datetime = Field(default_factory=_default_due_date, description="截止时间")
    priority: Priority = Field(default=Priority.MEDIUM, description="优先级")
    category: str = Field(default="Work", description="分类（自由文本）")
    quadrant: EisenhowerQuadrant = Field(
        default=EisenhowerQuadrant.URGENT_IMPORTANT,
        description="艾森豪威尔象限",
    )
    shared_with: list[str] = Field(default_factory=list, description="共享成员 ID 列表")

    @field_validator("created_at", "due_date", mode="after")
    @classmethod
    def normalize_timestamps(cls, value: datetime) -> datetime:
        return _as_aware(value)

    def is_overdue_at(self, now: datetime) -> bool:
        """截止时间已过且未完成"""
        return self.due_date < now and not self.is_completed

    @property
    def is_overdue(self) -> bool:
        return self.is_overdue_at(_utcnow())


class Note(BaseModel):
    """Note 数据模型 -- 按 note_id 增删改，无派生字段"""

    note_id: str = Field(description="唯一标识，ULID 格式")
    title: str = Field(description="标题")
    content: str = Field(default="", description="正文")
    category: str = Field(default="Work", description="分类")
    created_at: datetime = Field(default_factory=_utcnow, description="创建时间")

    @field_validator("created_at", mode="after")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        return _as_aware(value)
