"""持久化字段编解码

每个 StateField 对应一个 pydantic TypeAdapter。
解码失败（JSON 格式错误、字段校验失败）一律视为"无数据"，返回 None。
"""

import json
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from ..models.enums import StateField
from ..models.task import Note, Task
from ..models.team import TeamMember

log = structlog.get_logger()

_ADAPTERS: dict[StateField, TypeAdapter] = {
    StateField.TASKS: TypeAdapter(list[Task]),
    StateField.NOTES: TypeAdapter(list[Note]),
    StateField.TEAM_MEMBERS: TypeAdapter(list[TeamMember]),
    StateField.COMPLETED_POMODOROS: TypeAdapter(int),
    StateField.FOCUS_STREAK: TypeAdapter(int),
    StateField.TOTAL_FOCUS_MINUTES: TypeAdapter(int),
    StateField.COMPLETED_LESSONS: TypeAdapter(list[str]),
    StateField.PASSED_TESTS: TypeAdapter(list[str]),
    StateField.TEST_SCORES: TypeAdapter(dict[str, int]),
}


def encode_field(field: StateField, value: Any) -> str:
    """将字段值编码为 JSON 文本"""
    return _ADAPTERS[field].dump_json(value).decode("utf-8")


def decode_field(field: StateField, raw: str | None) -> Any | None:
    """将 JSON 文本解码为字段值

    Returns:
        解码后的值；raw 为 None 或数据损坏时返回 None
    """
    if raw is None:
        return None
    try:
        return _ADAPTERS[field].validate_json(raw)
    except (ValidationError, json.JSONDecodeError, ValueError) as e:
        log.warning(
            "state_decode_failed",
            field=field.value,
            error=str(e),
        )
        return None
