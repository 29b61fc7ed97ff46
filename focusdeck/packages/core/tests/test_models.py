"""Domain Models 单元测试

测试内容：
1. 枚举取值与象限默认优先级
2. Task 派生属性 is_overdue
3. TeamMember 派生属性 initials
4. Pydantic 模型校验与 JSON 往返
"""

from datetime import UTC, datetime, timedelta

import pytest
from focusdeck.core.models import (
    MEMBER_PALETTE,
    QUADRANT_DEFAULT_PRIORITY,
    CourseTest,
    EisenhowerQuadrant,
    MemberColor,
    Note,
    Priority,
    StateField,
    Task,
    TeamMember,
)
from focusdeck.core.seed import build_demo_members
from pydantic import ValidationError

NOW = datetime(2026, 3, 18, 10, 30, tzinfo=UTC)


class TestEnums:
    """枚举测试"""

    def test_priority_values(self):
        assert Priority.LOW == "low"
        assert Priority.MEDIUM == "medium"
        assert Priority.HIGH == "high"

    def test_quadrant_default_priority(self):
        """每个象限都有默认优先级"""
        assert EisenhowerQuadrant.URGENT_IMPORTANT.default_priority == Priority.HIGH
        assert EisenhowerQuadrant.NOT_URGENT_IMPORTANT.default_priority == Priority.MEDIUM
        assert EisenhowerQuadrant.URGENT_NOT_IMPORTANT.default_priority == Priority.MEDIUM
        assert EisenhowerQuadrant.NOT_URGENT_NOT_IMPORTANT.default_priority == Priority.LOW
        assert set(QUADRANT_DEFAULT_PRIORITY) == set(EisenhowerQuadrant)

    def test_quadrant_label(self):
        assert EisenhowerQuadrant.URGENT_IMPORTANT.label == "Do First"
        assert EisenhowerQuadrant.NOT_URGENT_NOT_IMPORTANT.label == "Eliminate"

    def test_state_field_keys(self):
        """StateField 的值即存储 key"""
        assert StateField.TEAM_MEMBERS == "teamMembers"
        assert StateField.COMPLETED_POMODOROS == "completedPomodoros"
        assert StateField.TEST_SCORES == "testScores"
        assert len(list(StateField)) == 9


class TestTask:
    """Task 模型测试"""

    def test_defaults(self):
        task = Task(task_id="t1", title="Write report")
        assert task.is_completed is False
        assert task.is_archived is False
        assert task.priority == Priority.MEDIUM
        assert task.category == "Work"
        assert task.quadrant == EisenhowerQuadrant.URGENT_IMPORTANT
        assert task.shared_with == []
        assert task.due_date > task.created_at

    def test_overdue_when_past_and_not_completed(self):
        task = Task(task_id="t1", title="Late", due_date=NOW - timedelta(hours=1))
        assert task.is_overdue_at(NOW) is True

    def test_not_overdue_when_completed(self):
        task = Task(
            task_id="t1",
            title="Done",
            due_date=NOW - timedelta(hours=1),
            is_completed=True,
        )
        assert task.is_overdue_at(NOW) is False

    def test_not_overdue_when_due_in_future(self):
        task = Task(task_id="t1", title="Later", due_date=NOW + timedelta(hours=1))
        assert task.is_overdue_at(NOW) is False

    def test_is_overdue_property_uses_current_time(self):
        past = Task(task_id="t1", title="Old", due_date=datetime(2000, 1, 1, tzinfo=UTC))
        assert past.is_overdue is True

    def test_naive_due_date_normalized_to_utc(self):
        """无时区的截止时间按本地时间解释并转为 UTC"""
        naive = datetime(2000, 1, 1, 9, 0)
        task = Task(task_id="t1", title="Old", due_date=naive, created_at=naive)
        assert task.due_date.tzinfo is not None
        assert task.due_date == naive.astimezone(UTC)
        assert task.created_at.tzinfo is not None
        assert task.is_overdue is True

    def test_naive_assignment_normalized(self):
        task = Task(task_id="t1", title="Later", due_date=NOW)
        task.due_date = datetime.now() + timedelta(days=1)
        assert task.due_date.tzinfo is not None
        assert task.is_overdue is False

    def test_quadrant_serialized_value(self):
        task = Task(task_id="t1", title="x", quadrant=EisenhowerQuadrant.NOT_URGENT_NOT_IMPORTANT)
        assert task.model_dump(mode="json")["quadrant"] == "notUrgentNotImportant"
        assert EisenhowerQuadrant("urgentImportant") == EisenhowerQuadrant.URGENT_IMPORTANT

    def test_invalid_priority_rejected(self):
        with pytest.raises(ValidationError):
            Task(task_id="t1", title="x", priority="urgent")

    def test_json_roundtrip(self):
        task = Task(
            task_id="t1",
            title="Share me",
            created_at=NOW,
            due_date=NOW + timedelta(days=2),
            shared_with=["m1", "m2"],
            quadrant=EisenhowerQuadrant.NOT_URGENT_IMPORTANT,
        )
        restored = Task.model_validate_json(task.model_dump_json())
        assert restored == task

    def test_is_overdue_not_serialized(self):
        task = Task(task_id="t1", title="x")
        assert "is_overdue" not in task.model_dump()


class TestNote:
    def test_defaults(self):
        note = Note(note_id="n1", title="Idea")
        assert note.content == ""
        assert note.category == "Work"

    def test_naive_created_at_normalized(self):
        note = Note(note_id="n1", title="Idea", created_at=datetime(2026, 3, 18, 8, 0))
        assert note.created_at.tzinfo is not None


class TestTeamMember:
    """TeamMember 模型测试"""

    def _member(self, name: str) -> TeamMember:
        return TeamMember(member_id="m1", name=name, email="x@example.com")

    def test_initials_first_and_last(self):
        assert self._member("Sarah Johnson").initials == "SJ"

    def test_initials_uses_last_token(self):
        assert self._member("Mary Ann Smith").initials == "MS"

    def test_initials_single_token(self):
        assert self._member("Cher").initials == "C"

    def test_initials_empty_name(self):
        assert self._member("").initials == ""

    def test_color_bounds(self):
        with pytest.raises(ValidationError):
            MemberColor(red=1.5, green=0.0, blue=0.0)


class TestCourseTest:
    def test_passing_score_range(self):
        with pytest.raises(ValidationError):
            CourseTest(test_id="t", title="x", passing_score=101)

    def test_default_passing_score(self):
        assert CourseTest(test_id="t", title="x").passing_score == 70


class TestPalette:
    """成员颜色"""

    def test_demo_members_use_palette(self):
        assert len(MEMBER_PALETTE) == 8
        assert all(m.color in MEMBER_PALETTE for m in build_demo_members())
