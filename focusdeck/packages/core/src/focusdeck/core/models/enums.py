"""枚举定义

包含 Priority、EisenhowerQuadrant、LessonDifficulty、TaskFilter、StateField 枚举，
以及象限到默认优先级的映射 QUADRANT_DEFAULT_PRIORITY。
"""

from enum import StrEnum


class Priority(StrEnum):
    """任务优先级"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EisenhowerQuadrant(StrEnum):
    """艾森豪威尔矩阵象限"""

    URGENT_IMPORTANT = "urgentImportant"
    NOT_URGENT_IMPORTANT = "notUrgentImportant"
    URGENT_NOT_IMPORTANT = "urgentNotImportant"
    NOT_URGENT_NOT_IMPORTANT = "notUrgentNotImportant"

    @property
    def default_priority(self) -> Priority:
        """象限对应的默认优先级，任务移入象限时会覆盖原优先级"""
        return QUADRANT_DEFAULT_PRIORITY[self]

    @property
    def label(self) -> str:
        """矩阵视图中的象限名称"""
        return _QUADRANT_LABELS[self]


QUADRANT_DEFAULT_PRIORITY: dict[EisenhowerQuadrant, Priority] = {
    EisenhowerQuadrant.URGENT_IMPORTANT: Priority.HIGH,
    EisenhowerQuadrant.NOT_URGENT_IMPORTANT: Priority.MEDIUM,
    EisenhowerQuadrant.URGENT_NOT_IMPORTANT: Priority.MEDIUM,
    EisenhowerQuadrant.NOT_URGENT_NOT_IMPORTANT: Priority.LOW,
}

_QUADRANT_LABELS: dict[EisenhowerQuadrant, str] = {
    EisenhowerQuadrant.URGENT_IMPORTANT: "Do First",
    EisenhowerQuadrant.NOT_URGENT_IMPORTANT: "Schedule",
    EisenhowerQuadrant.URGENT_NOT_IMPORTANT: "Delegate",
    EisenhowerQuadrant.NOT_URGENT_NOT_IMPORTANT: "Eliminate",
}


class LessonDifficulty(StrEnum):
    """课程难度"""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TaskFilter(StrEnum):
    """任务列表筛选条件"""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
    HIGH_PRIORITY = "high_priority"
    TODAY = "today"


class StateField(StrEnum):
    """持久化字段 -- 值即存储 key

    每个字段独立防抖写入、独立加载。
    """

    TASKS = "tasks"
    NOTES = "notes"
    TEAM_MEMBERS = "teamMembers"
    COMPLETED_POMODOROS = "completedPomodoros"
    FOCUS_STREAK = "focusStreak"
    TOTAL_FOCUS_MINUTES = "totalFocusMinutes"
    COMPLETED_LESSONS = "completedLessons"
    PASSED_TESTS = "passedTests"
    TEST_SCORES = "testScores"


COUNTER_FIELDS: tuple[StateField, ...] = (
    StateField.COMPLETED_POMODOROS,
    StateField.FOCUS_STREAK,
    StateField.TOTAL_FOCUS_MINUTES,
)
