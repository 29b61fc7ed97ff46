"""FocusDeck Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .analytics import Achievement, HeatmapDay
from .enums import (
    COUNTER_FIELDS,
    QUADRANT_DEFAULT_PRIORITY,
    EisenhowerQuadrant,
    LessonDifficulty,
    Priority,
    StateField,
    TaskFilter,
)
from .learning import CourseTest, Lesson, TestQuestion, TestResult
from .task import Note, Task
from .team import MEMBER_PALETTE, MemberColor, TeamMember

__all__ = [
    # 枚举
    "Priority",
    "EisenhowerQuadrant",
    "LessonDifficulty",
    "TaskFilter",
    "StateField",
    "QUADRANT_DEFAULT_PRIORITY",
    "COUNTER_FIELDS",
    # 任务与笔记
    "Task",
    "Note",
    # 团队
    "TeamMember",
    "MemberColor",
    "MEMBER_PALETTE",
    # 学习中心
    "Lesson",
    "CourseTest",
    "TestQuestion",
    "TestResult",
    # 分析
    "Achievement",
    "HeatmapDay",
]
