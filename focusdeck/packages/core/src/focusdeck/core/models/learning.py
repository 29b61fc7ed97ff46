"""学习中心数据模型 -- Lesson / CourseTest / TestQuestion

课程与测验是静态目录，运行时只通过"完成课程"/"通过测验"改变进度。
required_lesson_id 是弱引用：为空时始终解锁，否则前置课程完成后解锁。
"""

from pydantic import BaseModel, Field

from .enums import LessonDifficulty
from .team import BLUE, MemberColor


class Lesson(BaseModel):
    """课程"""

    lesson_id: str = Field(description="稳定标识，跨进程不变")
    title: str
    description: str = Field(default="")
    icon: str = Field(default="book.fill", description="图标引用")
    color: MemberColor = Field(default=BLUE)
    duration: int = Field(ge=0, description="时长（分钟）")
    difficulty: LessonDifficulty = Field(default=LessonDifficulty.BEGINNER)
    order: int = Field(description="展示顺序")
    content: list[str] = Field(default_factory=list, description="分页内容")
    required_lesson_id: str | None = Field(default=None, description="前置课程 ID")


class TestQuestion(BaseModel):
    """测验题目"""

    __test__ = False

    question_id: str
    question: str
    options: list[str] = Field(default_factory=list)
    correct_answer: int = Field(ge=0, description="正确选项下标")


class CourseTest(BaseModel):
    """测验"""

    test_id: str = Field(description="稳定标识，跨进程不变")
    title: str
    questions: list[TestQuestion] = Field(default_factory=list)
    passing_score: int = Field(default=70, ge=0, le=100, description="及格分（百分比）")
    required_lesson_id: str | None = Field(default=None, description="前置课程 ID")


class TestResult(BaseModel):
    """一次测验提交的结果"""

    __test__ = False

    test_id: str
    correct_count: int = Field(ge=0)
    total_questions: int = Field(ge=0)
    score: int = Field(ge=0, le=100, description="得分（百分比）")
    passed: bool
