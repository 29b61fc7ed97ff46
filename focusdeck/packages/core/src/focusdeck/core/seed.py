"""演示数据与静态课程目录

- build_demo_tasks / build_demo_notes / build_demo_members：首次启动时写入的示例数据
- build_lessons / build_tests：静态学习目录，使用稳定 ID，进度跨重启保留
"""

from datetime import datetime, timedelta

from ulid import ULID

from .models.enums import EisenhowerQuadrant, LessonDifficulty, Priority
from .models.learning import CourseTest, Lesson, TestQuestion
from .models.task import Note, Task
from .models.team import BLUE, CYAN, GREEN, ORANGE, PINK, PURPLE, TeamMember

DEMO_COMPLETED_POMODOROS = 12
DEMO_FOCUS_STREAK = 5
DEMO_TOTAL_FOCUS_MINUTES = 300

LESSON_INTRO = "lesson-introduction"
LESSON_MATRIX = "lesson-eisenhower-matrix"
LESSON_POMODORO = "lesson-pomodoro"
LESSON_TEAM = "lesson-team-collaboration"
LESSON_ANALYTICS = "lesson-advanced-analytics"

TEST_FUNDAMENTALS = "test-productivity-fundamentals"
TEST_TIME_MANAGEMENT = "test-time-management"
TEST_ADVANCED = "test-advanced-productivity"


def _task(
    now: datetime,
    title: str,
    priority: Priority,
    category: str,
    quadrant: EisenhowerQuadrant,
    *,
    completed: bool = False,
    due_in: timedelta = timedelta(days=1),
) -> Task:
    return Task(
        task_id=str(ULID()),
        title=title,
        priority=priority,
        category=category,
        quadrant=quadrant,
        is_completed=completed,
        created_at=now,
        due_date=now + due_in,
    )


def build_demo_tasks(now: datetime) -> list[Task]:
    """8 个示例任务，覆盖全部象限"""
    q = EisenhowerQuadrant
    return [
        _task(now, "Review quarterly reports", Priority.HIGH, "Work", q.URGENT_IMPORTANT,
              completed=True),
        _task(now, "Prepare presentation slides", Priority.HIGH, "Work", q.URGENT_IMPORTANT,
              due_in=timedelta(hours=1)),
        _task(now, "Team meeting at 2 PM", Priority.MEDIUM, "Work", q.URGENT_NOT_IMPORTANT,
              due_in=timedelta(hours=2)),
        _task(now, "Strategic planning", Priority.HIGH, "Work", q.NOT_URGENT_IMPORTANT),
        _task(now, "Email responses", Priority.LOW, "Work", q.URGENT_NOT_IMPORTANT),
        _task(now, "Learn new skills", Priority.MEDIUM, "Study", q.NOT_URGENT_IMPORTANT),
        _task(now, "Social media check", Priority.LOW, "Personal", q.NOT_URGENT_NOT_IMPORTANT),
        _task(now, "Workout session", Priority.HIGH, "Health", q.NOT_URGENT_IMPORTANT,
              completed=True),
    ]


def build_demo_notes(now: datetime) -> list[Note]:
    """3 条示例笔记"""
    return [
        Note(
            note_id=str(ULID()),
            title="Meeting Notes - Q1 Planning",
            content=(
                "Discussed Q1 objectives and team allocation. Key points:\n"
                "- Increase productivity by 20%\n"
                "- New project timeline\n"
                "- Budget allocation"
            ),
            category="Meeting",
            created_at=now,
        ),
        Note(
            note_id=str(ULID()),
            title="Project Ideas",
            content=(
                "Brainstorming session outcomes:\n\n"
                "1. Automated reporting system\n"
                "2. Team collaboration tools\n"
                "3. Client portal improvements"
            ),
            category="Ideas",
            created_at=now,
        ),
        Note(
            note_id=str(ULID()),
            title="Learning Resources",
            content=(
                "Topics to study:\n"
                "- Async patterns\n"
                "- Reactive state management\n"
                "- Performance optimization"
            ),
            category="Study",
            created_at=now,
        ),
    ]


def build_demo_members() -> list[TeamMember]:
    """4 名示例团队成员"""
    return [
        TeamMember(member_id=str(ULID()), name="Sarah Johnson", email="sarah@company.com",
                   role="Team Lead", color=PURPLE, is_online=True),
        TeamMember(member_id=str(ULID()), name="Mike Chen", email="mike@company.com",
                   role="Developer", color=BLUE, is_online=True),
        TeamMember(member_id=str(ULID()), name="Emma Davis", email="emma@company.com",
                   role="Designer", color=PINK, is_online=False),
        TeamMember(member_id=str(ULID()), name="Alex Smith", email="alex@company.com",
                   role="Manager", color=GREEN, is_online=True),
    ]


def build_lessons() -> list[Lesson]:
    """5 节课程，线性解锁链：每节依赖上一节"""
    return [
        Lesson(
            lesson_id=LESSON_INTRO,
            title="Introduction to Productivity",
            description="Learn the fundamentals of productivity and time management",
            icon="book.fill",
            color=BLUE,
            duration=10,
            difficulty=LessonDifficulty.BEGINNER,
            order=1,
            content=[
                "Welcome to the Productivity Master Course! In this lesson, you'll learn "
                "the core principles of effective productivity.",
                "Productivity isn't about doing more things, it's about doing the right "
                "things effectively. The key is prioritization and focus.",
                "Throughout this course, you'll learn proven techniques used by successful "
                "professionals worldwide.",
                "Remember: Small, consistent actions lead to remarkable results over time. "
                "Let's get started!",
            ],
        ),
        Lesson(
            lesson_id=LESSON_MATRIX,
            title="The Eisenhower Matrix",
            description="Master the art of prioritization using the Eisenhower Matrix",
            icon="square.grid.2x2.fill",
            color=PURPLE,
            duration=15,
            difficulty=LessonDifficulty.BEGINNER,
            order=2,
            content=[
                "The Eisenhower Matrix is a powerful tool for prioritizing tasks based on "
                "urgency and importance.",
                "Urgent & Important: Do these tasks immediately. They're critical and "
                "time-sensitive.",
                "Not Urgent & Important: Schedule these tasks. They're crucial for "
                "long-term success.",
                "Urgent & Not Important: Delegate these if possible. They're interruptions "
                "that don't contribute to your goals.",
                "Not Urgent & Not Important: Eliminate these time-wasters. They provide "
                "little to no value.",
            ],
            required_lesson_id=LESSON_INTRO,
        ),
        Lesson(
            lesson_id=LESSON_POMODORO,
            title="Pomodoro Technique",
            description="Use focused time blocks to maximize your concentration",
            icon="timer",
            color=ORANGE,
            duration=12,
            difficulty=LessonDifficulty.INTERMEDIATE,
            order=3,
            content=[
                "The Pomodoro Technique is a time management method that uses focused "
                "25-minute work sessions.",
                "How it works: Work for 25 minutes with complete focus, then take a "
                "5-minute break.",
                "After 4 pomodoros, take a longer break of 15-30 minutes to recharge.",
                "This technique leverages your brain's natural attention span and "
                "prevents burnout.",
                "The key is avoiding all distractions during your focused work periods.",
            ],
            required_lesson_id=LESSON_MATRIX,
        ),
        Lesson(
            lesson_id=LESSON_TEAM,
            title="Team Collaboration",
            description="Learn effective strategies for working with teams",
            icon="person.3.fill",
            color=GREEN,
            duration=18,
            difficulty=LessonDifficulty.INTERMEDIATE,
            order=4,
            content=[
                "Effective team collaboration multiplies individual productivity and "
                "creates synergy.",
                "Clear Communication: Always communicate expectations, deadlines, and "
                "progress clearly.",
                "Shared Goals: Ensure everyone understands and works toward common "
                "objectives.",
                "Regular Check-ins: Schedule consistent meetings to stay aligned and "
                "address blockers.",
                "Use collaboration tools effectively to streamline workflows and reduce "
                "miscommunication.",
            ],
            required_lesson_id=LESSON_POMODORO,
        ),
        Lesson(
            lesson_id=LESSON_ANALYTICS,
            title="Advanced Analytics",
            description="Track and optimize your performance using data",
            icon="chart.bar.fill",
            color=CYAN,
            duration=20,
            difficulty=LessonDifficulty.ADVANCED,
            order=5,
            content=[
                "What gets measured gets improved. Analytics help you understand your "
                "productivity patterns.",
                "Track key metrics: completion rate, focus time, task distribution, and "
                "productivity trends.",
                "Identify your peak performance hours and schedule important work during "
                "those times.",
                "Use data to spot bottlenecks and areas for improvement in your workflow.",
                "Regular review of your analytics leads to continuous improvement and "
                "better outcomes.",
            ],
            required_lesson_id=LESSON_TEAM,
        ),
    ]


def _questions(test_id: str, items: list[tuple[str, list[str], int]]) -> list[TestQuestion]:
    return [
        TestQuestion(
            question_id=f"{test_id}-q{index}",
            question=question,
            options=options,
            correct_answer=correct,
        )
        for index, (question, options, correct) in enumerate(items, start=1)
    ]


def build_tests() -> list[CourseTest]:
    """3 套测验，分别在第 1、3、5 节课完成后解锁"""
    return [
        CourseTest(
            test_id=TEST_FUNDAMENTALS,
            title="Productivity Fundamentals",
            passing_score=80,
            required_lesson_id=LESSON_INTRO,
            questions=_questions(TEST_FUNDAMENTALS, [
                ("What is the primary goal of productivity?",
                 ["Doing more tasks in less time", "Doing the right things effectively",
                  "Working longer hours", "Multitasking efficiently"], 1),
                ("Which quadrant of the Eisenhower Matrix should you focus on first?",
                 ["Not Urgent & Not Important", "Urgent & Not Important",
                  "Not Urgent & Important", "Urgent & Important"], 3),
                ("What should you do with tasks that are Not Urgent & Not Important?",
                 ["Do them immediately", "Schedule them", "Delegate them",
                  "Eliminate them"], 3),
                ("How does consistent small action lead to results?",
                 ["It doesn't, only big actions matter", "Through compound effect over time",
                  "By working faster", "By multitasking"], 1),
                ("What is the best approach to task prioritization?",
                 ["First come, first served", "Based on urgency and importance",
                  "Random selection", "Easiest tasks first"], 1),
            ]),
        ),
        CourseTest(
            test_id=TEST_TIME_MANAGEMENT,
            title="Time Management Mastery",
            passing_score=70,
            required_lesson_id=LESSON_POMODORO,
            questions=_questions(TEST_TIME_MANAGEMENT, [
                ("How long is a standard Pomodoro work session?",
                 ["15 minutes", "20 minutes", "25 minutes", "30 minutes"], 2),
                ("After how many Pomodoros should you take a long break?",
                 ["2 Pomodoros", "3 Pomodoros", "4 Pomodoros", "5 Pomodoros"], 2),
                ("What is the main benefit of the Pomodoro Technique?",
                 ["Working longer hours", "Doing more tasks",
                  "Maintaining focus and preventing burnout", "Eliminating all breaks"], 2),
                ("How should you handle distractions during a Pomodoro?",
                 ["Deal with them immediately", "Avoid them completely", "Multitask",
                  "Pause the timer"], 1),
                ("What is the ideal length for a short break between Pomodoros?",
                 ["2 minutes", "5 minutes", "10 minutes", "15 minutes"], 1),
            ]),
        ),
        CourseTest(
            test_id=TEST_ADVANCED,
            title="Advanced Productivity",
            passing_score=75,
            required_lesson_id=LESSON_ANALYTICS,
            questions=_questions(TEST_ADVANCED, [
                ("What is the most important aspect of team collaboration?",
                 ["Having many meetings", "Clear communication", "Working independently",
                  "Avoiding conflicts"], 1),
                ("Why is tracking productivity metrics important?",
                 ["To punish poor performance", "To compare with others",
                  "To identify patterns and improve", "It's not important"], 2),
                ("When should you schedule your most important tasks?",
                 ["At the end of the day", "During your peak performance hours",
                  "During lunch break", "Late at night"], 1),
                ("What leads to continuous improvement in productivity?",
                 ["Working more hours", "Regular review and adjustment",
                  "Following the same routine", "Avoiding change"], 1),
                ("What is the purpose of shared goals in team work?",
                 ["To create competition", "To ensure alignment and common purpose",
                  "To assign blame", "To reduce workload"], 1),
            ]),
        ),
    ]
