"""分析与成就 -- 对 Store 状态的纯函数派生

所有结果在读取时重新计算，不缓存、不持久化，避免与计数器漂移。
"""

from collections import defaultdict
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from .config import TASK_CATEGORIES
from .models.analytics import Achievement, HeatmapDay
from .models.enums import EisenhowerQuadrant, Priority, TaskFilter
from .models.task import Task

if TYPE_CHECKING:
    from .productivity_store import ProductivityStore

# 番茄钟得分满分所需次数
POMODORO_SCORE_TARGET = 20
# 连续天数得分满分所需天数
STREAK_SCORE_TARGET = 7
# 热力图单日满强度所需完成数
HEATMAP_FULL_INTENSITY = 5


def _ratio(value: int, target: int) -> float:
    return min(value / target, 1.0)


def completion_rate(tasks: list[Task]) -> float:
    """完成率，无任务时为 0"""
    if not tasks:
        return 0.0
    return sum(1 for t in tasks if t.is_completed) / len(tasks)


def productivity_score(store: "ProductivityStore") -> int:
    """综合得分 0-100：完成率、番茄钟、连续天数三项等权平均"""
    components = (
        completion_rate(store.tasks),
        _ratio(store.completed_pomodoros, POMODORO_SCORE_TARGET),
        _ratio(store.focus_streak, STREAK_SCORE_TARGET),
    )
    return int(sum(components) / len(components) * 100)


def achievements(store: "ProductivityStore") -> list[Achievement]:
    """8 个成就的实时解锁状态与进度"""
    tasks = store.tasks
    completed = sum(1 for t in tasks if t.is_completed)
    shared = sum(1 for t in tasks if t.shared_with)

    # (id, 标题, 描述, 图标, 当前值, 阈值)
    definitions = [
        ("first_task", "First Step", "Complete your first task",
         "star.fill", completed, 1),
        ("task_master", "Task Master", "Complete 10 tasks",
         "crown.fill", completed, 10),
        ("team_player", "Team Player", "Share 5 tasks with team",
         "person.3.fill", shared, 5),
        ("focus_ninja", "Focus Ninja", "Complete 10 focus sessions",
         "bolt.fill", store.completed_pomodoros, 10),
        ("week_warrior", "Week Warrior", "Maintain 7-day streak",
         "flame.fill", store.focus_streak, 7),
        ("productivity_pro", "Productivity Pro", "Accumulate 500 focus minutes",
         "timer", store.total_focus_minutes, 500),
        ("matrix_master", "Matrix Master", "Use Eisenhower Matrix 20 times",
         "square.grid.2x2.fill", len(tasks), 20),
        ("organizer", "Super Organizer", "Use all 5 categories",
         "folder.fill", len(store.used_categories), len(TASK_CATEGORIES)),
    ]

    return [
        Achievement(
            achievement_id=achievement_id,
            title=title,
            description=description,
            icon=icon,
            is_unlocked=value >= target,
            progress=max(_ratio(value, target), 0.0),
        )
        for achievement_id, title, description, icon, value, target in definitions
    ]


def unlocked_count(store: "ProductivityStore") -> int:
    return sum(1 for a in achievements(store) if a.is_unlocked)


def _same_day(moment: datetime, now: datetime) -> bool:
    return moment.astimezone(now.tzinfo).date() == now.date()


def filter_tasks(
    tasks: Iterable[Task],
    task_filter: TaskFilter = TaskFilter.ALL,
    search: str = "",
    now: datetime | None = None,
) -> list[Task]:
    """任务列表视图：排除已归档，再按搜索词和筛选条件过滤

    Args:
        tasks: 任务集合
        task_filter: 筛选条件
        search: 标题搜索词（大小写不敏感）
        now: 当前时间，TODAY 筛选使用
    """
    result = [t for t in tasks if not t.is_archived]

    if search:
        needle = search.casefold()
        result = [t for t in result if needle in t.title.casefold()]

    match task_filter:
        case TaskFilter.ACTIVE:
            result = [t for t in result if not t.is_completed]
        case TaskFilter.COMPLETED:
            result = [t for t in result if t.is_completed]
        case TaskFilter.HIGH_PRIORITY:
            result = [
                t for t in result if t.priority == Priority.HIGH and not t.is_completed
            ]
        case TaskFilter.TODAY:
            reference = now or datetime.now().astimezone()
            result = [t for t in result if _same_day(t.due_date, reference)]

    return result


def tasks_by_quadrant(tasks: Iterable[Task]) -> dict[EisenhowerQuadrant, list[Task]]:
    """矩阵视图：未完成且未归档的任务按象限分组（空象限也保留）"""
    groups: dict[EisenhowerQuadrant, list[Task]] = {q: [] for q in EisenhowerQuadrant}
    for task in tasks:
        if task.is_completed or task.is_archived:
            continue
        groups[task.quadrant].append(task)
    return groups


def shared_tasks(tasks: Iterable[Task]) -> list[Task]:
    return [t for t in tasks if t.shared_with]


def has_early_morning_task(tasks: Iterable[Task], now: datetime | None = None) -> bool:
    """是否有在 9 点前创建并已完成的任务"""
    tz = (now or datetime.now().astimezone()).tzinfo
    return any(t.is_completed and t.created_at.astimezone(tz).hour < 9 for t in tasks)


def _completed_per_day(tasks: Iterable[Task], now: datetime) -> dict:
    counts: dict = defaultdict(int)
    for task in tasks:
        if task.is_completed:
            counts[task.created_at.astimezone(now.tzinfo).date()] += 1
    return counts


def productivity_heatmap(
    tasks: Iterable[Task],
    now: datetime,
    days: int = 28,
) -> list[HeatmapDay]:
    """最近 days 天的完成强度，按日期升序"""
    counts = _completed_per_day(tasks, now)
    today = now.date()
    return [
        HeatmapDay(
            day=today - timedelta(days=offset),
            intensity=_ratio(counts[today - timedelta(days=offset)], HEATMAP_FULL_INTENSITY),
        )
        for offset in range(days - 1, -1, -1)
    ]


def weekly_comparison(tasks: Iterable[Task], now: datetime) -> list[int]:
    """[上周完成数, 本周完成数]（按 ISO 周）"""
    this_week = now.isocalendar()[:2]
    last_week = (now - timedelta(weeks=1)).isocalendar()[:2]
    totals = {this_week: 0, last_week: 0}
    for task in tasks:
        if not task.is_completed:
            continue
        week = task.created_at.astimezone(now.tzinfo).isocalendar()[:2]
        if week in totals:
            totals[week] += 1
    return [totals[last_week], totals[this_week]]


def trend_data(tasks: Iterable[Task], now: datetime, days: int = 7) -> list[int]:
    """最近 days 天每日完成数，按日期升序"""
    counts = _completed_per_day(tasks, now)
    today = now.date()
    return [counts[today - timedelta(days=offset)] for offset in range(days - 1, -1, -1)]
