"""分析与成就派生测试"""

from datetime import UTC, datetime, timedelta, timezone

from focusdeck.core.analytics import (
    achievements,
    completion_rate,
    filter_tasks,
    has_early_morning_task,
    productivity_heatmap,
    productivity_score,
    shared_tasks,
    tasks_by_quadrant,
    trend_data,
    unlocked_count,
    weekly_comparison,
)
from focusdeck.core.models import EisenhowerQuadrant, Priority, Task, TaskFilter
from focusdeck.core.productivity_store import ProductivityStore


def _task(
    task_id: str,
    *,
    title: str = "task",
    completed: bool = False,
    archived: bool = False,
    created_at: datetime | None = None,
    due_date: datetime | None = None,
    priority: Priority = Priority.MEDIUM,
    quadrant: EisenhowerQuadrant = EisenhowerQuadrant.URGENT_IMPORTANT,
    shared_with: list[str] | None = None,
) -> Task:
    created = created_at or datetime(2026, 3, 18, 10, 0, tzinfo=UTC)
    return Task(
        task_id=task_id,
        title=title,
        is_completed=completed,
        is_archived=archived,
        created_at=created,
        due_date=due_date or created + timedelta(days=1),
        priority=priority,
        quadrant=quadrant,
        shared_with=shared_with or [],
    )


class TestScore:
    """完成率与综合得分"""

    def test_completion_rate_empty(self):
        assert completion_rate([]) == 0.0

    def test_completion_rate(self):
        tasks = [_task("a", completed=True), _task("b"), _task("c"), _task("d")]
        assert completion_rate(tasks) == 0.25

    def test_empty_store_scores_zero(self, store: ProductivityStore):
        assert productivity_score(store) == 0

    def test_score_averages_three_components(self, store: ProductivityStore):
        for i in range(4):
            task = store.add_task(f"t{i}")
            if i < 2:
                store.toggle_task(task.task_id)
        for _ in range(10):
            store.record_focus_session(25)
        # 完成率 0.5、番茄钟 10/20、连续天数 min(10/7, 1)
        assert productivity_score(store) == 66

    def test_score_capped_at_100(self, store: ProductivityStore):
        task = store.add_task("done")
        store.toggle_task(task.task_id)
        for _ in range(30):
            store.record_focus_session(25)
        assert productivity_score(store) == 100


class TestAchievements:
    """成就"""

    def test_eight_definitions_all_locked_on_empty(self, store: ProductivityStore):
        result = achievements(store)
        assert len(result) == 8
        assert all(not a.is_unlocked for a in result)
        assert all(a.progress == 0.0 for a in result)
        assert unlocked_count(store) == 0

    def test_first_task_unlocks(self, store: ProductivityStore):
        task = store.add_task("first")
        store.toggle_task(task.task_id)

        by_id = {a.achievement_id: a for a in achievements(store)}
        assert by_id["first_task"].is_unlocked is True
        assert by_id["task_master"].progress == 0.1
        assert by_id["matrix_master"].progress == 1 / 20

    def test_counter_achievements(self, store: ProductivityStore):
        for _ in range(10):
            store.record_focus_session(50)

        by_id = {a.achievement_id: a for a in achievements(store)}
        assert by_id["focus_ninja"].is_unlocked is True
        assert by_id["week_warrior"].is_unlocked is True
        assert by_id["productivity_pro"].is_unlocked is True
        assert unlocked_count(store) == 3

    def test_organizer_needs_five_categories(self, store: ProductivityStore):
        for category in ("Work", "Personal", "Study", "Health"):
            store.add_task(category, category=category)
        by_id = {a.achievement_id: a for a in achievements(store)}
        assert by_id["organizer"].is_unlocked is False
        assert by_id["organizer"].progress == 0.8

        store.add_task("Shopping", category="Shopping")
        by_id = {a.achievement_id: a for a in achievements(store)}
        assert by_id["organizer"].is_unlocked is True

    def test_reset_relocks_counter_achievements(self, store: ProductivityStore):
        for _ in range(10):
            store.record_focus_session(50)
        store.reset_achievements()
        assert unlocked_count(store) == 0


class TestFilterTasks:
    """任务列表筛选"""

    def test_archived_always_excluded(self):
        tasks = [_task("a"), _task("b", archived=True)]
        assert [t.task_id for t in filter_tasks(tasks)] == ["a"]

    def test_active_and_completed(self):
        tasks = [_task("a"), _task("b", completed=True)]
        assert [t.task_id for t in filter_tasks(tasks, TaskFilter.ACTIVE)] == ["a"]
        assert [t.task_id for t in filter_tasks(tasks, TaskFilter.COMPLETED)] == ["b"]

    def test_high_priority_excludes_completed(self):
        tasks = [
            _task("a", priority=Priority.HIGH),
            _task("b", priority=Priority.HIGH, completed=True),
            _task("c", priority=Priority.LOW),
        ]
        assert [t.task_id for t in filter_tasks(tasks, TaskFilter.HIGH_PRIORITY)] == ["a"]

    def test_today(self, fixed_now):
        tasks = [
            _task("a", due_date=fixed_now + timedelta(hours=5)),
            _task("b", due_date=fixed_now + timedelta(days=1)),
        ]
        result = filter_tasks(tasks, TaskFilter.TODAY, now=fixed_now)
        assert [t.task_id for t in result] == ["a"]

    def test_today_uses_reference_timezone(self):
        tz = timezone(timedelta(hours=8))
        now = datetime(2026, 3, 18, 1, 0, tzinfo=tz)
        # UTC 3 月 17 日 20:00 即东八区 3 月 18 日 04:00
        task = _task("a", due_date=datetime(2026, 3, 17, 20, 0, tzinfo=UTC))
        assert filter_tasks([task], TaskFilter.TODAY, now=now) == [task]

    def test_search_case_insensitive(self):
        tasks = [_task("a", title="Write Report"), _task("b", title="Gym")]
        assert [t.task_id for t in filter_tasks(tasks, search="report")] == ["a"]

    def test_search_combines_with_filter(self):
        tasks = [
            _task("a", title="report one", completed=True),
            _task("b", title="report two"),
        ]
        result = filter_tasks(tasks, TaskFilter.ACTIVE, search="REPORT")
        assert [t.task_id for t in result] == ["b"]


class TestGrouping:
    """矩阵分组与共享任务"""

    def test_all_quadrants_present(self):
        groups = tasks_by_quadrant([])
        assert set(groups) == set(EisenhowerQuadrant)
        assert all(items == [] for items in groups.values())

    def test_groups_open_tasks_only(self):
        tasks = [
            _task("a", quadrant=EisenhowerQuadrant.NOT_URGENT_IMPORTANT),
            _task("b", quadrant=EisenhowerQuadrant.NOT_URGENT_IMPORTANT, completed=True),
            _task("c", quadrant=EisenhowerQuadrant.NOT_URGENT_IMPORTANT, archived=True),
            _task("d", quadrant=EisenhowerQuadrant.URGENT_IMPORTANT),
        ]
        groups = tasks_by_quadrant(tasks)
        assert [t.task_id for t in groups[EisenhowerQuadrant.NOT_URGENT_IMPORTANT]] == ["a"]
        assert [t.task_id for t in groups[EisenhowerQuadrant.URGENT_IMPORTANT]] == ["d"]

    def test_shared_tasks(self):
        tasks = [_task("a", shared_with=["m1"]), _task("b")]
        assert [t.task_id for t in shared_tasks(tasks)] == ["a"]


class TestTimeSeries:
    """热力图、周对比、趋势"""

    def test_early_morning(self, fixed_now):
        early = _task("a", completed=True, created_at=fixed_now.replace(hour=7))
        late = _task("b", completed=True, created_at=fixed_now.replace(hour=10))
        open_early = _task("c", created_at=fixed_now.replace(hour=6))
        assert has_early_morning_task([early], now=fixed_now) is True
        assert has_early_morning_task([late, open_early], now=fixed_now) is False

    def test_heatmap_window(self, fixed_now):
        heatmap = productivity_heatmap([], fixed_now)
        assert len(heatmap) == 28
        assert heatmap[0].day == fixed_now.date() - timedelta(days=27)
        assert heatmap[-1].day == fixed_now.date()
        assert all(day.intensity == 0.0 for day in heatmap)

    def test_heatmap_intensity(self, fixed_now):
        tasks = [_task(f"t{i}", completed=True, created_at=fixed_now) for i in range(3)]
        tasks += [_task(f"y{i}", completed=True, created_at=fixed_now - timedelta(days=1))
                  for i in range(7)]
        tasks.append(_task("open", created_at=fixed_now))

        heatmap = productivity_heatmap(tasks, fixed_now, days=7)

        assert heatmap[-1].intensity == 0.6
        assert heatmap[-2].intensity == 1.0
        assert heatmap[0].intensity == 0.0

    def test_weekly_comparison(self, fixed_now):
        # 2026-03-18 是周三，上周为 3 月 9 日至 15 日
        tasks = [
            _task("a", completed=True, created_at=fixed_now),
            _task("b", completed=True, created_at=datetime(2026, 3, 16, 0, 5, tzinfo=UTC)),
            _task("c", completed=True, created_at=datetime(2026, 3, 15, 23, 0, tzinfo=UTC)),
            _task("d", completed=True, created_at=datetime(2026, 3, 1, tzinfo=UTC)),
            _task("e", created_at=fixed_now),
        ]
        assert weekly_comparison(tasks, fixed_now) == [1, 2]

    def test_trend_data(self, fixed_now):
        tasks = [
            _task("a", completed=True, created_at=fixed_now),
            _task("b", completed=True, created_at=fixed_now),
            _task("c", completed=True, created_at=fixed_now - timedelta(days=6)),
            _task("d", completed=True, created_at=fixed_now - timedelta(days=7)),
        ]
        assert trend_data(tasks, fixed_now) == [1, 0, 0, 0, 0, 0, 2]
