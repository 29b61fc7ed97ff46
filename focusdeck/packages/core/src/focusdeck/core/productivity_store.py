"""ProductivityStore -- 应用状态中心

持有全部领域集合（任务、笔记、团队成员、学习进度、专注计数器），
提供同步的变更操作与派生视图，并以按字段防抖的方式写入键值存储。

约定：
- 内存状态是读取的唯一权威来源，持久化是尽力而为的异步副作用
- 按 ID 的变更在 ID 不存在时静默无操作
- 任何操作都不向调用方抛出异常（存储、设备服务失败均在内部吸收）
"""

import asyncio
from collections.abc import Callable, Coroutine
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

import structlog
from ulid import ULID

from .config import (
    DEFAULT_DUE_OFFSET_S,
    get_db_path,
    get_persist_debounce_s,
    seed_demo_data_enabled,
)
from .logging_config import setup_logging
from .models.enums import COUNTER_FIELDS, EisenhowerQuadrant, Priority, StateField
from .models.learning import CourseTest, Lesson, TestResult
from .models.task import Note, Task
from .models.team import TeamMember
from .seed import (
    DEMO_COMPLETED_POMODOROS,
    DEMO_FOCUS_STREAK,
    DEMO_TOTAL_FOCUS_MINUTES,
    build_demo_members,
    build_demo_notes,
    build_demo_tasks,
    build_lessons,
    build_tests,
)
from .store import KeyValueStore, create_kv_store
from .store.debounce import DebouncedWriter
from .store.state_codec import decode_field, encode_field

log = structlog.get_logger()

StateListener = Callable[[StateField], None]


class CalendarSink(Protocol):
    """日历写入接口（由 focusdeck.devices.CalendarService 实现）"""

    async def add_event(self, title: str, date: datetime) -> bool:
        ...


class ProductivityStore:
    """应用状态 Store -- 进程内单实例，显式构造后按引用传递"""

    def __init__(
        self,
        kv_store: KeyValueStore | None = None,
        *,
        debounce_s: float | None = None,
        calendar: CalendarSink | None = None,
        seed_demo_data: bool | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Args:
            kv_store: 键值存储，None 表示纯内存（不持久化）
            debounce_s: 防抖窗口（秒），默认读取配置
            calendar: 日历服务，add_task(add_to_calendar=True) 时调用
            seed_demo_data: 首次启动是否写入演示数据，默认读取配置
            clock: 当前时间来源（测试注入）
        """
        self._tasks: list[Task] = []
        self._notes: list[Note] = []
        self._team_members: list[TeamMember] = []
        self._completed_lessons: list[str] = []
        self._passed_tests: list[str] = []
        self._test_scores: dict[str, int] = {}
        self._completed_pomodoros = 0
        self._focus_streak = 0
        self._total_focus_minutes = 0

        # 静态目录：加载一次，之后不可变
        self._lessons: tuple[Lesson, ...] = tuple(build_lessons())
        self._tests: tuple[CourseTest, ...] = tuple(build_tests())

        self._kv = kv_store
        self._calendar = calendar
        self._seed_demo_data = (
            seed_demo_data_enabled() if seed_demo_data is None else seed_demo_data
        )
        self._clock = clock or (lambda: datetime.now(UTC))
        self._listeners: list[StateListener] = []
        self._background: set[asyncio.Task] = set()
        self._closed = False

        self._writer: DebouncedWriter | None = None
        if kv_store is not None:
            delay_s = get_persist_debounce_s() if debounce_s is None else debounce_s
            self._writer = DebouncedWriter(self._persist_field, delay_s=delay_s)

    # ------------------------------------------------------------------
    # 只读状态
    # ------------------------------------------------------------------

    @property
    def tasks(self) -> list[Task]:
        """全部任务（含已归档），新任务在前"""
        return list(self._tasks)

    @property
    def active_tasks(self) -> list[Task]:
        """未归档的任务"""
        return [t for t in self._tasks if not t.is_archived]

    @property
    def notes(self) -> list[Note]:
        return list(self._notes)

    @property
    def team_members(self) -> list[TeamMember]:
        return list(self._team_members)

    @property
    def lessons(self) -> list[Lesson]:
        return list(self._lessons)

    @property
    def tests(self) -> list[CourseTest]:
        return list(self._tests)

    @property
    def completed_lessons(self) -> list[str]:
        return list(self._completed_lessons)

    @property
    def passed_tests(self) -> list[str]:
        return list(self._passed_tests)

    @property
    def test_scores(self) -> dict[str, int]:
        return dict(self._test_scores)

    @property
    def completed_pomodoros(self) -> int:
        return self._completed_pomodoros

    @property
    def focus_streak(self) -> int:
        return self._focus_streak

    @property
    def total_focus_minutes(self) -> int:
        return self._total_focus_minutes

    def now(self) -> datetime:
        return self._clock()

    # ------------------------------------------------------------------
    # 派生视图（每次读取重新计算，不缓存）
    # ------------------------------------------------------------------

    @property
    def used_categories(self) -> set[str]:
        """任务中出现过的分类"""
        return {t.category for t in self._tasks}

    @property
    def course_progress(self) -> float:
        """已完成课程数 / 课程总数，无课程时为 0

        只统计目录中仍存在的课程，残留的旧 ID 不计入。
        """
        if not self._lessons:
            return 0.0
        catalog = {lesson.lesson_id for lesson in self._lessons}
        completed = sum(1 for lesson_id in self._completed_lessons if lesson_id in catalog)
        return completed / len(self._lessons)

    def is_lesson_unlocked(self, lesson: Lesson) -> bool:
        """无前置课程，或前置课程已完成"""
        if not lesson.required_lesson_id:
            return True
        return lesson.required_lesson_id in self._completed_lessons

    def is_test_unlocked(self, test: CourseTest) -> bool:
        """与课程相同的解锁规则"""
        if not test.required_lesson_id:
            return True
        return test.required_lesson_id in self._completed_lessons

    # ------------------------------------------------------------------
    # 按 ID 查询（未命中返回 None）
    # ------------------------------------------------------------------

    def get_task(self, task_id: str) -> Task | None:
        return next((t for t in self._tasks if t.task_id == task_id), None)

    def get_note(self, note_id: str) -> Note | None:
        return next((n for n in self._notes if n.note_id == note_id), None)

    def get_member(self, member_id: str) -> TeamMember | None:
        return next((m for m in self._team_members if m.member_id == member_id), None)

    def get_lesson(self, lesson_id: str) -> Lesson | None:
        return next((x for x in self._lessons if x.lesson_id == lesson_id), None)

    def get_test(self, test_id: str) -> CourseTest | None:
        return next((x for x in self._tests if x.test_id == test_id), None)

    def members_for_task(self, task_id: str) -> list[TeamMember]:
        """解析任务的 shared_with，跳过已不存在的成员"""
        task = self.get_task(task_id)
        if task is None:
            return []
        members = []
        for member_id in task.shared_with:
            member = self.get_member(member_id)
            if member is not None:
                members.append(member)
        return members

    # ------------------------------------------------------------------
    # 任务
    # ------------------------------------------------------------------

    def add_task(
        self,
        title: str,
        priority: Priority = Priority.MEDIUM,
        category: str = "Work",
        due_date: datetime | None = None,
        quadrant: EisenhowerQuadrant = EisenhowerQuadrant.URGENT_IMPORTANT,
        *,
        add_to_calendar: bool = False,
    ) -> Task:
        """创建任务并插入表头

        标题不做校验（空标题由 UI 层拦截）。
        add_to_calendar=True 且配置了日历服务时，异步写入一条日历事件。
        """
        now = self.now()
        task = Task(
            task_id=str(ULID()),
            title=title,
            priority=priority,
            category=category,
            created_at=now,
            due_date=due_date or now + timedelta(seconds=DEFAULT_DUE_OFFSET_S),
            quadrant=quadrant,
        )
        self._tasks.insert(0, task)
        self._changed(StateField.TASKS)

        if add_to_calendar and self._calendar is not None:
            self._spawn(
                self._calendar.add_event(task.title, task.due_date),
                name="calendar_add_event",
            )
        return task

    def toggle_task(self, task_id: str) -> None:
        task = self.get_task(task_id)
        if task is None:
            return
        task.is_completed = not task.is_completed
        self._changed(StateField.TASKS)

    def delete_task(self, task_id: str) -> None:
        remaining = [t for t in self._tasks if t.task_id != task_id]
        if len(remaining) == len(self._tasks):
            return
        self._tasks = remaining
        self._changed(StateField.TASKS)

    def archive_task(self, task_id: str) -> None:
        """只打归档标记，任务仍保留在完整列表中"""
        task = self.get_task(task_id)
        if task is None:
            return
        task.is_archived = True
        self._changed(StateField.TASKS)

    def update_task(
        self,
        task_id: str,
        title: str,
        priority: Priority,
        category: str,
        due_date: datetime,
    ) -> None:
        """覆盖四个可编辑字段，不影响完成/归档/象限/共享状态"""
        task = self.get_task(task_id)
        if task is None:
            return
        task.title = title
        task.priority = priority
        task.category = category
        task.due_date = due_date
        self._changed(StateField.TASKS)

    def update_task_quadrant(self, task_id: str, quadrant: EisenhowerQuadrant) -> None:
        """移动象限，同时把优先级重置为该象限的默认值"""
        task = self.get_task(task_id)
        if task is None:
            return
        task.quadrant = quadrant
        task.priority = quadrant.default_priority
        self._changed(StateField.TASKS)

    def share_task(self, task_id: str, member_ids: list[str]) -> None:
        """整体替换共享成员列表（非追加）"""
        task = self.get_task(task_id)
        if task is None:
            return
        task.shared_with = list(member_ids)
        self._changed(StateField.TASKS)

    def clear_all_tasks(self) -> None:
        self._tasks = []
        self._changed(StateField.TASKS)

    # ------------------------------------------------------------------
    # 笔记
    # ------------------------------------------------------------------

    def add_note(self, title: str, content: str, category: str = "Work") -> Note:
        note = Note(
            note_id=str(ULID()),
            title=title,
            content=content,
            category=category,
            created_at=self.now(),
        )
        self._notes.insert(0, note)
        self._changed(StateField.NOTES)
        return note

    def delete_note(self, note_id: str) -> None:
        remaining = [n for n in self._notes if n.note_id != note_id]
        if len(remaining) == len(self._notes):
            return
        self._notes = remaining
        self._changed(StateField.NOTES)

    def update_note(self, note_id: str, title: str, content: str, category: str) -> None:
        note = self.get_note(note_id)
        if note is None:
            return
        note.title = title
        note.content = content
        note.category = category
        self._changed(StateField.NOTES)

    def clear_all_notes(self) -> None:
        self._notes = []
        self._changed(StateField.NOTES)

    # ------------------------------------------------------------------
    # 团队
    # ------------------------------------------------------------------

    def add_team_member(self, member: TeamMember) -> None:
        """追加成员，不校验重复邮箱"""
        self._team_members.append(member)
        self._changed(StateField.TEAM_MEMBERS)

    # ------------------------------------------------------------------
    # 学习中心
    # ------------------------------------------------------------------

    def complete_lesson(self, lesson_id: str) -> None:
        if lesson_id in self._completed_lessons:
            return
        self._completed_lessons.append(lesson_id)
        self._changed(StateField.COMPLETED_LESSONS)

    def pass_test(self, test_id: str, score: int) -> None:
        """标记测验通过并记录最高分

        - passed_tests 幂等追加，与分数无关
        - 首次结果直接记录，之后仅在严格更高时覆盖
        """
        if test_id not in self._passed_tests:
            self._passed_tests.append(test_id)
            self._changed(StateField.PASSED_TESTS)

        current = self._test_scores.get(test_id)
        if current is None or score > current:
            self._test_scores[test_id] = score
            self._changed(StateField.TEST_SCORES)

    def submit_test(self, test_id: str, answers: list[int | None]) -> TestResult | None:
        """批改一次测验提交，达到及格分时调用 pass_test

        Args:
            test_id: 测验 ID
            answers: 按题目顺序的选项下标，未作答为 None

        Returns:
            TestResult；测验不存在时返回 None
        """
        test = self.get_test(test_id)
        if test is None:
            return None

        total = len(test.questions)
        correct = sum(
            1
            for index, question in enumerate(test.questions)
            if index < len(answers) and answers[index] == question.correct_answer
        )
        score = correct * 100 // total if total else 0
        passed = score >= test.passing_score
        if passed:
            self.pass_test(test_id, score)

        return TestResult(
            test_id=test_id,
            correct_count=correct,
            total_questions=total,
            score=score,
            passed=passed,
        )

    # ------------------------------------------------------------------
    # 专注计数器
    # ------------------------------------------------------------------

    def record_focus_session(self, duration_minutes: int) -> None:
        """番茄钟完成一次：次数 +1、连续天数 +1、累计分钟增加"""
        self._completed_pomodoros += 1
        self._focus_streak += 1
        self._total_focus_minutes += max(duration_minutes, 0)
        for field in COUNTER_FIELDS:
            self._changed(field)

    def reset_statistics(self) -> None:
        self._completed_pomodoros = 0
        self._focus_streak = 0
        self._total_focus_minutes = 0
        for field in COUNTER_FIELDS:
            self._changed(field)

    def reset_achievements(self) -> None:
        """成就完全由计数器与集合派生，重置即重置计数器"""
        self.reset_statistics()

    # ------------------------------------------------------------------
    # 订阅
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """订阅字段变更通知

        Returns:
            取消订阅的函数
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self, field: StateField) -> None:
        for listener in list(self._listeners):
            try:
                listener(field)
            except Exception as e:
                log.warning(
                    "state_listener_failed",
                    field=field.value,
                    error=str(e),
                )
        if self._writer is not None:
            self._writer.schedule(field.value)

    # ------------------------------------------------------------------
    # 生命周期与持久化
    # ------------------------------------------------------------------

    async def load(self) -> None:
        """逐字段加载持久化状态；全部为空时写入演示数据

        任一字段缺失或损坏只回退为默认值，不影响其他字段。
        """
        loaded: list[str] = []
        if self._kv is not None:
            for field in StateField:
                try:
                    raw = await self._kv.get(field.value)
                except Exception as e:
                    log.warning("state_read_failed", field=field.value, error=str(e))
                    continue
                value = decode_field(field, raw)
                if value is None:
                    continue
                self._apply_field(field, value)
                loaded.append(field.value)

        log.info("state_loaded", fields=loaded)

        if self._seed_demo_data and self._is_blank():
            self._seed()

    async def flush(self) -> None:
        """立即写出所有待写字段"""
        if self._writer is not None:
            await self._writer.flush()

    async def close(self) -> None:
        """写出待写字段、等待后台任务、关闭存储（重复调用无操作）"""
        if self._closed:
            return
        self._closed = True
        if self._background:
            await asyncio.gather(*self._background, return_exceptions=True)
        if self._writer is not None:
            await self._writer.flush()
            await self._writer.close()
        if self._kv is not None:
            await self._kv.close()

    @property
    def pending_fields(self) -> frozenset[str]:
        """尚未写入存储的字段"""
        if self._writer is None:
            return frozenset()
        return self._writer.pending

    def _field_value(self, field: StateField) -> Any:
        values: dict[StateField, Callable[[], Any]] = {
            StateField.TASKS: lambda: self._tasks,
            StateField.NOTES: lambda: self._notes,
            StateField.TEAM_MEMBERS: lambda: self._team_members,
            StateField.COMPLETED_POMODOROS: lambda: self._completed_pomodoros,
            StateField.FOCUS_STREAK: lambda: self._focus_streak,
            StateField.TOTAL_FOCUS_MINUTES: lambda: self._total_focus_minutes,
            StateField.COMPLETED_LESSONS: lambda: self._completed_lessons,
            StateField.PASSED_TESTS: lambda: self._passed_tests,
            StateField.TEST_SCORES: lambda: self._test_scores,
        }
        return values[field]()

    def _apply_field(self, field: StateField, value: Any) -> None:
        match field:
            case StateField.TASKS:
                self._tasks = value
            case StateField.NOTES:
                self._notes = value
            case StateField.TEAM_MEMBERS:
                self._team_members = value
            case StateField.COMPLETED_POMODOROS:
                self._completed_pomodoros = value
            case StateField.FOCUS_STREAK:
                self._focus_streak = value
            case StateField.TOTAL_FOCUS_MINUTES:
                self._total_focus_minutes = value
            case StateField.COMPLETED_LESSONS:
                self._completed_lessons = list(dict.fromkeys(value))
            case StateField.PASSED_TESTS:
                self._passed_tests = list(dict.fromkeys(value))
            case StateField.TEST_SCORES:
                self._test_scores = value

    async def _persist_field(self, key: str) -> None:
        """防抖到期后的实际写入：编码当前（最新）值"""
        if self._kv is None:
            return
        field = StateField(key)
        raw = encode_field(field, self._field_value(field))
        await self._kv.put(key, raw)
        log.debug("state_persisted", field=key, size=len(raw))

    def _is_blank(self) -> bool:
        return not (
            self._tasks
            or self._notes
            or self._team_members
            or self._completed_lessons
            or self._passed_tests
            or self._test_scores
            or self._completed_pomodoros
            or self._focus_streak
            or self._total_focus_minutes
        )

    def _seed(self) -> None:
        now = self.now()
        self._tasks = build_demo_tasks(now)
        self._notes = build_demo_notes(now)
        self._team_members = build_demo_members()
        self._completed_pomodoros = DEMO_COMPLETED_POMODOROS
        self._focus_streak = DEMO_FOCUS_STREAK
        self._total_focus_minutes = DEMO_TOTAL_FOCUS_MINUTES

        for field in (
            StateField.TASKS,
            StateField.NOTES,
            StateField.TEAM_MEMBERS,
            *COUNTER_FIELDS,
        ):
            self._changed(field)

        log.info(
            "demo_data_seeded",
            task_count=len(self._tasks),
            note_count=len(self._notes),
            member_count=len(self._team_members),
        )

    def _spawn(self, coro: Coroutine[Any, Any, Any], name: str) -> None:
        """启动 fire-and-forget 后台任务，结果不影响 Store 操作"""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            log.warning("background_task_skipped", name=name, reason="no_running_loop")
            return

        task = loop.create_task(coro, name=name)
        self._background.add(task)
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Task) -> None:
        self._background.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            log.warning(
                "background_task_failed",
                name=task.get_name(),
                error=str(error),
            )


async def create_productivity_store(
    db_path: str | None = None,
    *,
    calendar: CalendarSink | None = None,
    debounce_s: float | None = None,
    seed_demo_data: bool | None = None,
    configure_logging: bool = False,
) -> ProductivityStore:
    """创建并加载 ProductivityStore

    Args:
        db_path: SQLite 数据库路径，默认读取配置
        calendar: 日历服务
        debounce_s: 防抖窗口（秒）
        seed_demo_data: 首次启动是否写入演示数据
        configure_logging: 是否在创建前初始化 structlog（宿主未自行配置时使用）

    Returns:
        已完成 load-or-seed 的 ProductivityStore
    """
    if configure_logging:
        setup_logging()
    kv_store = await create_kv_store(db_path or get_db_path())
    store = ProductivityStore(
        kv_store,
        debounce_s=debounce_s,
        calendar=calendar,
        seed_demo_data=seed_demo_data,
    )
    await store.load()
    return store
