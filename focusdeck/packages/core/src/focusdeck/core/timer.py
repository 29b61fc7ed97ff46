"""FocusTimer -- 番茄钟倒计时

不持有真实定时器：由调用方（UI 循环或测试）按秒调用 tick()。
倒计时在运行状态下归零时停止，并向 Store 记录一次专注会话。
"""

import structlog

from .config import DEFAULT_FOCUS_DURATION_S
from .productivity_store import ProductivityStore

log = structlog.get_logger()


class FocusTimer:
    """番茄钟状态机"""

    def __init__(
        self,
        store: ProductivityStore,
        duration_seconds: int = DEFAULT_FOCUS_DURATION_S,
    ) -> None:
        if duration_seconds <= 0:
            raise ValueError("duration_seconds 必须大于 0")
        self._store = store
        self._duration = duration_seconds
        self._remaining = duration_seconds
        self._running = False

    @property
    def duration_seconds(self) -> int:
        return self._duration

    @property
    def time_remaining(self) -> int:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def time_string(self) -> str:
        """MM:SS 格式剩余时间"""
        minutes, seconds = divmod(self._remaining, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def start(self) -> None:
        if self._remaining == 0:
            self._remaining = self._duration
        self._running = True

    def pause(self) -> None:
        self._running = False

    def toggle(self) -> None:
        if self._running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self._running = False
        self._remaining = self._duration

    def set_duration(self, duration_seconds: int) -> None:
        """修改时长并重置倒计时"""
        if duration_seconds <= 0:
            raise ValueError("duration_seconds 必须大于 0")
        self._duration = duration_seconds
        self.reset()

    def tick(self, seconds: int = 1) -> bool:
        """推进倒计时

        Returns:
            True 表示本次 tick 完成了一个番茄钟
        """
        if not self._running:
            return False

        self._remaining = max(self._remaining - seconds, 0)
        if self._remaining > 0:
            return False

        self._running = False
        minutes = self._duration // 60
        self._store.record_focus_session(minutes)
        log.info(
            "focus_session_completed",
            duration_minutes=minutes,
            completed_pomodoros=self._store.completed_pomodoros,
        )
        return True
