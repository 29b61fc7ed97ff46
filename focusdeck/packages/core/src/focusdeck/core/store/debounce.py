"""DebouncedWriter -- 按 key 防抖的持久化写入调度器

每个 key 持有至多一个 asyncio 定时任务：
- schedule(key) 取消该 key 已有的定时任务并重新计时
- 窗口到期后调用 write(key)，由调用方在写入时读取最新值
- flush() 等待进行中的写入，再立即写出所有待写 key

没有运行中的事件循环时（同步上下文），key 只记入 pending，
等待下一次 flush() 写出。写入失败只记录日志，不向调用方传播。
"""

import asyncio
from collections.abc import Awaitable, Callable

import structlog

log = structlog.get_logger()


class DebouncedWriter:
    """按 key 合并短时间内的多次写入"""

    def __init__(
        self,
        write: Callable[[str], Awaitable[None]],
        delay_s: float = 0.5,
    ) -> None:
        """
        Args:
            write: 实际写入回调，参数为 key
            delay_s: 防抖窗口（秒）
        """
        self._write = write
        self._delay_s = delay_s
        # 仍在计时的任务，可取消
        self._timers: dict[str, asyncio.Task] = {}
        # 已创建且尚未结束的全部任务（含已到期、正在写入的）
        self._inflight: set[asyncio.Task] = set()
        self._pending: set[str] = set()
        self._closed = False

    @property
    def pending(self) -> frozenset[str]:
        """尚未写出的 key"""
        return frozenset(self._pending)

    def schedule(self, key: str) -> None:
        """登记一次写入请求，窗口内的重复请求合并为一次"""
        if self._closed:
            return
        self._pending.add(key)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return

        timer = self._timers.pop(key, None)
        if timer is not None:
            timer.cancel()
        task = loop.create_task(self._fire(key))
        self._timers[key] = task
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def flush(self) -> None:
        """取消计时中的任务，等待进行中的写入，再写出全部 pending key"""
        self._cancel_timers()
        await self._drain()

        for key in sorted(self._pending):
            await self._run_write(key)

    async def close(self) -> None:
        """停止接收新的写入请求；取消计时中的任务（不写出 pending），等待进行中的写入"""
        self._closed = True
        self._cancel_timers()
        await self._drain()

    def _cancel_timers(self) -> None:
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()

    async def _drain(self) -> None:
        if self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)

    async def _fire(self, key: str) -> None:
        await asyncio.sleep(self._delay_s)
        # 到期后从计时表摘除，之后不可再被取消，写入期间的新请求会重新计时
        if self._timers.get(key) is asyncio.current_task():
            del self._timers[key]
        await self._run_write(key)

    async def _run_write(self, key: str) -> None:
        self._pending.discard(key)
        try:
            await self._write(key)
        except Exception as e:
            log.warning(
                "state_write_failed",
                key=key,
                error=str(e),
            )
