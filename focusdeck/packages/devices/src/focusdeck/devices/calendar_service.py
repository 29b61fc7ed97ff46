"""CalendarService -- 系统日历写入

Store 仅在用户勾选"加入日历"时调用 add_event。
访问被拒绝、保存失败均只记录日志并返回 False，不向调用方抛出异常。
"""

from datetime import UTC, datetime, timedelta
from typing import Protocol

import structlog

from .config import DeviceConfig
from .models import CalendarEvent

log = structlog.get_logger()


class CalendarProvider(Protocol):
    """系统日历适配接口"""

    async def request_access(self) -> bool:
        """请求日历访问权限，返回是否授权"""
        ...

    async def save_event(self, event: CalendarEvent) -> None:
        """保存事件，失败时抛出异常"""
        ...

    async def events_between(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        """查询时间范围内的事件"""
        ...


class CalendarService:
    """日历服务 -- 对 CalendarProvider 的尽力而为封装"""

    def __init__(
        self,
        provider: CalendarProvider,
        event_duration: timedelta = timedelta(hours=1),
    ) -> None:
        """
        Args:
            provider: 系统日历适配器
            event_duration: 新建事件的时长
        """
        self._provider = provider
        self._event_duration = event_duration
        self._has_access = False

    @property
    def has_access(self) -> bool:
        return self._has_access

    async def request_access(self) -> bool:
        """请求访问权限；拒绝或异常均视为未授权"""
        try:
            granted = bool(await self._provider.request_access())
        except Exception as e:
            log.warning("calendar_access_request_failed", error=str(e))
            granted = False

        self._has_access = granted
        log.info("calendar_access_resolved", granted=granted)
        return granted

    async def add_event(self, title: str, date: datetime) -> bool:
        """以 date 为开始时间创建事件

        Returns:
            True 表示事件已保存；未授权或保存失败返回 False
        """
        if not self._has_access:
            log.info("calendar_event_skipped", title=title, reason="no_access")
            return False

        event = CalendarEvent(title=title, start=date, end=date + self._event_duration)
        try:
            await self._provider.save_event(event)
        except Exception as e:
            log.warning(
                "calendar_event_save_failed",
                title=title,
                error=str(e),
            )
            return False

        log.info("calendar_event_saved", title=title, start=event.start.isoformat())
        return True

    async def upcoming_events(
        self,
        days: int = 7,
        now: datetime | None = None,
    ) -> list[CalendarEvent]:
        """未来 days 天内的事件；未授权或查询失败返回空列表"""
        if not self._has_access:
            return []

        start = now or datetime.now(UTC)
        try:
            return await self._provider.events_between(start, start + timedelta(days=days))
        except Exception as e:
            log.warning("calendar_query_failed", error=str(e))
            return []


def create_calendar_service(config: DeviceConfig, provider: CalendarProvider) -> CalendarService:
    """按配置的事件时长创建 CalendarService"""
    return CalendarService(
        provider,
        event_duration=timedelta(minutes=config.calendar_event_minutes),
    )
