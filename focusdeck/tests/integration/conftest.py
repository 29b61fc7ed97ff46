"""集成测试共享 fixture"""

from collections.abc import AsyncGenerator
from datetime import datetime
from pathlib import Path

import pytest
import pytest_asyncio
from focusdeck.core.productivity_store import ProductivityStore, create_productivity_store
from focusdeck.devices import CalendarEvent, CalendarService


class InMemoryCalendar:
    """内存日历适配器，实现 CalendarProvider 接口"""

    def __init__(self, granted: bool = True) -> None:
        self.granted = granted
        self.events: list[CalendarEvent] = []

    async def request_access(self) -> bool:
        return self.granted

    async def save_event(self, event: CalendarEvent) -> None:
        self.events.append(event)

    async def events_between(self, start: datetime, end: datetime) -> list[CalendarEvent]:
        return [e for e in self.events if start <= e.start < end]


@pytest.fixture
def integration_db_path(tmp_path: Path) -> str:
    return str(tmp_path / "sqlite" / "focusdeck.db")


@pytest.fixture
def calendar_provider() -> InMemoryCalendar:
    return InMemoryCalendar()


@pytest_asyncio.fixture
async def calendar_service(calendar_provider: InMemoryCalendar) -> CalendarService:
    service = CalendarService(calendar_provider)
    await service.request_access()
    return service


@pytest_asyncio.fixture
async def app_store(
    integration_db_path: str,
    calendar_service: CalendarService,
) -> AsyncGenerator[ProductivityStore, None]:
    """空库启动、不写入演示数据的 Store"""
    store = await create_productivity_store(
        integration_db_path,
        calendar=calendar_service,
        debounce_s=0.05,
        seed_demo_data=False,
    )
    yield store
    await store.close()
