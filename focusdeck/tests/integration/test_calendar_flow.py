"""新建任务写入日历的端到端流程"""

from datetime import timedelta

from focusdeck.core.productivity_store import ProductivityStore
from focusdeck.devices import CalendarService


class TestCalendarFlow:
    """add_task(add_to_calendar=True) -> CalendarService -> 日历适配器"""

    async def test_event_created_for_opted_in_task(
        self, app_store: ProductivityStore, calendar_provider
    ):
        task = app_store.add_task("Quarterly review", add_to_calendar=True)
        app_store.add_task("Private errand")
        await app_store.close()

        assert len(calendar_provider.events) == 1
        event = calendar_provider.events[0]
        assert event.title == "Quarterly review"
        assert event.start == task.due_date
        assert event.end == task.due_date + timedelta(hours=1)

    async def test_denied_calendar_keeps_task(self, calendar_provider):
        calendar_provider.granted = False
        service = CalendarService(calendar_provider)
        await service.request_access()
        store = ProductivityStore(calendar=service, seed_demo_data=False)

        task = store.add_task("No calendar", add_to_calendar=True)
        await store.close()

        assert store.tasks == [task]
        assert calendar_provider.events == []
