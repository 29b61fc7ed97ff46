"""Devices 包测试 fixtures"""

import random
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from focusdeck.devices.mock_adapter import MockWeatherAdapter
from focusdeck.devices.models import Coordinates, WeatherSnapshot


@pytest.fixture
def event_date() -> datetime:
    """日历事件开始时间"""
    return datetime(2026, 3, 18, 14, 0, tzinfo=UTC)


@pytest.fixture
def mock_calendar_provider():
    """已授权的 Mock CalendarProvider"""
    provider = AsyncMock()
    provider.request_access = AsyncMock(return_value=True)
    provider.save_event = AsyncMock(return_value=None)
    provider.events_between = AsyncMock(return_value=[])
    return provider


@pytest.fixture
def mock_location():
    """已授权的 Mock LocationProvider"""
    location = AsyncMock()
    location.request_permission = AsyncMock(return_value=True)
    location.current_location = AsyncMock(
        return_value=Coordinates(latitude=31.23, longitude=121.47)
    )
    return location


@pytest.fixture
def mock_weather():
    """返回固定快照的 Mock WeatherProvider"""
    weather = AsyncMock()
    weather.fetch = AsyncMock(
        return_value=WeatherSnapshot(
            temperature=18.5,
            condition="Cloudy",
            icon="cloud.fill",
            humidity=65,
            wind_speed=12.0,
            is_mock=True,
        )
    )
    return weather


@pytest.fixture
def seeded_mock() -> MockWeatherAdapter:
    """固定种子的 MockWeatherAdapter"""
    return MockWeatherAdapter(rng=random.Random(42))
