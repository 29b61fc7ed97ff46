"""FocusDeck Devices -- 设备能力服务层

日历写入与定位/天气查询的适配接口和尽力而为的服务封装。
所有失败在服务内部吸收，不阻塞 Store 操作。
"""

from .calendar_service import CalendarProvider, CalendarService, create_calendar_service
from .config import DeviceConfig, load_device_config
from .exceptions import (
    CalendarWriteError,
    DeviceError,
    PermissionDeniedError,
    WeatherUnavailableError,
)
from .mock_adapter import MockWeatherAdapter
from .models import CalendarEvent, Coordinates, WeatherSnapshot
from .weather import (
    LocationProvider,
    WeatherProvider,
    WeatherService,
    create_weather_service,
    productivity_tip,
    weather_reminder,
)

__all__ = [
    "CalendarEvent",
    "Coordinates",
    "WeatherSnapshot",
    "CalendarProvider",
    "CalendarService",
    "create_calendar_service",
    "LocationProvider",
    "WeatherProvider",
    "WeatherService",
    "MockWeatherAdapter",
    "create_weather_service",
    "productivity_tip",
    "weather_reminder",
    "DeviceConfig",
    "load_device_config",
    "DeviceError",
    "PermissionDeniedError",
    "WeatherUnavailableError",
    "CalendarWriteError",
]
