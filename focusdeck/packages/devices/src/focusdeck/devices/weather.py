"""WeatherService -- 定位 + 天气查询，失败降级为 mock

降级链: LocationProvider + WeatherProvider -> MockWeatherAdapter
每次 refresh() 都先尝试真实数据源，不维护显式的"降级状态"标记。
"""

from typing import Protocol

import structlog

from .config import DeviceConfig
from .exceptions import DeviceError, PermissionDeniedError, WeatherUnavailableError
from .mock_adapter import MockWeatherAdapter
from .models import Coordinates, WeatherSnapshot

log = structlog.get_logger()


class LocationProvider(Protocol):
    """设备定位适配接口"""

    async def request_permission(self) -> bool:
        """请求定位权限，返回是否授权"""
        ...

    async def current_location(self) -> Coordinates:
        """获取当前位置，失败时抛出异常"""
        ...


class WeatherProvider(Protocol):
    """天气数据适配接口"""

    async def fetch(self, location: Coordinates) -> WeatherSnapshot:
        """查询指定位置的天气，失败时抛出异常"""
        ...


class WeatherService:
    """天气服务 -- current_weather 为只读字段，供分析页和情境提示使用"""

    def __init__(
        self,
        location: LocationProvider | None = None,
        weather: WeatherProvider | None = None,
        mock: MockWeatherAdapter | None = None,
    ) -> None:
        """
        Args:
            location: 定位适配器，None 表示直接使用 mock
            weather: 天气适配器，None 表示直接使用 mock
            mock: 降级后备（默认 MockWeatherAdapter）
        """
        self._location = location
        self._weather = weather
        self._mock = mock or MockWeatherAdapter()
        self._current: WeatherSnapshot | None = None

    @property
    def current_weather(self) -> WeatherSnapshot | None:
        return self._current

    async def refresh(self) -> WeatherSnapshot:
        """刷新天气快照

        Returns:
            WeatherSnapshot
            - 真实数据成功: is_mock=False
            - 权限拒绝 / 定位失败 / 查询失败: mock 快照，is_mock=True
        """
        try:
            snapshot = await self._fetch_live()
        except Exception as e:
            log.info(
                "weather_fallback_activated",
                reason=str(e),
                error_type=type(e).__name__,
            )
            snapshot = self._mock.snapshot()

        self._current = snapshot
        return snapshot

    async def _fetch_live(self) -> WeatherSnapshot:
        if self._location is None or self._weather is None:
            raise WeatherUnavailableError("未配置定位或天气服务")

        if not await self._location.request_permission():
            raise PermissionDeniedError("location")

        try:
            coordinates = await self._location.current_location()
        except DeviceError:
            raise
        except Exception as e:
            raise WeatherUnavailableError("定位失败", e) from e

        try:
            snapshot = await self._weather.fetch(coordinates)
        except DeviceError:
            raise
        except Exception as e:
            raise WeatherUnavailableError("天气查询失败", e) from e

        return snapshot.model_copy(update={"is_mock": False})


def create_weather_service(
    config: DeviceConfig,
    location: LocationProvider | None = None,
    weather: WeatherProvider | None = None,
    mock: MockWeatherAdapter | None = None,
) -> WeatherService:
    """按配置创建 WeatherService，mock 模式下忽略真实数据源"""
    if config.weather_mode == "mock":
        return WeatherService(mock=mock)
    return WeatherService(location=location, weather=weather, mock=mock)


def productivity_tip(snapshot: WeatherSnapshot) -> str:
    """分析页的天气建议"""
    match snapshot.condition:
        case "Clear" | "Sunny":
            return "Perfect weather! Consider working near a window for natural light boost."
        case "Rain" | "Rainy":
            return "Rainy day ahead. Great time for deep focus work indoors."
        case "Cloudy":
            return "Overcast conditions. Keep workspace well-lit for better focus."
        case _:
            return "Check weather conditions for optimal work environment."


def weather_reminder(snapshot: WeatherSnapshot | None) -> str | None:
    """任务页的情境提醒，无需提醒时返回 None"""
    if snapshot is None:
        return None
    if "Rain" in snapshot.condition:
        return "Rainy day - perfect for indoor focused work"
    if snapshot.temperature > 25:
        return "Hot day - stay hydrated and take breaks"
    if snapshot.temperature < 10:
        return "Cold day - warm environment helps productivity"
    return None
