"""MockWeatherAdapter -- 本地生成的天气快照

定位被拒绝或天气查询失败时，WeatherService 统一降级到此适配器，
保证界面始终有可展示的天气数据。
"""

import random

from .models import Coordinates, WeatherSnapshot

# (天气状况, 图标)
MOCK_CONDITIONS: tuple[tuple[str, str], ...] = (
    ("Clear", "sun.max.fill"),
    ("Sunny", "sun.max.fill"),
    ("Cloudy", "cloud.fill"),
    ("Rain", "cloud.rain.fill"),
    ("Rainy", "cloud.rain.fill"),
)


class MockWeatherAdapter:
    """随机天气生成器

    温度 15-30°C，湿度 40-80%，风速 5-25 km/h。
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """
        Args:
            rng: 随机数生成器，测试时可注入固定种子
        """
        self._rng = rng or random.Random()

    def snapshot(self) -> WeatherSnapshot:
        condition, icon = self._rng.choice(MOCK_CONDITIONS)
        return WeatherSnapshot(
            temperature=round(self._rng.uniform(15.0, 30.0), 1),
            condition=condition,
            icon=icon,
            humidity=self._rng.randint(40, 80),
            wind_speed=round(self._rng.uniform(5.0, 25.0), 1),
            is_mock=True,
        )

    async def fetch(self, location: Coordinates | None = None) -> WeatherSnapshot:
        """与 WeatherProvider 接口一致，忽略 location"""
        return self.snapshot()
