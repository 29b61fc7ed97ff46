"""数据模型 -- WeatherSnapshot / CalendarEvent / Coordinates"""

from datetime import datetime

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """设备定位结果"""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class WeatherSnapshot(BaseModel):
    """天气快照 -- 只读，仅供分析页和情境提示使用"""

    temperature: float = Field(description="温度（摄氏度）")
    condition: str = Field(description="天气状况标签，如 Clear / Rain")
    icon: str = Field(default="", description="图标引用")
    humidity: int = Field(default=0, ge=0, le=100, description="相对湿度（%）")
    wind_speed: float = Field(default=0.0, ge=0.0, description="风速（km/h）")
    is_mock: bool = Field(default=False, description="是否为本地生成的 mock 数据")


class CalendarEvent(BaseModel):
    """日历事件"""

    title: str
    start: datetime
    end: datetime
