"""DeviceConfig -- 设备服务配置加载

从环境变量加载配置，非法值记录告警并回退默认值。
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()


class DeviceConfig(BaseModel):
    """设备服务配置 -- 从环境变量加载

    环境变量:
        FOCUSDECK_WEATHER_MODE: 天气来源（device/mock）
        FOCUSDECK_CALENDAR_EVENT_MINUTES: 日历事件时长（分钟，默认 60）
    """

    weather_mode: Literal["device", "mock"] = Field(
        default="device",
        description="天气来源：device 走定位+天气服务，mock 直接使用本地数据",
    )
    calendar_event_minutes: int = Field(
        default=60,
        ge=1,
        description="日历事件时长（分钟）",
    )


def load_device_config() -> DeviceConfig:
    """从环境变量加载设备服务配置

    环境变量映射:
        FOCUSDECK_WEATHER_MODE -> weather_mode (默认 "device")
        FOCUSDECK_CALENDAR_EVENT_MINUTES -> calendar_event_minutes (默认 60)

    Returns:
        DeviceConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("FOCUSDECK_WEATHER_MODE"):
        if val in ("device", "mock"):
            kwargs["weather_mode"] = val
        else:
            log.warning(
                "invalid_weather_mode_config",
                env_var="FOCUSDECK_WEATHER_MODE",
                value=val,
                fallback="device",
            )

    if val := os.environ.get("FOCUSDECK_CALENDAR_EVENT_MINUTES"):
        try:
            minutes = int(val)
        except ValueError:
            minutes = 0
        if minutes >= 1:
            kwargs["calendar_event_minutes"] = minutes
        else:
            log.warning(
                "invalid_calendar_event_minutes_config",
                env_var="FOCUSDECK_CALENDAR_EVENT_MINUTES",
                value=val,
                fallback=60,
            )

    return DeviceConfig(**kwargs)
