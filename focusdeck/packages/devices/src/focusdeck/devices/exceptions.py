"""设备服务异常体系

适配器（日历、定位、天气）抛出这些异常；
CalendarService / WeatherService 负责吸收，不向 Store 或 UI 传播。
"""


class DeviceError(Exception):
    """设备服务基础异常"""

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 是否可通过重试或降级恢复
        """
        super().__init__(message)
        self.recoverable = recoverable


class PermissionDeniedError(DeviceError):
    """用户拒绝授权（日历访问、定位）"""

    def __init__(self, capability: str) -> None:
        super().__init__(f"权限被拒绝: {capability}", recoverable=False)
        self.capability = capability


class WeatherUnavailableError(DeviceError):
    """天气查询失败（定位失败、服务不可达等）

    此异常触发 WeatherService 的 mock 降级。
    """

    def __init__(self, reason: str, original_error: Exception | None = None) -> None:
        super().__init__(f"天气数据不可用: {reason}", recoverable=True)
        self.original_error = original_error


class CalendarWriteError(DeviceError):
    """日历事件保存失败"""

    def __init__(self, title: str, original_error: Exception) -> None:
        super().__init__(f"日历事件保存失败: {title} -- {original_error}", recoverable=True)
        self.title = title
        self.original_error = original_error
