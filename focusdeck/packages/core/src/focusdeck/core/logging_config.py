"""structlog 日志初始化

供宿主进程在启动时调用一次（或通过 create_productivity_store(configure_logging=True)）。
库内部只通过 structlog.get_logger() 取 logger，不主动改动全局配置。

- FOCUSDECK_LOG_FORMAT: "dev"（默认，控制台可读输出）或 "json"
- FOCUSDECK_LOG_LEVEL: 标准日志级别名，非法值回退 INFO
"""

import logging
import os

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

APP_NAME = "focusdeck"

# 第三方库日志噪音较大，统一压到 WARNING
_QUIET_LOGGERS: tuple[str, ...] = ("aiosqlite", "asyncio")


def add_app_name(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """为每条日志标注应用名，便于在宿主进程日志中过滤"""
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def resolve_log_level(name: str | None) -> int:
    """日志级别名转数值，未知名称回退 INFO"""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_app_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """配置 structlog 与标准库根 logger

    Args:
        log_format: 渲染模式，None 时读取 FOCUSDECK_LOG_FORMAT
        log_level: 日志级别名，None 时读取 FOCUSDECK_LOG_LEVEL
    """
    log_format = (log_format or os.environ.get("FOCUSDECK_LOG_FORMAT", "dev")).lower()
    level = resolve_log_level(log_level or os.environ.get("FOCUSDECK_LOG_LEVEL"))

    shared = _shared_processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format),
            ],
            foreign_pre_chain=shared,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
