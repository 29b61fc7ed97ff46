"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、持久化防抖窗口、演示数据开关等可配置常量。
"""

import os
from pathlib import Path


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("FOCUSDECK_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 状态库路径"""
    return os.environ.get(
        "FOCUSDECK_DB_PATH",
        str(_get_base_dir() / "sqlite" / "focusdeck.db"),
    )


def get_persist_debounce_s() -> float:
    """获取持久化防抖窗口（秒），非法值回退到 500ms"""
    raw = os.environ.get("FOCUSDECK_PERSIST_DEBOUNCE_MS", "")
    try:
        value = int(raw) if raw else PERSIST_DEBOUNCE_MS
    except ValueError:
        value = PERSIST_DEBOUNCE_MS
    return max(value, 0) / 1000


def seed_demo_data_enabled() -> bool:
    """首次启动是否写入演示数据"""
    return os.environ.get("FOCUSDECK_SEED_DEMO_DATA", "true").lower() != "false"


# 持久化防抖窗口默认值（毫秒）
PERSIST_DEBOUNCE_MS: int = 500

# 新建任务未指定截止时间时的默认偏移（秒）
DEFAULT_DUE_OFFSET_S: int = 86400

# 番茄钟默认时长（秒）
DEFAULT_FOCUS_DURATION_S: int = 1500

# 任务分类（UI 选择器使用的固定集合）
TASK_CATEGORIES: tuple[str, ...] = ("Work", "Personal", "Study", "Health", "Shopping")
