"""packages/core 测试配置 -- 核心层 fixture"""

from datetime import UTC, datetime

import pytest
from focusdeck.core.productivity_store import ProductivityStore

FIXED_NOW = datetime(2026, 3, 18, 10, 30, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """固定的当前时间（周三上午）"""
    return FIXED_NOW


@pytest.fixture
def store(fixed_now: datetime) -> ProductivityStore:
    """纯内存 Store，不持久化、不写入演示数据"""
    return ProductivityStore(seed_demo_data=False, clock=lambda: fixed_now)
