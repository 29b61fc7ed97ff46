"""全局 pytest 配置 -- 临时 SQLite 状态库 fixture"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio


@pytest_asyncio.fixture
async def tmp_db_path(tmp_path: Path) -> Path:
    """提供临时 SQLite 数据库路径"""
    return tmp_path / "sqlite" / "test.db"


@pytest_asyncio.fixture
async def kv_store(tmp_db_path: Path) -> AsyncGenerator:
    """提供已初始化的临时键值存储"""
    from focusdeck.core.store import create_kv_store

    store = await create_kv_store(str(tmp_db_path))
    yield store
    await store.close()
