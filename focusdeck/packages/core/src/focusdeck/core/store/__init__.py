"""FocusDeck Core Store -- SQLite 键值持久化实现

提供工厂函数创建已初始化的键值存储。
"""

from pathlib import Path

import aiosqlite

from .debounce import DebouncedWriter
from .kv_store import SqliteKeyValueStore
from .protocols import KeyValueStore
from .sqlite_init import init_db, verify_wal_mode
from .state_codec import decode_field, encode_field


async def create_kv_store(db_path: str) -> SqliteKeyValueStore:
    """创建键值存储

    Args:
        db_path: SQLite 数据库文件路径

    Returns:
        SqliteKeyValueStore 实例
    """
    # 确保数据库目录存在
    db_dir = Path(db_path).parent
    db_dir.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    await init_db(conn)

    return SqliteKeyValueStore(conn)


__all__ = [
    "KeyValueStore",
    "SqliteKeyValueStore",
    "DebouncedWriter",
    "create_kv_store",
    "init_db",
    "verify_wal_mode",
    "encode_field",
    "decode_field",
]
