"""KeyValueStore SQLite 实现

每个持久化字段一行，整值覆盖写入。
"""

from datetime import UTC, datetime

import aiosqlite


class SqliteKeyValueStore:
    """KeyValueStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    @property
    def conn(self) -> aiosqlite.Connection:
        return self._conn

    async def get(self, key: str) -> str | None:
        """读取 key 对应的原始 JSON 文本"""
        cursor = await self._conn.execute(
            "SELECT value FROM app_state WHERE key = ?",
            (key,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return row[0]

    async def put(self, key: str, value: str) -> None:
        """写入（覆盖）并立即提交"""
        await self._conn.execute(
            """
            INSERT INTO app_state (key, value, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                value = excluded.value,
                updated_at = excluded.updated_at
            """,
            (key, value, datetime.now(UTC).isoformat()),
        )
        await self._conn.commit()

    async def delete(self, key: str) -> None:
        await self._conn.execute("DELETE FROM app_state WHERE key = ?", (key,))
        await self._conn.commit()

    async def keys(self) -> list[str]:
        cursor = await self._conn.execute("SELECT key FROM app_state ORDER BY key")
        rows = await cursor.fetchall()
        return [row[0] for row in rows]

    async def close(self) -> None:
        await self._conn.close()
