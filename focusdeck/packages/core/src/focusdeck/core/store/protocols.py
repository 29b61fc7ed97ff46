"""Store Protocol 接口定义

定义 KeyValueStore 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol


class KeyValueStore(Protocol):
    """键值存储接口 -- value 为已编码的 JSON 文本"""

    async def get(self, key: str) -> str | None:
        """读取 key 对应的原始值，不存在返回 None"""
        ...

    async def put(self, key: str, value: str) -> None:
        """写入（覆盖）key 对应的值并提交"""
        ...

    async def delete(self, key: str) -> None:
        """删除 key，不存在时无操作"""
        ...

    async def keys(self) -> list[str]:
        """列出已存储的全部 key"""
        ...

    async def close(self) -> None:
        """释放底层资源"""
        ...
