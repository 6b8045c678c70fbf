import json
import time
from typing import Any, Dict, Optional, Tuple

from .interface import ICache


class MemoryCache(ICache):
    """Process-local ICache used when Redis is unreachable.

    Values are kept as strings, exactly as Redis would return them.
    """

    def __init__(self):
        self._data: Dict[str, Tuple[str, Optional[float]]] = {}

    def _alive(self, key: str) -> Optional[str]:
        item = self._data.get(key)
        if item is None:
            return None
        value, expires_at = item
        if expires_at is not None and expires_at <= time.monotonic():
            del self._data[key]
            return None
        return value

    async def get(self, key: str) -> Optional[str]:
        return self._alive(key)

    async def get_json(self, key: str) -> Optional[Any]:
        value = self._alive(key)
        return json.loads(value) if value is not None else None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        if not isinstance(value, str):
            value = json.dumps(value, default=str)
        expires_at = time.monotonic() + ttl if ttl else None
        self._data[key] = (value, expires_at)
        return True

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def ttl(self, key: str) -> int:
        if self._alive(key) is None:
            return -2
        expires_at = self._data[key][1]
        if expires_at is None:
            return -1
        return int(expires_at - time.monotonic())

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()


__all__ = ["MemoryCache"]
