"""Interface for cache operations."""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ICache(Protocol):
    """Protocol for a JSON-capable key/value cache.

    Read and write failures are logged and reported as a miss / False,
    never raised, so callers can treat the cache as optional.
    """

    async def get(self, key: str) -> Optional[str]: ...

    async def get_json(self, key: str) -> Optional[Any]: ...

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool: ...

    async def delete(self, key: str) -> bool: ...

    async def ttl(self, key: str) -> int: ...

    async def health_check(self) -> bool: ...

    async def close(self) -> None: ...


__all__ = ["ICache"]
