from dataclasses import dataclass

from .constant import *


@dataclass
class PostgresConfig:
    """Configuration for the async PostgreSQL engine.

    Attributes:
        database_url: Connection URL; plain postgresql:// is rewritten to asyncpg
        schema: search_path schema for every session
        pool_size: Connection pool size
        max_overflow: Extra connections above pool_size
        pool_recycle: Recycle connections after N seconds
        pool_pre_ping: Check connections before handing them out
        connect_timeout: asyncpg connect timeout in seconds
        echo: Log emitted SQL
    """

    database_url: str
    schema: str = DEFAULT_SCHEMA
    pool_size: int = DEFAULT_POOL_SIZE
    max_overflow: int = DEFAULT_MAX_OVERFLOW
    pool_recycle: int = DEFAULT_POOL_RECYCLE
    pool_pre_ping: bool = DEFAULT_POOL_PRE_PING
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    echo: bool = DEFAULT_ECHO

    def __post_init__(self):
        if not self.database_url:
            raise ValueError(ERROR_DATABASE_URL_EMPTY)
        if not self.database_url.startswith((ASYNC_DRIVER_PREFIX,) + PLAIN_PREFIXES):
            raise ValueError(ERROR_INVALID_DATABASE_URL)
        if self.pool_size <= 0:
            raise ValueError(ERROR_POOL_SIZE_POSITIVE)
        if self.max_overflow < 0:
            raise ValueError(ERROR_MAX_OVERFLOW_NON_NEGATIVE)
        if self.pool_recycle <= 0:
            raise ValueError(ERROR_POOL_RECYCLE_POSITIVE)
        if self.connect_timeout <= 0:
            raise ValueError(ERROR_CONNECT_TIMEOUT_POSITIVE)
        if not self.schema or not self.schema.strip():
            raise ValueError(ERROR_SCHEMA_EMPTY)

    @property
    def async_url(self) -> str:
        for prefix in PLAIN_PREFIXES:
            if self.database_url.startswith(prefix):
                return ASYNC_DRIVER_PREFIX + self.database_url[len(prefix):]
        return self.database_url


__all__ = ["PostgresConfig"]
