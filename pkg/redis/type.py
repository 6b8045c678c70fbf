from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class RedisConfig:
    """Configuration for the Redis cache.

    Attributes:
        host: Redis host
        port: Redis port
        db: Database number
        password: Password (optional)
        username: ACL username (optional, Redis 6+)
        ssl: Use TLS
        max_connections: Pool size
        socket_timeout: Socket timeout in seconds
        socket_connect_timeout: Connect timeout in seconds
        key_prefix: Prepended to every key as "<prefix>:<key>"
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    db: int = DEFAULT_DB
    password: Optional[str] = None
    username: Optional[str] = None
    ssl: bool = DEFAULT_SSL
    encoding: str = DEFAULT_ENCODING
    decode_responses: bool = DEFAULT_DECODE_RESPONSES
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    socket_timeout: int = DEFAULT_SOCKET_TIMEOUT
    socket_connect_timeout: int = DEFAULT_SOCKET_CONNECT_TIMEOUT
    key_prefix: str = DEFAULT_KEY_PREFIX

    def __post_init__(self):
        if not self.host:
            raise ValueError(ERROR_HOST_EMPTY)
        if self.port <= 0 or self.port > 65535:
            raise ValueError(ERROR_INVALID_PORT)
        if self.db < 0:
            raise ValueError(ERROR_INVALID_DB)
        if self.max_connections <= 0:
            raise ValueError(ERROR_INVALID_MAX_CONNECTIONS)
        if self.socket_timeout <= 0:
            raise ValueError(ERROR_INVALID_SOCKET_TIMEOUT)


__all__ = ["RedisConfig"]
