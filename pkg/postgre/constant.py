DEFAULT_POOL_SIZE = 10
DEFAULT_MAX_OVERFLOW = 5
DEFAULT_POOL_RECYCLE = 1800
DEFAULT_POOL_PRE_PING = True
DEFAULT_ECHO = False
DEFAULT_SCHEMA = "public"
DEFAULT_CONNECT_TIMEOUT = 5

ASYNC_DRIVER_PREFIX = "postgresql+asyncpg://"
PLAIN_PREFIXES = ("postgresql://", "postgres://")

ERROR_DATABASE_URL_EMPTY = "database_url is required"
ERROR_INVALID_DATABASE_URL = "database_url must be a PostgreSQL connection string"
ERROR_POOL_SIZE_POSITIVE = "pool_size must be > 0"
ERROR_MAX_OVERFLOW_NON_NEGATIVE = "max_overflow must be >= 0"
ERROR_POOL_RECYCLE_POSITIVE = "pool_recycle must be > 0"
ERROR_SCHEMA_EMPTY = "schema cannot be empty"
ERROR_CONNECT_TIMEOUT_POSITIVE = "connect_timeout must be > 0"
ERROR_DATABASE_NOT_INITIALIZED = "Database not initialized"
