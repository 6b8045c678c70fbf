from typing import Final

DEFAULT_QUEUE_SIZE: Final[int] = 1000
DEFAULT_EMBED_TIMEOUT: Final[float] = 20.0
DEFAULT_SEARCH_LIMIT: Final[int] = 5
MAX_SEARCH_LIMIT: Final[int] = 50

# Embedding input is truncated to this many characters
MAX_TEXT_LENGTH: Final[int] = 8000

WORKER_TASK_NAME: Final[str] = "event-index-worker"
