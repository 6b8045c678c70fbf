from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class LLMConfig:
    """OpenAI-compatible client configuration.

    An empty api_key is allowed: the client then reports ``enabled = False``
    and every call raises ErrLLMUnavailable.
    """

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    chat_model: str = DEFAULT_CHAT_MODEL
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    embedding_dimensions: int = DEFAULT_EMBEDDING_DIMENSIONS
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(ERROR_INVALID_TIMEOUT)
        if self.embedding_dimensions <= 0:
            raise ValueError(ERROR_INVALID_DIMENSIONS)


@dataclass
class ChatMessage:
    role: str
    content: str


__all__ = ["LLMConfig", "ChatMessage"]
