"""Chat Domain: guarded airport assistant with topic answers and LLM fallback."""

from .interface import IChatUseCase
from .type import ChatReply, Config, Turn
from .errors import ErrInvalidInput
from .usecase import ChatUseCase, New, SessionStore

__all__ = [
    "IChatUseCase",
    "ChatReply",
    "Config",
    "Turn",
    "ErrInvalidInput",
    "ChatUseCase",
    "New",
    "SessionStore",
]
