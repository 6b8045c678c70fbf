from .chat import ChatUseCase
from .new import New
from .session import SessionStore

__all__ = ["ChatUseCase", "New", "SessionStore"]
