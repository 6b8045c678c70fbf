from typing import List, Optional, Protocol, runtime_checkable

from .type import ChatReply, Turn


@runtime_checkable
class IChatUseCase(Protocol):
    async def reply(self, message: str, session_id: Optional[str] = None) -> ChatReply:
        """Answer one message.

        Raises:
            ErrInvalidInput: Empty or oversized message
        """
        ...

    def history(self, session_id: str) -> List[Turn]:
        ...


__all__ = ["IChatUseCase"]
