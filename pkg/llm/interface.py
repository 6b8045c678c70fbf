from typing import List, Protocol, Sequence, runtime_checkable

from .type import ChatMessage


@runtime_checkable
class ILLM(Protocol):
    """Chat completion and embedding provider."""

    @property
    def enabled(self) -> bool: ...

    async def chat(
        self, messages: Sequence[ChatMessage], max_tokens: int = ..., temperature: float = ...
    ) -> str: ...

    async def embed(self, text: str) -> List[float]: ...

    async def close(self) -> None: ...


__all__ = ["ILLM"]
