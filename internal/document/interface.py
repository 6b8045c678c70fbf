from typing import List, Protocol, runtime_checkable

from .type import ContactMessageInput, Document


@runtime_checkable
class IDocumentUseCase(Protocol):
    async def create(self, collection: str, data: dict) -> Document:
        ...

    async def list(self, collection: str, limit: int = ...) -> List[Document]:
        ...

    async def create_contact_message(self, input_data: ContactMessageInput) -> Document:
        ...

    async def list_weather(self, kind: str, limit: int = ...) -> List[Document]:
        """Documents of one weather kind (forecast, alerts, correlation), newest first."""
        ...


__all__ = ["IDocumentUseCase"]
