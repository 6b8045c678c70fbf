from typing import List, Protocol, runtime_checkable

from internal.document.type import Document
from .option import CreateOptions, ListOptions


@runtime_checkable
class IDocumentRepository(Protocol):
    async def create(self, opt: CreateOptions) -> Document:
        """Insert a document with a fresh UUID id."""
        ...

    async def list(self, opt: ListOptions) -> List[Document]:
        ...


__all__ = ["IDocumentRepository"]
