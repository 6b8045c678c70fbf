import uuid
from typing import Dict, List, Optional

from pkg.logger.logger import Logger
from internal.document.type import Document
from ..interface import IDocumentRepository
from ..option import CreateOptions, ListOptions


class DocumentMemoryRepository(IDocumentRepository):
    """Process-local document store, insertion ordered per collection."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger
        self._collections: Dict[str, List[Document]] = {}

    async def create(self, opt: CreateOptions) -> Document:
        document = Document(id=str(uuid.uuid4()), collection=opt.collection, data=dict(opt.data))
        self._collections.setdefault(opt.collection, []).append(document)
        return document

    async def list(self, opt: ListOptions) -> List[Document]:
        documents = list(reversed(self._collections.get(opt.collection, [])))
        if opt.limit > 0:
            documents = documents[: opt.limit]
        return documents


__all__ = ["DocumentMemoryRepository"]
