from typing import List, Optional

from pkg.logger.logger import Logger
from internal.document.constant import *
from internal.document.errors import ErrInvalidInput, ErrUnknownWeatherKind
from internal.document.interface import IDocumentUseCase
from internal.document.type import ContactMessageInput, Document
from ..repository.interface import IDocumentRepository
from ..repository.option import CreateOptions, ListOptions


class DocumentUseCase(IDocumentUseCase):
    def __init__(self, repository: IDocumentRepository, logger: Optional[Logger] = None):
        self.repository = repository
        self.logger = logger

    async def create(self, collection: str, data: dict) -> Document:
        if not collection:
            raise ErrInvalidInput("collection is required")
        if not isinstance(data, dict):
            raise ErrInvalidInput("data must be an object")

        return await self.repository.create(CreateOptions(collection=collection, data=data))

    async def list(self, collection: str, limit: int = DEFAULT_LIST_LIMIT) -> List[Document]:
        if not collection:
            raise ErrInvalidInput("collection is required")
        limit = min(max(limit, 0), MAX_LIST_LIMIT)

        return await self.repository.list(ListOptions(collection=collection, limit=limit))

    async def create_contact_message(self, input_data: ContactMessageInput) -> Document:
        document = await self.create(
            COLLECTION_CONTACT_MESSAGES,
            {
                "name": input_data.name,
                "email": input_data.email,
                "subject": input_data.subject,
                "message": input_data.message,
            },
        )
        if self.logger:
            self.logger.info(
                "[DocumentUseCase] Contact message received",
                extra={"id": document.id, "subject": input_data.subject},
            )
        return document

    async def list_weather(self, kind: str, limit: int = DEFAULT_LIST_LIMIT) -> List[Document]:
        collection = WEATHER_COLLECTIONS.get(kind)
        if collection is None:
            raise ErrUnknownWeatherKind(
                f"unknown weather kind {kind!r}, expected one of {sorted(WEATHER_COLLECTIONS)}"
            )
        return await self.list(collection, limit)


__all__ = ["DocumentUseCase"]
