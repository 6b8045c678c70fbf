"""Document Domain: contact messages and weather documents."""

from .constant import COLLECTION_CONTACT_MESSAGES, WEATHER_COLLECTIONS
from .interface import IDocumentUseCase
from .type import ContactMessageInput, Document
from .errors import ErrInvalidInput, ErrUnknownWeatherKind
from .usecase import DocumentUseCase, New

__all__ = [
    "COLLECTION_CONTACT_MESSAGES",
    "WEATHER_COLLECTIONS",
    "IDocumentUseCase",
    "ContactMessageInput",
    "Document",
    "ErrInvalidInput",
    "ErrUnknownWeatherKind",
    "DocumentUseCase",
    "New",
]
