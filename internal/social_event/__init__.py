"""Social Event Domain: de-duplicated event store and dashboard aggregates."""

from .interface import ISocialEventUseCase
from .type import ChartData, DailyEngagement, DataStats, NameValue, SentimentSlice
from .errors import ErrInvalidInput
from .usecase import New, SocialEventUseCase, collection_name

__all__ = [
    # Interface
    "ISocialEventUseCase",
    # Types
    "ChartData",
    "DailyEngagement",
    "DataStats",
    "NameValue",
    "SentimentSlice",
    # Errors
    "ErrInvalidInput",
    # Use case
    "SocialEventUseCase",
    "New",
    "collection_name",
]
