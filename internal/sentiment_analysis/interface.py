from typing import Protocol, runtime_checkable

from internal.model import SentimentAnalysis
from .type import Input, Output


@runtime_checkable
class ISentimentAnalysis(Protocol):
    """Protocol for sentiment scoring."""

    def process(self, input_data: Input) -> Output:
        """Score text and return the detailed breakdown."""
        ...

    def analyze(self, text: str) -> SentimentAnalysis:
        """Score text and return the form stored on a SocialEvent."""
        ...


__all__ = ["ISentimentAnalysis"]
