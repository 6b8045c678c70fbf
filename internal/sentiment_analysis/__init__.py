from .interface import ISentimentAnalysis
from .type import Config, Input, Output
from .errors import ErrInvalidInput
from .usecase import New, SentimentAnalysis

__all__ = [
    "ISentimentAnalysis",
    "Config",
    "Input",
    "Output",
    "ErrInvalidInput",
    "New",
    "SentimentAnalysis",
]
