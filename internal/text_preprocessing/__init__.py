"""Text preprocessing domain: post text normalizer."""

from .interface import ITextProcessing
from .type import Config, Input, Output, Stats
from .errors import ErrInvalidInput
from .usecase import TextProcessing, New

__all__ = [
    "ITextProcessing",
    "Config",
    "Input",
    "Output",
    "Stats",
    "ErrInvalidInput",
    "TextProcessing",
    "New",
]
