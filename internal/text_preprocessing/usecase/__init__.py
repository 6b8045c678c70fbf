from .text_processing import TextProcessing
from .new import New

__all__ = ["TextProcessing", "New"]
