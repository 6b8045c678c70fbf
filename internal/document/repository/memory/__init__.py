from .document import DocumentMemoryRepository

__all__ = ["DocumentMemoryRepository"]
