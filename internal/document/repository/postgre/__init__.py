"""PostgreSQL implementation of document repository."""

from .document import DocumentPostgresRepository

__all__ = ["DocumentPostgresRepository"]
