"""Types for Document domain."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from internal.model import utcnow


@dataclass
class Document:
    """Schemaless JSON document filed under a named collection."""

    id: str
    collection: str
    data: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict[str, Any]:
        # Stored fields first; id/created_at always win
        return {**self.data, "id": self.id, "created_at": self.created_at.isoformat()}


@dataclass
class ContactMessageInput:
    name: str
    email: str
    subject: str
    message: str

    def __post_init__(self):
        for name in ("name", "email", "subject", "message"):
            if not str(getattr(self, name) or "").strip():
                raise ValueError(f"{name} is required")


__all__ = [
    "Document",
    "ContactMessageInput",
]
