from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class CreateOptions:
    collection: str = ""
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ListOptions:
    """Newest first; limit <= 0 means no limit."""

    collection: str = ""
    limit: int = 0


__all__ = [
    "CreateOptions",
    "ListOptions",
]
