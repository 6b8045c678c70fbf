"""PostgreSQL implementation of social_event repository."""

from .social_event import SocialEventPostgresRepository
from .new import New

__all__ = [
    "SocialEventPostgresRepository",
    "New",
]
