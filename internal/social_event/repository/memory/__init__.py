"""In-memory implementation of social_event repository."""

from .social_event import SocialEventMemoryRepository

__all__ = ["SocialEventMemoryRepository"]
