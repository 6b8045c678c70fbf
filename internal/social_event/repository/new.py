"""Factory functions for creating social event repositories."""

from typing import Optional

from pkg.logger.logger import Logger
from .memory import SocialEventMemoryRepository
from .postgre import New


def NewMemory(logger: Optional[Logger] = None) -> SocialEventMemoryRepository:
    """Create the in-process repository used when PostgreSQL is off or down."""
    return SocialEventMemoryRepository(logger=logger)


__all__ = ["New", "NewMemory"]
