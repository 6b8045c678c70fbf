from typing import Optional

from pkg.logger.logger import Logger
from ..repository.interface import ISocialEventRepository
from .social_event import SocialEventUseCase


def New(
    repository: ISocialEventRepository,
    logger: Optional[Logger] = None,
) -> SocialEventUseCase:
    """Create a new social event use case.

    Raises:
        ValueError: If repository is None
    """
    if repository is None:
        raise ValueError("repository cannot be None")

    return SocialEventUseCase(repository=repository, logger=logger)


__all__ = ["New"]
