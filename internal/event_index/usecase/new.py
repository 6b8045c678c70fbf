from typing import Optional

from pkg.llm.interface import ILLM
from pkg.logger.logger import Logger
from internal.event_index.type import Config
from ..repository.interface import IEventIndexRepository
from .event_index import EventIndex


def New(
    config: Config,
    repository: IEventIndexRepository,
    llm: ILLM,
    logger: Optional[Logger] = None,
) -> EventIndex:
    """Create the event index. The worker is not started until ``start()``.

    Raises:
        ValueError: If config is invalid or a dependency is missing
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")
    if repository is None or llm is None:
        raise ValueError("repository and llm are required")

    return EventIndex(config, repository, llm, logger)


__all__ = ["New"]
