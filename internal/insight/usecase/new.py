from typing import Optional

from pkg.logger.logger import Logger
from pkg.redis.interface import ICache
from internal.airport_config import AirportProfile
from internal.insight.type import Config
from internal.social_event import ISocialEventUseCase
from .insight import InsightUseCase


def New(
    config: Config,
    events: ISocialEventUseCase,
    airport: AirportProfile,
    cache: ICache,
    logger: Optional[Logger] = None,
) -> InsightUseCase:
    """Create a new insight use case.

    Raises:
        ValueError: If events, airport or cache is None
    """
    if events is None:
        raise ValueError("events cannot be None")
    if airport is None:
        raise ValueError("airport cannot be None")
    if cache is None:
        raise ValueError("cache cannot be None")

    return InsightUseCase(config=config, events=events, airport=airport, cache=cache, logger=logger)


__all__ = ["New"]
