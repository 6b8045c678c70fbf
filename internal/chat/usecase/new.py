from typing import Optional

from pkg.llm.interface import ILLM
from pkg.logger.logger import Logger
from internal.airport_config import AirportProfile
from internal.chat.type import Config
from internal.event_index import IEventIndex
from internal.social_event import ISocialEventUseCase
from .chat import ChatUseCase


def New(
    config: Config,
    airport: AirportProfile,
    events: ISocialEventUseCase,
    llm: ILLM,
    index: Optional[IEventIndex] = None,
    logger: Optional[Logger] = None,
) -> ChatUseCase:
    """Create a new chat use case.

    Raises:
        ValueError: If airport, events or llm is None
    """
    if airport is None:
        raise ValueError("airport cannot be None")
    if events is None:
        raise ValueError("events cannot be None")
    if llm is None:
        raise ValueError("llm cannot be None")

    return ChatUseCase(
        config=config, airport=airport, events=events, llm=llm, index=index, logger=logger
    )


__all__ = ["New"]
