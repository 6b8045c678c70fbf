from dataclasses import dataclass
from typing import Optional

import httpx

from pkg.llm.interface import ILLM
from pkg.logger.logger import Logger
from pkg.postgre.interface import IDatabase
from pkg.redis.interface import ICache
from internal.airport_config import AirportProfile
from internal.chat import IChatUseCase
from internal.collection import ICollectionUseCase, Scheduler
from internal.document import IDocumentUseCase
from internal.event_index import IEventIndex
from internal.insight import IInsightUseCase
from internal.social_event import ISocialEventUseCase


@dataclass
class Dependencies:
    """Everything the HTTP layer talks to, built once at startup.

    ``db`` is None when the service runs on in-memory repositories;
    ``scheduler`` is None when periodic collection is disabled. ``llm`` and ``http`` are
    only held so shutdown can close them.
    """

    logger: Logger
    airport: AirportProfile
    events: ISocialEventUseCase
    documents: IDocumentUseCase
    collection: ICollectionUseCase
    insight: IInsightUseCase
    chat: IChatUseCase
    index: IEventIndex
    cache: ICache
    db: Optional[IDatabase] = None
    scheduler: Optional[Scheduler] = None
    llm: Optional[ILLM] = None
    http: Optional[httpx.AsyncClient] = None
    service_name: str = "airport-sentiment-srv"
    version: str = "1.0.0"


__all__ = ["Dependencies"]
