"""FastAPI dependencies resolving use cases from ``app.state.deps``."""

from fastapi import HTTPException, Request, status

from internal.airport_config import AirportProfile
from internal.chat import IChatUseCase
from internal.collection import ICollectionUseCase
from internal.document import IDocumentUseCase
from internal.insight import IInsightUseCase
from internal.social_event import ISocialEventUseCase
from .type import Dependencies


def get_deps(request: Request) -> Dependencies:
    """Dependencies container stored on the app at startup.

    Raises:
        HTTPException: 503 if the service has not finished starting
    """
    deps = getattr(request.app.state, "deps", None)
    if deps is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is starting up or failed to initialize.",
        )
    return deps


def get_airport(request: Request) -> AirportProfile:
    return get_deps(request).airport


def get_events(request: Request) -> ISocialEventUseCase:
    return get_deps(request).events


def get_documents(request: Request) -> IDocumentUseCase:
    return get_deps(request).documents


def get_collection(request: Request) -> ICollectionUseCase:
    return get_deps(request).collection


def get_insight(request: Request) -> IInsightUseCase:
    return get_deps(request).insight


def get_chat(request: Request) -> IChatUseCase:
    return get_deps(request).chat


__all__ = [
    "get_airport",
    "get_chat",
    "get_collection",
    "get_deps",
    "get_documents",
    "get_events",
    "get_insight",
]
