"""
FastAPI application setup and configuration.
Defines the app factory, middleware, exception handlers, and route registration.
"""

import time
import uuid
from typing import Any, Callable, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .errors import register_exception_handlers
from .routes import (
    airport,
    analytics,
    chat,
    collection,
    contact,
    health,
    insights,
    social_events,
    weather,
)
from .type import Dependencies

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(
    deps: Dependencies,
    cors_origins: Optional[List[str]] = None,
    root_path: str = "",
    lifespan: Optional[Callable[[FastAPI], Any]] = None,
) -> FastAPI:
    """Build the API around an already-constructed dependency container.

    The container is stored on ``app.state.deps``; route dependencies read
    it from there.
    """
    logger = deps.logger

    app = FastAPI(
        title="Airport Sentiment API",
        description="Social media collection, sentiment insights and chat for one airport",
        version=deps.version,
        docs_url="/swagger/index.html",
        redoc_url=None,
        openapi_url="/openapi.json",
        root_path=root_path or "",
        lifespan=lifespan,
    )
    app.state.deps = deps

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log incoming requests and responses."""
        start = time.perf_counter()
        client = request.client.host if request.client else "unknown"
        logger.info(f"Request {request.method} {request.url.path} from {client}")

        response = await call_next(request)

        duration = (time.perf_counter() - start) * 1000
        logger.info(
            f"Response {response.status_code} for {request.method} {request.url.path} "
            f"({duration:.1f}ms)"
        )
        return response

    # Registered last so it runs first and the id is bound for the logging middleware
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Reuse the caller's X-Request-ID or mint one, and echo it back."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        with logger.trace_context(request_id=request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    register_exception_handlers(app, logger)

    app.include_router(health.router, tags=["health"])
    app.include_router(collection.router, prefix="/api", tags=["collection"])
    app.include_router(social_events.router, prefix="/api", tags=["social-events"])
    app.include_router(insights.router, prefix="/api", tags=["insights"])
    app.include_router(chat.router, prefix="/api", tags=["chat"])
    app.include_router(airport.router, prefix="/api", tags=["airport"])
    app.include_router(analytics.router, prefix="/api", tags=["analytics"])
    app.include_router(weather.router, prefix="/api", tags=["weather"])
    app.include_router(contact.router, prefix="/api", tags=["contact"])

    return app


__all__ = ["REQUEST_ID_HEADER", "create_app"]
