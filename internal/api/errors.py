"""Exception handlers mapping domain errors to HTTP responses.

Validation problems become 400 with field-level details, domain input
errors 400, unknown weather kinds 404, storage failures 503 and anything
else 500. Every body carries ``success: false``.
"""

from typing import Any, Dict, List, Tuple, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pkg.logger.logger import Logger
from internal.chat import ErrInvalidInput as ErrInvalidChatInput
from internal.collection import ErrInvalidCredentials, ErrUnknownSource
from internal.document import ErrInvalidInput as ErrInvalidDocumentInput
from internal.document import ErrUnknownWeatherKind
from internal.document.repository.errors import RepositoryError as DocumentRepositoryError
from internal.model import ErrSocialEventValidation
from internal.social_event import ErrInvalidInput as ErrInvalidEventInput
from internal.social_event.repository.errors import RepositoryError as EventRepositoryError

INTERNAL_ERROR_MESSAGE = "Internal server error"
VALIDATION_ERROR_MESSAGE = "Invalid request data"
STORAGE_ERROR_MESSAGE = "Storage is unavailable"

BAD_REQUEST_ERRORS: Tuple[Type[Exception], ...] = (
    ErrUnknownSource,
    ErrInvalidCredentials,
    ErrInvalidChatInput,
    ErrInvalidDocumentInput,
    ErrInvalidEventInput,
    ErrSocialEventValidation,
)
NOT_FOUND_ERRORS: Tuple[Type[Exception], ...] = (ErrUnknownWeatherKind,)
UNAVAILABLE_ERRORS: Tuple[Type[Exception], ...] = (
    DocumentRepositoryError,
    EventRepositoryError,
)


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def validation_details(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors to ``{field, message}``, dropping the body/query prefix."""
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        details.append({"field": ".".join(loc) or "body", "message": error.get("msg", "")})
    return details


def register_exception_handlers(app: FastAPI, logger: Logger) -> None:
    def _request_id(request: Request) -> str:
        return getattr(request.state, "request_id", "unknown")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = validation_details(exc)
        logger.warning(
            f"Validation failed for {request.method} {request.url.path}",
            extra={"request_id": _request_id(request), "fields": [d["field"] for d in details]},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "error": VALIDATION_ERROR_MESSAGE, "details": details},
        )

    async def bad_request_handler(request: Request, exc: Exception):
        return failure(status.HTTP_400_BAD_REQUEST, str(exc))

    async def not_found_handler(request: Request, exc: Exception):
        return failure(status.HTTP_404_NOT_FOUND, str(exc))

    async def unavailable_handler(request: Request, exc: Exception):
        logger.error(
            f"Storage error in request {_request_id(request)}: {exc}",
            extra={"path": request.url.path},
        )
        return failure(status.HTTP_503_SERVICE_UNAVAILABLE, STORAGE_ERROR_MESSAGE)

    for exc_class in BAD_REQUEST_ERRORS:
        app.add_exception_handler(exc_class, bad_request_handler)
    for exc_class in NOT_FOUND_ERRORS:
        app.add_exception_handler(exc_class, not_found_handler)
    for exc_class in UNAVAILABLE_ERRORS:
        app.add_exception_handler(exc_class, unavailable_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception in request {_request_id(request)}: {exc}")
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


__all__ = [
    "BAD_REQUEST_ERRORS",
    "NOT_FOUND_ERRORS",
    "UNAVAILABLE_ERRORS",
    "failure",
    "register_exception_handlers",
    "validation_details",
]
