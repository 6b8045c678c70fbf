"""HTTP API: FastAPI app factory, routes and error mapping."""

from .main import REQUEST_ID_HEADER, create_app
from .type import Dependencies

__all__ = ["REQUEST_ID_HEADER", "Dependencies", "create_app"]
