import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional, Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ) -> Iterator[None]: ...

    def get_trace_id(self) -> Optional[str]: ...

    def get_request_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def critical(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """loguru wrapper with trace/request id propagation.

    Records go to stdout only. Structured fields are passed as
    ``extra={...}`` and end up in ``record["extra"]``; the message itself is
    never run through ``str.format`` so it may contain braces.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))
        with logger.trace_context(request_id="req_123"):
            logger.info("[Collection] Started", extra={"source": "reddit"})
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger

        self._loguru.remove()
        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        service_name = self.config.service_name

        def inject_context(record) -> bool:
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or ""
            request_id = _request_id_var.get()
            if request_id:
                record["extra"][REQUEST_ID_KEY] = request_id
            record["extra"].setdefault(SERVICE_KEY, service_name)
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_TRACE} | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        self._loguru.add(
            sys.stdout,
            colorize=self.config.colorize,
            serialize=self.config.serialize,
            format=format_str,
            level=LOGURU_LEVELS[self.config.level],
            filter=inject_context,
        )

    @contextmanager
    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ):
        """Scope a trace/request id to the enclosed block.

        Previous values are restored on exit, so contexts can nest.
        """
        trace_token = _trace_id_var.set(trace_id) if trace_id else None
        request_token = _request_id_var.set(request_id) if request_id else None
        try:
            yield
        finally:
            if trace_token is not None:
                _trace_id_var.reset(trace_token)
            if request_token is not None:
                _request_id_var.reset(request_token)

    def get_trace_id(self) -> Optional[str]:
        return _trace_id_var.get()

    def get_request_id(self) -> Optional[str]:
        return _request_id_var.get()

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]] = None, exc: bool = False) -> None:
        bound = self._loguru.bind(**extra) if extra else self._loguru
        bound.opt(depth=2, exception=exc).log(level, message)

    def debug(self, message: str, **kwargs) -> None:
        self._log("DEBUG", message, kwargs.get("extra"))

    def info(self, message: str, **kwargs) -> None:
        self._log("INFO", message, kwargs.get("extra"))

    def warning(self, message: str, **kwargs) -> None:
        self._log("WARNING", message, kwargs.get("extra"))

    def error(self, message: str, **kwargs) -> None:
        self._log("ERROR", message, kwargs.get("extra"))

    def critical(self, message: str, **kwargs) -> None:
        self._log("CRITICAL", message, kwargs.get("extra"))

    def exception(self, message: str, **kwargs) -> None:
        """Log at ERROR with the active exception's traceback."""
        self._log("ERROR", message, kwargs.get("extra"), exc=True)

    def bind(self, **kwargs):
        """Return a loguru logger with ``kwargs`` bound into extra."""
        return self._loguru.bind(**kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
