from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


# loguru has no "WARN" level, only "WARNING"
LOGURU_LEVELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARNING",
    LogLevel.ERROR: "ERROR",
}

DEFAULT_SERVICE_NAME = "airport-sentiment-srv"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True
DEFAULT_SERIALIZE = False

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_SERVICE = "<magenta>{extra[service]}</magenta>"
LOG_FORMAT_TRACE = "<cyan>{extra[trace_id]: <16}</cyan>"
LOG_FORMAT_LOCATION = "<cyan>{name}</cyan>:<cyan>{line}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

TRACE_ID_KEY = "trace_id"
REQUEST_ID_KEY = "request_id"
SERVICE_KEY = "service"
