from dataclasses import dataclass

from .constant import *


@dataclass
class LoggerConfig:
    """Logger configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARN, ERROR)
        enable_console: Write records to stdout
        colorize: Colored console output
        serialize: Emit one JSON object per record instead of the text format
        service_name: Service name attached to every record
    """

    level: LogLevel = DEFAULT_LEVEL
    enable_console: bool = DEFAULT_ENABLE_CONSOLE
    colorize: bool = DEFAULT_COLORIZE
    serialize: bool = DEFAULT_SERIALIZE
    service_name: str = DEFAULT_SERVICE_NAME

    def __post_init__(self):
        if isinstance(self.level, str) and not isinstance(self.level, LogLevel):
            value = self.level.upper()
            if value == "WARNING":
                value = LogLevel.WARN.value
            try:
                self.level = LogLevel(value)
            except ValueError:
                valid_levels = [l.value for l in LogLevel]
                raise ValueError(
                    f"Invalid log level: {self.level}. Must be one of {valid_levels}"
                )
        if not self.service_name:
            raise ValueError("service_name cannot be empty")


__all__ = ["LoggerConfig"]
