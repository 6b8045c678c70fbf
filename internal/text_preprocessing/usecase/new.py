from typing import Optional

from pkg.logger.logger import Logger
from internal.text_preprocessing.type import Config
from .text_processing import TextProcessing


def New(config: Optional[Config] = None, logger: Optional[Logger] = None) -> TextProcessing:
    """Create new TextProcessing instance.

    Args:
        config: Which constructs to strip (default: all of them)
        logger: Logger instance (optional)

    Raises:
        ValueError: If config is invalid
    """
    if config is None:
        config = Config()
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return TextProcessing(config, logger)


__all__ = ["New"]
