from typing import Optional

from pkg.logger.logger import Logger
from internal.sentiment_analysis.type import Config
from .sentiment_analysis import SentimentAnalysis


def New(config: Optional[Config] = None, logger: Optional[Logger] = None) -> SentimentAnalysis:
    """Create new SentimentAnalysis instance.

    Args:
        config: Category keywords and thresholds (default: built-in sets)
        logger: Logger instance (optional)

    Raises:
        ValueError: If config is invalid
    """
    if config is None:
        config = Config()
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    return SentimentAnalysis(config, logger)


__all__ = ["New"]
