import re
from typing import List, Optional, Pattern, Tuple

from pkg.logger.logger import Logger
from internal.text_preprocessing.constant import *
from internal.text_preprocessing.errors import ErrInvalidInput
from internal.text_preprocessing.interface import ITextProcessing
from internal.text_preprocessing.type import Config, Input, Output, Stats
from .helpers import normalize, reduction_ratio


class TextProcessing(ITextProcessing):
    """Strips HTML tags, URLs, @mentions and #hashtags from post text.

    Output is NFKC-normalized, single-spaced and trimmed. Case is
    preserved; matching downstream is case-insensitive.
    """

    def __init__(self, config: Config, logger: Optional[Logger] = None):
        self.config = config
        self.logger = logger

        # Tags before URLs so "<a href=http://x>" goes in one piece
        self.removals: List[Tuple[str, Pattern]] = []
        if config.strip_html:
            self.removals.append(("html_tags", re.compile(PATTERN_HTML_TAG)))
        if config.strip_urls:
            self.removals.append(("urls", re.compile(PATTERN_URL, re.IGNORECASE)))
        if config.strip_mentions:
            self.removals.append(("mentions", re.compile(PATTERN_MENTION)))
        if config.strip_hashtags:
            self.removals.append(("hashtags", re.compile(PATTERN_HASHTAG)))
        self.whitespace_pattern = re.compile(PATTERN_WHITESPACE)

    def normalize(self, text: str) -> str:
        if text is None:
            return ""
        if not isinstance(text, str):
            raise ErrInvalidInput(f"text must be str, got {type(text).__name__}")
        clean, _ = normalize(text, self.removals, self.whitespace_pattern)
        return clean

    def process(self, input_data: Input) -> Output:
        if not isinstance(input_data, Input):
            raise ErrInvalidInput("input_data must be an instance of Input")
        text = input_data.text or ""
        if not isinstance(text, str):
            raise ErrInvalidInput(f"text must be str, got {type(text).__name__}")

        clean, counts = normalize(text, self.removals, self.whitespace_pattern)
        stats = Stats(
            original_length=len(text),
            clean_length=len(clean),
            reduction_ratio=reduction_ratio(len(text), len(clean)),
            html_tags_removed=counts.get("html_tags", 0),
            urls_removed=counts.get("urls", 0),
            mentions_removed=counts.get("mentions", 0),
            hashtags_removed=counts.get("hashtags", 0),
        )

        if self.logger:
            self.logger.debug(
                "[TextProcessing] Normalized",
                extra={
                    "original_length": stats.original_length,
                    "clean_length": stats.clean_length,
                },
            )
        return Output(clean_text=clean, stats=stats)


__all__ = ["TextProcessing"]
