"""Keyword sentiment scorer.

1. Tokenize lowercased text and count hits against fixed positive/negative lists
2. raw = (pos - neg) / (pos + neg), 0 when nothing matched
3. overall = sign of raw beyond +/-0.2; sentiment_score = (raw + 1) / 2
4. Each category takes the overall value when one of its keywords appears
"""

import re
from typing import Dict, Optional, Pattern

from pkg.logger.logger import Logger
from internal.airport_config import compile_keyword_pattern
from internal.model import SentimentAnalysis as SentimentAnalysisResult
from internal.sentiment_analysis.constant import *
from internal.sentiment_analysis.errors import ErrInvalidInput
from internal.sentiment_analysis.interface import ISentimentAnalysis
from internal.sentiment_analysis.type import Config, Input, Output
from .helpers import category_breakdown, match_words, raw_score, threshold, unit_score


class SentimentAnalysis(ISentimentAnalysis):
    """Heuristic word-list scorer; no model, no state beyond compiled patterns."""

    def __init__(self, config: Config, logger: Optional[Logger] = None):
        self.config = config
        self.logger = logger

        self.token_pattern = re.compile(PATTERN_TOKEN)
        self.category_patterns: Dict[str, Optional[Pattern]] = {
            name: compile_keyword_pattern(words)
            for name, words in config.category_keywords.items()
        }

        if self.logger:
            self.logger.info(
                "[SentimentAnalysis] Initialized",
                extra={
                    "categories": list(self.category_patterns),
                    "threshold_positive": config.threshold_positive,
                    "threshold_negative": config.threshold_negative,
                },
            )

    def process(self, input_data: Input) -> Output:
        """Score ``input_data.text``.

        Raises:
            ErrInvalidInput: If input_data is not an Input or text is not a str
        """
        if not isinstance(input_data, Input):
            raise ErrInvalidInput("input_data must be an instance of Input")
        text = input_data.text or ""
        if not isinstance(text, str):
            raise ErrInvalidInput(f"text must be str, got {type(text).__name__}")

        tokens = self.token_pattern.findall(text.lower())
        pos, neg = match_words(tokens, POSITIVE_WORDS, NEGATIVE_WORDS)
        raw = raw_score(len(pos), len(neg))
        overall = threshold(raw, self.config.threshold_positive, self.config.threshold_negative)

        return Output(
            overall_sentiment=overall,
            sentiment_score=unit_score(raw),
            raw_score=raw,
            categories=category_breakdown(text, overall, self.category_patterns),
            positive_matches=pos,
            negative_matches=neg,
        )

    def analyze(self, text: str) -> SentimentAnalysisResult:
        return self.process(Input(text=text)).to_model()


__all__ = ["SentimentAnalysis"]
