from typing import Dict, FrozenSet, List, Optional, Pattern, Tuple

from internal.sentiment_analysis.constant import *


def match_words(
    tokens: List[str], positive: FrozenSet[str], negative: FrozenSet[str]
) -> Tuple[List[str], List[str]]:
    """Every token found in a list counts once per occurrence."""
    pos = [t for t in tokens if t in positive]
    neg = [t for t in tokens if t in negative]
    return pos, neg


def raw_score(pos_count: int, neg_count: int) -> float:
    total = pos_count + neg_count
    if total == 0:
        return 0.0
    return (pos_count - neg_count) / total


def threshold(raw: float, threshold_positive: float, threshold_negative: float) -> float:
    if raw > threshold_positive:
        return LABEL_POSITIVE
    if raw < threshold_negative:
        return LABEL_NEGATIVE
    return LABEL_NEUTRAL


def unit_score(raw: float) -> float:
    """Map [-1, 1] linearly onto [0, 1]."""
    return round((raw + 1.0) / 2.0, 4)


def category_breakdown(
    text: str, overall: float, category_patterns: Dict[str, Optional[Pattern]]
) -> Dict[str, Optional[float]]:
    return {
        name: (overall if pattern is not None and pattern.search(text) else None)
        for name, pattern in category_patterns.items()
    }


__all__ = [
    "match_words",
    "raw_score",
    "threshold",
    "unit_score",
    "category_breakdown",
]
