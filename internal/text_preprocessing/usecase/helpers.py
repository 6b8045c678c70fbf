import unicodedata
from typing import Dict, List, Pattern, Tuple

from internal.text_preprocessing.constant import UNICODE_FORM


def clean_pass(
    text: str,
    removals: List[Tuple[str, Pattern]],
    whitespace_pattern: Pattern,
) -> Tuple[str, Dict[str, int]]:
    """One normalization pass: NFKC, removals in order, whitespace collapse.

    Returns the new text and how many matches each removal dropped.
    """
    counts: Dict[str, int] = {}
    result = unicodedata.normalize(UNICODE_FORM, text)
    for name, pattern in removals:
        result, n = pattern.subn(" ", result)
        counts[name] = n
    result = whitespace_pattern.sub(" ", result).strip()
    return result, counts


def normalize(
    text: str,
    removals: List[Tuple[str, Pattern]],
    whitespace_pattern: Pattern,
) -> Tuple[str, Dict[str, int]]:
    """Repeat clean_pass until the text is a fixed point.

    Every pass that changes already-clean text strictly shortens it, so the
    loop terminates, and the result is by construction unchanged by
    another call.
    """
    totals: Dict[str, int] = {name: 0 for name, _ in removals}
    if not text:
        return "", totals

    current = text
    while True:
        cleaned, counts = clean_pass(current, removals, whitespace_pattern)
        for name, n in counts.items():
            totals[name] += n
        if cleaned == current:
            return cleaned, totals
        current = cleaned


def reduction_ratio(original_length: int, clean_length: int) -> float:
    if original_length == 0:
        return 0.0
    return round(1.0 - clean_length / original_length, 4)


__all__ = [
    "clean_pass",
    "normalize",
    "reduction_ratio",
]
