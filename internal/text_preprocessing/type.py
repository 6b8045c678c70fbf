from dataclasses import dataclass

from .constant import *


@dataclass
class Config:
    strip_html: bool = DEFAULT_STRIP_HTML
    strip_urls: bool = DEFAULT_STRIP_URLS
    strip_mentions: bool = DEFAULT_STRIP_MENTIONS
    strip_hashtags: bool = DEFAULT_STRIP_HASHTAGS


@dataclass
class Stats:
    original_length: int
    clean_length: int
    reduction_ratio: float
    html_tags_removed: int
    urls_removed: int
    mentions_removed: int
    hashtags_removed: int


@dataclass
class Input:
    text: str


@dataclass
class Output:
    clean_text: str
    stats: Stats


__all__ = [
    "Config",
    "Stats",
    "Input",
    "Output",
]
