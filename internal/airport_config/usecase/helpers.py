import json
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Pattern

import yaml

from internal.airport_config.constant import *
from internal.airport_config.errors import ErrConfigNotFound, ErrInvalidConfig
from internal.airport_config.type import *


def compile_keyword_pattern(keywords: Iterable[str]) -> Optional[Pattern]:
    """Case-insensitive whole-word alternation over ``keywords``.

    Multi-word keywords match any run of whitespace between words, so
    "check in" matches "check  in". Returns None for an empty list.
    """
    parts = []
    for keyword in keywords:
        words = keyword.strip().lower().split()
        if words:
            parts.append(r"\s+".join(re.escape(w) for w in words))
    if not parts:
        return None
    # Longest first so "lost bag" wins over "bag" in findall
    parts.sort(key=len, reverse=True)
    return re.compile(r"(?<!\w)(?:" + "|".join(parts) + r")(?!\w)", re.IGNORECASE)


def load_file(path: str) -> Dict[str, Any]:
    file_path = Path(path)
    if not file_path.exists():
        raise ErrConfigNotFound(f"airport config not found: {path}")
    if file_path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ErrInvalidConfig(f"unsupported airport config format: {file_path.suffix}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            if file_path.suffix.lower() == ".json":
                raw = json.load(f)
            else:
                raw = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ErrInvalidConfig(f"cannot parse {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ErrInvalidConfig(f"{path} must contain a mapping at top level")
    return raw


def _str_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def _parse_airlines(raw: Any) -> List[Airline]:
    airlines = []
    if isinstance(raw, dict):
        for slug, item in raw.items():
            item = item or {}
            airlines.append(
                Airline(
                    slug=slug,
                    display_name=item.get("displayName") or slug.replace("_", " ").title(),
                    keywords=_str_list(item.get("keywords")) or [slug.replace("_", " ")],
                )
            )
    elif isinstance(raw, list):
        # Plain list of names, e.g. ["indigo", "air india"]
        for name in raw:
            slug = str(name).strip().lower().replace(" ", "_")
            airlines.append(Airline(slug=slug, display_name=str(name), keywords=[str(name).lower()]))
    return airlines


def parse_config(raw: Dict[str, Any]) -> AirportConfig:
    airport_raw = raw.get("airport")
    if not isinstance(airport_raw, dict):
        raise ErrInvalidConfig("missing 'airport' section")

    try:
        airport = AirportInfo(
            code=airport_raw.get("code", ""),
            city=airport_raw.get("city", ""),
            alternate_city=airport_raw.get("alternateCity", ""),
            airport_name=airport_raw.get("airportName", ""),
            location_slug=airport_raw.get("locationSlug", ""),
            synonyms=_str_list(airport_raw.get("synonyms")),
        )
    except ValueError as exc:
        raise ErrInvalidConfig(str(exc)) from exc

    ui_raw = raw.get("ui") or {}
    dc_raw = raw.get("dataCollection") or {}
    search_raw = dc_raw.get("searchTerms") or {}
    reddit_raw = search_raw.get("reddit") or {}
    news_raw = search_raw.get("news") or {}
    security_raw = raw.get("security") or {}

    categories = {
        name: _str_list(keywords) for name, keywords in (raw.get("categories") or {}).items()
    }

    return AirportConfig(
        airport=airport,
        airlines=_parse_airlines(raw.get("airlines")),
        categories=categories,
        ui=UITemplates(
            bot_name=ui_raw.get("botName", DEFAULT_BOT_NAME),
            greeting_template=ui_raw.get("greetingTemplate", ""),
            rejection_template=ui_raw.get("rejectionTemplate", ""),
            default_template=ui_raw.get("defaultTemplate", ""),
        ),
        data_collection=DataCollection(
            default_query_template=dc_raw.get("defaultQueryTemplate", DEFAULT_QUERY_TEMPLATE),
            reddit_airport_term=reddit_raw.get("airport", ""),
            reddit_airline_terms=_str_list(reddit_raw.get("airlines")),
            news_keywords=_str_list(news_raw.get("keywords")),
            user_agents=dict(dc_raw.get("userAgents") or {}),
            news_feeds=dict(dc_raw.get("newsFeeds") or {}),
        ),
        security=SecurityRules(
            prompt_injection_patterns=_str_list(security_raw.get("promptInjectionPatterns")),
            out_of_scope_terms=_str_list(security_raw.get("outOfScopeTerms")),
        ),
    )


__all__ = [
    "compile_keyword_pattern",
    "load_file",
    "parse_config",
]
