from dataclasses import dataclass, field
from typing import Dict, List

from .constant import *


@dataclass
class AirportInfo:
    code: str
    city: str
    airport_name: str
    location_slug: str
    alternate_city: str = ""
    synonyms: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.code:
            raise ValueError("airport.code is required")
        if not self.location_slug:
            raise ValueError("airport.locationSlug is required")


@dataclass
class Airline:
    slug: str
    display_name: str
    keywords: List[str] = field(default_factory=list)


@dataclass
class UITemplates:
    bot_name: str = DEFAULT_BOT_NAME
    greeting_template: str = ""
    rejection_template: str = ""
    default_template: str = ""


@dataclass
class DataCollection:
    default_query_template: str = DEFAULT_QUERY_TEMPLATE
    reddit_airport_term: str = ""
    reddit_airline_terms: List[str] = field(default_factory=list)
    news_keywords: List[str] = field(default_factory=list)
    user_agents: Dict[str, str] = field(default_factory=dict)
    news_feeds: Dict[str, str] = field(default_factory=dict)


@dataclass
class SecurityRules:
    prompt_injection_patterns: List[str] = field(default_factory=list)
    out_of_scope_terms: List[str] = field(default_factory=list)


@dataclass
class AirportConfig:
    airport: AirportInfo
    airlines: List[Airline] = field(default_factory=list)
    categories: Dict[str, List[str]] = field(default_factory=dict)
    ui: UITemplates = field(default_factory=UITemplates)
    data_collection: DataCollection = field(default_factory=DataCollection)
    security: SecurityRules = field(default_factory=SecurityRules)


__all__ = [
    "AirportInfo",
    "Airline",
    "UITemplates",
    "DataCollection",
    "SecurityRules",
    "AirportConfig",
]
