import re
from typing import Dict, List, Optional, Pattern

from pkg.logger.logger import Logger
from internal.airport_config.constant import *
from internal.airport_config.interface import IAirportProfile
from internal.airport_config.type import AirportConfig
from .helpers import compile_keyword_pattern

_TEMPLATE_VAR = re.compile(TEMPLATE_VAR_PATTERN)


class AirportProfile(IAirportProfile):
    """Keyword sets, query builders and templates for one airport.

    Every keyword match is whole-word and case-insensitive, so short airline
    codes such as "ai" or "uk" do not fire inside "said" or "bulk".
    """

    def __init__(self, config: AirportConfig, logger: Optional[Logger] = None):
        self.config = config
        self.logger = logger

        self._location_pattern = compile_keyword_pattern(self.location_keywords())
        self._airline_patterns: Dict[str, Pattern] = {}
        for airline in config.airlines:
            pattern = compile_keyword_pattern(airline.keywords)
            if pattern is not None:
                self._airline_patterns[airline.slug] = pattern

        if self.logger:
            self.logger.info(
                f"[AirportProfile] Loaded {config.airport.city} ({config.airport.code})",
                extra={
                    "airlines": len(config.airlines),
                    "categories": len(config.categories),
                },
            )

    def _variables(self) -> Dict[str, str]:
        airport = self.config.airport
        return {
            "code": airport.code,
            "city": airport.city,
            "alternateCity": airport.alternate_city,
            "airportName": airport.airport_name,
            "locationSlug": airport.location_slug,
            "botName": self.config.ui.bot_name,
        }

    def format_template(self, template: str, **extra: str) -> str:
        """Replace ``${name}`` placeholders; unknown names are left as-is."""
        variables = self._variables()
        variables.update({k: str(v) for k, v in extra.items()})
        return _TEMPLATE_VAR.sub(
            lambda m: variables.get(m.group(1), m.group(0)), template
        )

    def build_default_query(self) -> str:
        airport_synonyms = " OR ".join(self.config.airport.synonyms)
        airlines = " OR ".join(a.display_name.lower() for a in self.config.airlines)
        return self.format_template(
            self.config.data_collection.default_query_template,
            airportSynonyms=airport_synonyms,
            airlines=airlines,
        )

    def reddit_search_terms(self) -> List[str]:
        dc = self.config.data_collection
        terms = [dc.reddit_airport_term] + list(dc.reddit_airline_terms)
        return [self.format_template(t) for t in terms if t]

    def news_keywords(self) -> List[str]:
        return [self.format_template(k) for k in self.config.data_collection.news_keywords]

    def user_agent(self, kind: str = USER_AGENT_GENERAL) -> str:
        agents = self.config.data_collection.user_agents
        template = agents.get(kind) or agents.get(USER_AGENT_GENERAL) or DEFAULT_USER_AGENT
        return self.format_template(template)

    def news_feed_url(self, source: str) -> Optional[str]:
        return self.config.data_collection.news_feeds.get(source)

    def location_keywords(self) -> List[str]:
        airport = self.config.airport
        keywords = list(airport.synonyms)
        for name in (airport.city, airport.alternate_city):
            if name:
                keywords.append(name)
        return keywords

    def category_keywords(self) -> Dict[str, List[str]]:
        return {name: list(words) for name, words in self.config.categories.items()}

    def airline_keywords(self) -> Dict[str, List[str]]:
        return {a.slug: list(a.keywords) for a in self.config.airlines}

    def airline_display_name(self, slug: str) -> str:
        for airline in self.config.airlines:
            if airline.slug == slug:
                return airline.display_name
        return slug.replace("_", " ").title()

    def extract_location_focus(self, text: str) -> Optional[str]:
        if text and self._location_pattern and self._location_pattern.search(text):
            return self.config.airport.location_slug
        return None

    def extract_airline_mention(self, text: str) -> Optional[str]:
        """First configured airline (in config order) whose keyword appears."""
        if not text:
            return None
        for slug, pattern in self._airline_patterns.items():
            if pattern.search(text):
                return slug
        return None

    def greeting(self) -> str:
        return self.format_template(self.config.ui.greeting_template)

    def rejection(self) -> str:
        return self.format_template(self.config.ui.rejection_template)

    def default_reply(self) -> str:
        return self.format_template(self.config.ui.default_template)

    def to_dict(self) -> dict:
        cfg = self.config
        return {
            "airport": {
                "code": cfg.airport.code,
                "city": cfg.airport.city,
                "alternateCity": cfg.airport.alternate_city,
                "airportName": cfg.airport.airport_name,
                "locationSlug": cfg.airport.location_slug,
                "synonyms": list(cfg.airport.synonyms),
            },
            "airlines": {
                a.slug: {"displayName": a.display_name, "keywords": list(a.keywords)}
                for a in cfg.airlines
            },
            "categories": self.category_keywords(),
            "ui": {
                "botName": cfg.ui.bot_name,
                "greeting": self.greeting(),
            },
            "dataCollection": {
                "defaultQuery": self.build_default_query(),
                "redditSearchTerms": self.reddit_search_terms(),
                "newsKeywords": self.news_keywords(),
            },
        }


__all__ = ["AirportProfile"]
