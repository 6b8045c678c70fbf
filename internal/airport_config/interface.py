from typing import Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class IAirportProfile(Protocol):
    """Read-only view over the airport keyword sets and templates."""

    def format_template(self, template: str, **extra: str) -> str: ...

    def build_default_query(self) -> str: ...

    def reddit_search_terms(self) -> List[str]: ...

    def news_keywords(self) -> List[str]: ...

    def category_keywords(self) -> Dict[str, List[str]]: ...

    def airline_keywords(self) -> Dict[str, List[str]]: ...

    def extract_location_focus(self, text: str) -> Optional[str]: ...

    def extract_airline_mention(self, text: str) -> Optional[str]: ...

    def to_dict(self) -> dict: ...


__all__ = ["IAirportProfile"]
