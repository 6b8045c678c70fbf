import re
from typing import Dict, Iterable, List, Optional, Pattern, Sequence

from internal.airport_config import AirportProfile, compile_keyword_pattern
from internal.chat.constant import *
from internal.model import SocialEvent
from internal.social_event.constant import NEGATIVE_THRESHOLD, POSITIVE_THRESHOLD

_DELAY_PATTERN = compile_keyword_pattern(DELAY_TERMS)


def compile_guard_patterns(patterns: Iterable[str]) -> List[Pattern]:
    """Case-insensitive whole-word regexes.

    "act as" matches "act as a pilot" but not "impact as". A pattern that is
    not valid regex matches literally.
    """
    compiled = []
    for pattern in patterns:
        if not pattern:
            continue
        try:
            re.compile(pattern)
        except re.error:
            pattern = re.escape(pattern)
        compiled.append(re.compile(GUARD_PATTERN_TEMPLATE.format(pattern), re.IGNORECASE))
    return compiled


def is_rejected(
    message: str,
    injection_patterns: Sequence[Pattern],
    out_of_scope: Optional[Pattern],
) -> bool:
    if any(p.search(message) for p in injection_patterns):
        return True
    return out_of_scope is not None and out_of_scope.search(message) is not None


def route_topic(message: str) -> Optional[str]:
    lowered = message.lower()
    for topic, triggers in TOPIC_TRIGGERS:
        if any(trigger in lowered for trigger in triggers):
            return topic
    return None


def summarize(values: Sequence[float]) -> Dict[str, str]:
    """Template numbers for a list of sentiment values (must be non-empty)."""
    total = len(values)
    positive = sum(1 for v in values if v > POSITIVE_THRESHOLD)
    negative = sum(1 for v in values if v < NEGATIVE_THRESHOLD)
    return {
        "mentions": str(total),
        "total": str(total),
        "positivePct": str(round(100 * positive / total)),
        "negativePct": str(round(100 * negative / total)),
        "avgSentiment": f"{sum(values) / total:+.2f}",
    }


def topic_values(topic: str, events: Sequence[SocialEvent]) -> List[float]:
    """Sentiment values that back the numbers of one topic."""
    category = TOPIC_CATEGORIES.get(topic)
    if category is not None:
        values = []
        for event in events:
            if event.sentiment_analysis is None:
                continue
            value = event.sentiment_analysis.categories.get(category)
            if value is not None:
                values.append(float(value))
        return values

    if topic == TOPIC_DELAY:
        return [
            e.overall_sentiment
            for e in events
            if _DELAY_PATTERN.search(e.clean_event_text or e.event_content or "")
        ]

    return [e.overall_sentiment for e in events]


def topic_reply(
    topic: str,
    message: str,
    events: Sequence[SocialEvent],
    airport: AirportProfile,
) -> str:
    values = topic_values(topic, events)
    if not values:
        return airport.format_template(NO_DATA_TEMPLATE, topic=topic)

    numbers = summarize(values)
    numbers["airlineLine"] = ""
    if topic == TOPIC_SENTIMENT:
        slug = airport.extract_airline_mention(message)
        airline_values = [e.overall_sentiment for e in events if slug and e.airline_mentioned == slug]
        if airline_values:
            numbers["airlineLine"] = airport.format_template(
                AIRLINE_LINE_TEMPLATE,
                airline=airport.airline_display_name(slug),
                airlineSentiment=f"{sum(airline_values) / len(airline_values):+.2f}",
                airlineMentions=str(len(airline_values)),
            )
    return airport.format_template(TOPIC_TEMPLATES[topic], **numbers)


def build_context(texts: Sequence[str]) -> str:
    if not texts:
        return NO_CONTEXT
    return CONTEXT_HEADER + "\n\n".join(texts)


__all__ = [
    "build_context",
    "compile_guard_patterns",
    "is_rejected",
    "route_topic",
    "summarize",
    "topic_reply",
    "topic_values",
]
