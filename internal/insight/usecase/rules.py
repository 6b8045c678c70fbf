"""Pattern flags, insight templates and priority scoring.

Flags are detected from an Analysis in a fixed order (overall sentiment,
categories, opportunities, airlines) and each becomes one insight. A
strategic engagement insight is appended when platforms are busy. The
stable sort keeps that order among insights with equal priority.
"""

from typing import Callable, List, Optional

from internal.insight.constant import *
from internal.insight.type import Analysis, Flag, Insight


def format_category(category: str) -> str:
    return " ".join(word.capitalize() for word in category.split("_"))


def _pct(value: float, digits: int = 0) -> str:
    return f"{abs(value) * 100:.{digits}f}"


def detect_flags(analysis: Analysis) -> List[Flag]:
    flags = []

    change = analysis.sentiment.weekly_change
    if change < SENTIMENT_DROP_THRESHOLD:
        flags.append(
            Flag(
                FLAG_SENTIMENT_DROP,
                {
                    "type": FLAG_SENTIMENT_DROP,
                    "severity": SEVERITY_HIGH,
                    "category": "overall_sentiment",
                    "change": change,
                    "description": f"Overall sentiment dropped by {_pct(change, 1)}% in the last week",
                },
            )
        )

    for category, stats in analysis.categories.items():
        if (
            stats.average_sentiment < CATEGORY_ISSUE_SENTIMENT
            and stats.mention_count > CATEGORY_ISSUE_MIN_MENTIONS
        ):
            severity = (
                SEVERITY_HIGH if stats.average_sentiment < HIGH_SEVERITY_SENTIMENT else SEVERITY_MEDIUM
            )
            flags.append(
                Flag(
                    FLAG_CATEGORY_ISSUE,
                    {
                        "type": FLAG_CATEGORY_ISSUE,
                        "severity": severity,
                        "category": category,
                        "sentiment": stats.average_sentiment,
                        "mentions": stats.mention_count,
                    },
                )
            )

    for category, stats in analysis.categories.items():
        if (
            stats.average_sentiment > OPPORTUNITY_SENTIMENT
            and stats.mention_count > OPPORTUNITY_MIN_MENTIONS
        ):
            flags.append(
                Flag(
                    FLAG_POSITIVE_CATEGORY,
                    {
                        "type": FLAG_POSITIVE_CATEGORY,
                        "category": category,
                        "sentiment": stats.average_sentiment,
                        "mentions": stats.mention_count,
                    },
                )
            )

    for airline, stats in analysis.airlines.items():
        if (
            stats.average_sentiment < AIRLINE_ALERT_SENTIMENT
            and stats.mention_count > AIRLINE_ALERT_MIN_MENTIONS
        ):
            severity = (
                SEVERITY_HIGH if stats.average_sentiment < HIGH_SEVERITY_SENTIMENT else SEVERITY_MEDIUM
            )
            flags.append(
                Flag(
                    FLAG_AIRLINE_ISSUE,
                    {
                        "type": FLAG_AIRLINE_ISSUE,
                        "severity": severity,
                        "airline": airline,
                        "sentiment": stats.average_sentiment,
                        "mentions": stats.mention_count,
                    },
                )
            )

    return flags


def flag_insight(flag: Flag, insight_id: str, airline_name: Callable[[str], str]) -> Insight:
    raw = flag.raw
    high = flag.severity == SEVERITY_HIGH

    if flag.kind == FLAG_SENTIMENT_DROP:
        return Insight(
            id=insight_id,
            type=TYPE_OPTIMIZATION,
            title="Address Overall Sentiment Decline",
            description=(
                f"Overall passenger sentiment has declined by {_pct(raw['change'], 1)}% in "
                "recent days. This requires immediate attention to identify root causes and "
                "implement corrective measures."
            ),
            action_text="Investigate Now",
            color=COLOR_RED,
            raw_data=raw,
        )

    if flag.kind == FLAG_CATEGORY_ISSUE:
        name = format_category(raw["category"])
        return Insight(
            id=insight_id,
            type=TYPE_OPTIMIZATION,
            title=f"Improve {name}",
            description=(
                f"{name} showing negative sentiment (-{_pct(raw['sentiment'])}%) across "
                f"{raw['mentions']} recent mentions. Immediate service quality review and "
                "improvement initiatives recommended."
            ),
            action_text="View Details",
            color=COLOR_RED if high else COLOR_YELLOW,
            raw_data=raw,
        )

    if flag.kind == FLAG_POSITIVE_CATEGORY:
        name = format_category(raw["category"])
        strength = "exceptional" if raw["sentiment"] > EXCEPTIONAL_SENTIMENT else "strong"
        return Insight(
            id=insight_id,
            type=TYPE_STRATEGY,
            title=f"Leverage {name} Excellence",
            description=(
                f"{name} receiving {strength} positive feedback (+{_pct(raw['sentiment'])}%). "
                "Consider highlighting this service in marketing campaigns and passenger "
                "communications."
            ),
            action_text="Implement Strategy",
            color=COLOR_GREEN,
            raw_data=raw,
        )

    name = airline_name(raw["airline"])
    return Insight(
        id=insight_id,
        type=TYPE_OPTIMIZATION,
        title=f"Address {name} Service Issues",
        description=(
            f"{name} showing {'critical' if high else 'concerning'} sentiment trends "
            f"(-{_pct(raw['sentiment'])}%) across {raw['mentions']} mentions. Immediate "
            "service quality review recommended."
        ),
        action_text="Review Performance",
        color=COLOR_RED if high else COLOR_YELLOW,
        raw_data=raw,
    )


def strategic_insight(analysis: Analysis, insight_id: str) -> Optional[Insight]:
    if not analysis.platforms:
        return None
    total = sum(p.total_engagement for p in analysis.platforms.values())
    average = total / len(analysis.platforms)
    if average <= HIGH_ENGAGEMENT:
        return None

    level = "exceptionally" if average > EXCEPTIONAL_ENGAGEMENT else "significantly"
    return Insight(
        id=insight_id,
        type=TYPE_ENGAGEMENT,
        title="Capitalize on High Social Engagement",
        description=(
            f"Social media engagement is {level} high ({average:.0f} avg interactions). "
            "Optimize content strategy and response times to maximize passenger "
            "communication effectiveness."
        ),
        action_text="Optimize Strategy",
        color=COLOR_BLUE,
        raw_data={"totalEngagement": total, "avgEngagement": average},
    )


def build_insights(analysis: Analysis, airline_name: Callable[[str], str]) -> List[Insight]:
    insights = [
        flag_insight(flag, str(i), airline_name)
        for i, flag in enumerate(detect_flags(analysis), start=1)
    ]
    strategic = strategic_insight(analysis, str(len(insights) + 1))
    if strategic is not None:
        insights.append(strategic)
    return insights


def priority_score(insight: Insight) -> int:
    score = COLOR_WEIGHTS.get(insight.color, 0) + TYPE_WEIGHTS.get(insight.type, 0)
    raw = insight.raw_data or {}
    if raw.get("severity") == SEVERITY_HIGH:
        score += HIGH_SEVERITY_BONUS
    if (raw.get("mentions") or 0) > MANY_MENTIONS_THRESHOLD:
        score += MANY_MENTIONS_BONUS
    if abs(raw.get("sentiment") or 0) > STRONG_SENTIMENT_THRESHOLD:
        score += STRONG_SENTIMENT_BONUS
    return score


def business_impact(insight: Insight) -> str:
    if insight.color == COLOR_RED:
        return "High"
    if insight.color in (COLOR_YELLOW, COLOR_BLUE):
        return "Medium"
    return "Low"


def urgency(insight: Insight) -> str:
    if insight.color == COLOR_RED:
        return "Immediate" if insight.type == TYPE_OPTIMIZATION else "High"
    if insight.color == COLOR_YELLOW:
        return "Medium"
    return "Low"


def prioritize(insights: List[Insight]) -> List[Insight]:
    """Score every insight and sort by priority, highest first."""
    for insight in insights:
        insight.priority = priority_score(insight)
        insight.business_impact = business_impact(insight)
        insight.urgency = urgency(insight)
    return sorted(insights, key=lambda i: i.priority, reverse=True)


__all__ = [
    "build_insights",
    "business_impact",
    "detect_flags",
    "flag_insight",
    "format_category",
    "prioritize",
    "priority_score",
    "strategic_insight",
    "urgency",
]
