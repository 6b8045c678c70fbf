from typing import Dict, Final, List, Tuple

DEFAULT_HISTORY_SIZE: Final[int] = 10
DEFAULT_MAX_SESSIONS: Final[int] = 1000
MAX_MESSAGE_LENGTH: Final[int] = 2000

# Guards match whole words only
GUARD_PATTERN_TEMPLATE: Final[str] = r"(?<!\w)(?:{})(?!\w)"

CONTEXT_LIMIT: Final[int] = 5
STATS_SAMPLE_SIZE: Final[int] = 1000

CHAT_MAX_TOKENS: Final[int] = 500
CHAT_TEMPERATURE: Final[float] = 0.7

# Reply sources
SOURCE_REJECTED: Final[str] = "rejected"
SOURCE_TOPIC: Final[str] = "topic"
SOURCE_LLM: Final[str] = "llm"
SOURCE_FALLBACK: Final[str] = "fallback"

# Topics, checked in order; the first topic with a matching trigger wins
TOPIC_SENTIMENT: Final[str] = "sentiment"
TOPIC_LUGGAGE: Final[str] = "luggage"
TOPIC_LOUNGE: Final[str] = "lounge"
TOPIC_SECURITY: Final[str] = "security"
TOPIC_CHECKIN: Final[str] = "checkin"
TOPIC_DELAY: Final[str] = "delay"

TOPIC_TRIGGERS: Final[List[Tuple[str, Tuple[str, ...]]]] = [
    (TOPIC_SENTIMENT, ("sentiment", "indigo")),
    (TOPIC_LUGGAGE, ("luggage", "baggage")),
    (TOPIC_LOUNGE, ("lounge",)),
    (TOPIC_SECURITY, ("security",)),
    (TOPIC_CHECKIN, ("check", "checkin")),
    (TOPIC_DELAY, ("delay",)),
]

# Topic -> sentiment category its numbers come from
TOPIC_CATEGORIES: Final[Dict[str, str]] = {
    TOPIC_LUGGAGE: "luggage_handling",
    TOPIC_LOUNGE: "lounge",
    TOPIC_SECURITY: "security",
    TOPIC_CHECKIN: "check_in",
}

DELAY_TERMS: Final[Tuple[str, ...]] = ("delay", "delayed", "late", "cancelled")

# ${...} placeholders are filled from the airport config plus the live numbers
TOPIC_TEMPLATES: Final[Dict[str, str]] = {
    TOPIC_SENTIMENT: (
        "Based on ${total} recent social media posts about ${airportName}, "
        "${positivePct}% are positive and ${negativePct}% negative, with an "
        "average sentiment of ${avgSentiment}.${airlineLine}"
    ),
    TOPIC_LUGGAGE: (
        "Luggage handling at ${airportName} comes up in ${mentions} recent posts. "
        "${positivePct}% of them are positive and ${negativePct}% negative "
        "(average ${avgSentiment}), so baggage delivery and claims remain worth watching."
    ),
    TOPIC_LOUNGE: (
        "Lounges at ${airportName} are mentioned in ${mentions} recent posts, "
        "${positivePct}% positive and ${negativePct}% negative (average ${avgSentiment})."
    ),
    TOPIC_SECURITY: (
        "Security screening at ${airportName} appears in ${mentions} recent posts: "
        "${positivePct}% positive, ${negativePct}% negative (average ${avgSentiment}). "
        "Wait times during peak hours are the usual complaint."
    ),
    TOPIC_CHECKIN: (
        "Check-in experiences at ${airportName} show up in ${mentions} recent posts, "
        "${positivePct}% positive and ${negativePct}% negative (average ${avgSentiment})."
    ),
    TOPIC_DELAY: (
        "${mentions} recent posts about ${airportName} mention delays or "
        "cancellations; ${negativePct}% of them are negative (average ${avgSentiment})."
    ),
}

NO_DATA_TEMPLATE: Final[str] = (
    "I don't have recent posts about ${topic} at ${airportName} yet. "
    "Try again after the next data collection run."
)

AIRLINE_LINE_TEMPLATE: Final[str] = " ${airline} has an average sentiment of ${airlineSentiment} across ${airlineMentions} posts."

SYSTEM_PROMPT_TEMPLATE: Final[str] = (
    "You are ${botName}, an AI assistant specialized in ${airportName} analytics "
    "and passenger experience insights. You have access to social media data about "
    "${city} airport and the airlines serving it: ${airlines}.\n\n"
    "Provide helpful, accurate responses about:\n"
    "- Airport facilities and services\n"
    "- Airline performance and passenger satisfaction\n"
    "- Travel tips and recommendations\n"
    "- Current sentiment trends\n\n"
    "Use the provided social media context to give data-driven insights.\n"
    "Keep responses concise, helpful, and professional."
)

CONTEXT_HEADER: Final[str] = "Relevant social media data:\n"
NO_CONTEXT: Final[str] = "No specific social media data found for this query."

LLM_DISABLED_REPLY: Final[str] = (
    "I'm currently running without AI capabilities. "
    "Please configure OpenAI API key for full functionality."
)
LLM_FAILED_REPLY: Final[str] = "I'm experiencing technical difficulties. Please try again later."
