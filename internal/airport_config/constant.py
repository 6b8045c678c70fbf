DEFAULT_CONFIG_PATH = "config/airport.yaml"
SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")

TEMPLATE_VAR_PATTERN = r"\$\{(\w+)\}"

USER_AGENT_REDDIT = "reddit"
USER_AGENT_GENERAL = "general"

DEFAULT_BOT_NAME = "Ava"
DEFAULT_USER_AGENT = "AirportAnalytics/1.0"
DEFAULT_QUERY_TEMPLATE = "${airportSynonyms} OR ${airlines}"
