# Regex patterns
PATTERN_HTML_TAG = r"<[^>]*>"
PATTERN_URL = r"(?:https?://|www\.)\S+"
PATTERN_MENTION = r"@\w+"
PATTERN_HASHTAG = r"#\w+"
PATTERN_WHITESPACE = r"\s+"

UNICODE_FORM = "NFKC"

DEFAULT_STRIP_HTML = True
DEFAULT_STRIP_URLS = True
DEFAULT_STRIP_MENTIONS = True
DEFAULT_STRIP_HASHTAGS = True
