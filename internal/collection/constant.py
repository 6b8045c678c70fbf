from typing import Dict, Final, List, Tuple

# Source names, in registry order
SOURCE_TWITTER: Final[str] = "twitter"
SOURCE_REDDIT: Final[str] = "reddit"
SOURCE_FACEBOOK: Final[str] = "facebook"
SOURCE_CNN: Final[str] = "cnn"
SOURCE_AAJTAK: Final[str] = "aajtak"
SOURCE_WION: Final[str] = "wion"
SOURCE_ZEE_NEWS: Final[str] = "zee_news"
SOURCE_NDTV: Final[str] = "ndtv"
SOURCE_INSHORTS: Final[str] = "inshorts"

SOURCES: Final[List[str]] = [
    SOURCE_TWITTER,
    SOURCE_REDDIT,
    SOURCE_FACEBOOK,
    SOURCE_CNN,
    SOURCE_AAJTAK,
    SOURCE_WION,
    SOURCE_ZEE_NEWS,
    SOURCE_NDTV,
    SOURCE_INSHORTS,
]

# RSS feeds whose URL can be overridden by the "<source>_rss_url" credential
RSS_FEED_SOURCES: Final[List[str]] = [SOURCE_AAJTAK, SOURCE_WION, SOURCE_ZEE_NEWS, SOURCE_NDTV]

# Credential keys each source needs
CREDENTIAL_TWITTER_BEARER_TOKEN: Final[str] = "twitter_bearer_token"
CREDENTIAL_REDDIT_CLIENT_ID: Final[str] = "reddit_client_id"
CREDENTIAL_REDDIT_CLIENT_SECRET: Final[str] = "reddit_client_secret"
CREDENTIAL_FACEBOOK_ACCESS_TOKEN: Final[str] = "facebook_access_token"
CREDENTIAL_CNN_API_KEY: Final[str] = "cnn_api_key"
RSS_URL_CREDENTIAL_SUFFIX: Final[str] = "_rss_url"

# Provider endpoints
TWITTER_SEARCH_URL: Final[str] = "https://api.twitter.com/2/tweets/search/recent"
TWITTER_STATUS_URL: Final[str] = "https://twitter.com/i/web/status/{id}"
TWITTER_MIN_RESULTS: Final[int] = 10
TWITTER_MAX_RESULTS: Final[int] = 100

REDDIT_TOKEN_URL: Final[str] = "https://www.reddit.com/api/v1/access_token"
REDDIT_SEARCH_URL: Final[str] = "https://oauth.reddit.com/search"
REDDIT_BASE_URL: Final[str] = "https://reddit.com"

FACEBOOK_SEARCH_URL: Final[str] = "https://graph.facebook.com/v18.0/search"
FACEBOOK_POST_URL: Final[str] = "https://facebook.com/{id}"
FACEBOOK_FIELDS: Final[str] = (
    "id,from,message,story,created_time,permalink_url,"
    "likes.summary(true),comments.summary(true),shares"
)

# News author labels; other feeds use the platform tag
NEWS_AUTHOR_NAMES: Final[Dict[str, str]] = {SOURCE_CNN: "CNN News"}
NEWS_EVENT_ID_LENGTH: Final[int] = 16

# Query terms are OR-separated
QUERY_SEPARATOR: Final[str] = " OR "

DEFAULT_HTTP_TIMEOUT: Final[float] = 15.0
DEFAULT_MAX_RESULTS: Final[int] = 20
DEFAULT_SCHEDULE_INTERVAL: Final[int] = 3600
