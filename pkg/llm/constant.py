DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"
DEFAULT_EMBEDDING_DIMENSIONS = 1536
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 0
DEFAULT_CHAT_MAX_TOKENS = 500
DEFAULT_CHAT_TEMPERATURE = 0.7

ERROR_API_KEY_EMPTY = "api_key is required to call the LLM"
ERROR_INVALID_TIMEOUT = "timeout must be > 0"
ERROR_INVALID_DIMENSIONS = "embedding_dimensions must be > 0"
