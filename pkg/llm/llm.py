from typing import List, Optional, Sequence

from loguru import logger
from openai import AsyncOpenAI, OpenAIError

from .constant import *
from .errors import ErrLLMRequestFailed, ErrLLMUnavailable
from .interface import ILLM
from .type import ChatMessage, LLMConfig


class OpenAILLM(ILLM):
    """Thin async wrapper over the OpenAI SDK for chat and embeddings.

    Provider errors are re-raised as ErrLLMRequestFailed so callers only
    depend on this package's exceptions.
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        self.client: Optional[AsyncOpenAI] = None
        if config.api_key:
            self.client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout,
                max_retries=config.max_retries,
            )
            logger.info(f"OpenAI client initialized: chat={config.chat_model}")
        else:
            logger.warning("OpenAI api_key not set, LLM features disabled")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def _require_client(self) -> AsyncOpenAI:
        if self.client is None:
            raise ErrLLMUnavailable(ERROR_API_KEY_EMPTY)
        return self.client

    async def chat(
        self,
        messages: Sequence[ChatMessage],
        max_tokens: int = DEFAULT_CHAT_MAX_TOKENS,
        temperature: float = DEFAULT_CHAT_TEMPERATURE,
    ) -> str:
        client = self._require_client()
        try:
            response = await client.chat.completions.create(
                model=self.config.chat_model,
                messages=[{"role": m.role, "content": m.content} for m in messages],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI chat failed: {e}")
            raise ErrLLMRequestFailed(f"chat: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise ErrLLMRequestFailed("chat: empty completion")
        return content

    async def embed(self, text: str) -> List[float]:
        client = self._require_client()
        try:
            response = await client.embeddings.create(
                model=self.config.embedding_model,
                input=text,
                dimensions=self.config.embedding_dimensions,
            )
        except OpenAIError as e:
            logger.error(f"OpenAI embedding failed: {e}")
            raise ErrLLMRequestFailed(f"embed: {e}") from e
        return list(response.data[0].embedding)

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()


__all__ = ["OpenAILLM"]
