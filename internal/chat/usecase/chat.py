from typing import List, Optional

from pkg.llm.interface import ILLM
from pkg.llm.type import ChatMessage
from pkg.logger.logger import Logger
from internal.airport_config import AirportProfile, compile_keyword_pattern
from internal.chat.constant import *
from internal.chat.errors import ErrInvalidInput
from internal.chat.interface import IChatUseCase
from internal.chat.type import ChatReply, Config, Turn
from internal.event_index import IEventIndex
from internal.social_event import ISocialEventUseCase
from .helpers import build_context, compile_guard_patterns, is_rejected, route_topic, topic_reply
from .session import SessionStore


class ChatUseCase(IChatUseCase):
    """Airport assistant.

    1. Messages matching an injection pattern or out-of-scope term get the
       configured rejection.
    2. Topic keywords (sentiment, luggage, lounge, security, check-in,
       delay) get a canned answer filled with live store numbers.
    3. Anything else goes to the LLM with up to CONTEXT_LIMIT similar events
       as context; without an API key or on any LLM failure a fixed string
       is returned instead.
    """

    def __init__(
        self,
        config: Config,
        airport: AirportProfile,
        events: ISocialEventUseCase,
        llm: ILLM,
        index: Optional[IEventIndex] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.airport = airport
        self.events = events
        self.llm = llm
        self.index = index
        self.logger = logger

        security = airport.config.security
        self.injection_patterns = compile_guard_patterns(security.prompt_injection_patterns)
        self.out_of_scope = compile_keyword_pattern(security.out_of_scope_terms)
        self.sessions = SessionStore(config.history_size, config.max_sessions)

    def history(self, session_id: str) -> List[Turn]:
        return self.sessions.get(session_id)

    async def reply(self, message: str, session_id: Optional[str] = None) -> ChatReply:
        if not isinstance(message, str) or not message.strip():
            raise ErrInvalidInput("message is required")
        message = message.strip()
        if len(message) > MAX_MESSAGE_LENGTH:
            raise ErrInvalidInput(f"message must be at most {MAX_MESSAGE_LENGTH} characters")

        if is_rejected(message, self.injection_patterns, self.out_of_scope):
            if self.logger:
                self.logger.warning("[ChatUseCase] Message rejected", extra={"session_id": session_id})
            result = ChatReply(response=self.airport.rejection(), source=SOURCE_REJECTED)
        else:
            topic = route_topic(message)
            if topic is not None:
                result = await self._topic_reply(topic, message)
            else:
                result = await self._llm_reply(message, session_id)

        if session_id:
            self.sessions.append(session_id, "user", message)
            self.sessions.append(session_id, "assistant", result.response)
        return result

    async def _topic_reply(self, topic: str, message: str) -> ChatReply:
        events = await self.events.get_all(limit=STATS_SAMPLE_SIZE)
        return ChatReply(
            response=topic_reply(topic, message, events, self.airport),
            source=SOURCE_TOPIC,
            topic=topic,
        )

    def _system_prompt(self) -> str:
        airlines = ", ".join(
            self.airport.airline_display_name(slug) for slug in self.airport.airline_keywords()
        )
        return self.airport.format_template(SYSTEM_PROMPT_TEMPLATE, airlines=airlines)

    async def _llm_reply(self, message: str, session_id: Optional[str]) -> ChatReply:
        if not self.llm.enabled:
            return ChatReply(
                response=self.airport.default_reply() or LLM_DISABLED_REPLY,
                source=SOURCE_FALLBACK,
            )

        context: List[str] = []
        if self.index is not None:
            context = await self.index.search(message, limit=CONTEXT_LIMIT)

        messages = [ChatMessage(role="system", content=self._system_prompt())]
        if session_id:
            messages.extend(ChatMessage(role=t.role, content=t.content) for t in self.history(session_id))
        messages.append(
            ChatMessage(role="user", content=f"Context: {build_context(context)}\n\nQuestion: {message}")
        )

        try:
            response = await self.llm.chat(
                messages, max_tokens=CHAT_MAX_TOKENS, temperature=CHAT_TEMPERATURE
            )
        except Exception as exc:
            if self.logger:
                self.logger.error(f"[ChatUseCase] LLM chat failed: {exc}")
            return ChatReply(response=LLM_FAILED_REPLY, source=SOURCE_FALLBACK)

        return ChatReply(response=response, source=SOURCE_LLM)


__all__ = ["ChatUseCase"]
