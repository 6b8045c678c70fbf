"""Chat assistant API routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from internal.chat import IChatUseCase
from ..dependencies import get_chat
from ..schemas import ChatRequest

router = APIRouter()


@router.post("/ava/chat")
@router.post("/aerobot/chat", include_in_schema=False)
async def chat(
    body: ChatRequest,
    assistant: IChatUseCase = Depends(get_chat),
) -> Dict[str, Any]:
    """Answer one chat message; ``/aerobot/chat`` is the legacy path."""
    reply = await assistant.reply(body.message, session_id=body.session_id)
    return reply.to_dict()
