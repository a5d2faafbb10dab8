"""
Chat proxy endpoint for the floating site chatbot.
"""
import time
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from chatbot import TeamChatbot
from dependencies import get_chatbot
from errors import ValidationError

router = APIRouter(tags=["chat"])


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    response: str
    response_time_ms: float


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, bot: TeamChatbot = Depends(get_chatbot)):
    """Send a message and get a response. Upstream failures degrade to a canned reply."""
    if not request.message or not request.message.strip():
        raise ValidationError(["Message is required"])

    start = time.time()
    response = await bot.reply(request.message)
    elapsed = (time.time() - start) * 1000

    return ChatResponse(
        response=response,
        response_time_ms=round(elapsed, 2)
    )
