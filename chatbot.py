"""
Chat proxy logic - forwards one visitor message to the upstream model
under the TeamRAW persona, with canned replies for every failure path.
"""
import logging
from typing import Optional

from errors import UpstreamError
from llm import ChatProvider
from prompts import (
    DEMO_RESPONSE, EMPTY_RESPONSE, ERROR_RESPONSE, SYSTEM_PROMPT, UNAVAILABLE_RESPONSE
)

logger = logging.getLogger(__name__)


class TeamChatbot:
    """Stateless wrapper around a chat provider. No history is kept."""

    def __init__(self, provider: Optional[ChatProvider] = None, system_prompt: str = SYSTEM_PROMPT):
        self.provider = provider
        self.system_prompt = system_prompt

    @property
    def is_demo(self) -> bool:
        return self.provider is None

    async def reply(self, message: str) -> str:
        """Answer a visitor message. Never raises."""
        if self.is_demo:
            return DEMO_RESPONSE

        try:
            text = await self.provider.complete(self.system_prompt, message)
        except UpstreamError as e:
            logger.warning("Chat upstream unavailable: %s", e)
            return UNAVAILABLE_RESPONSE
        except Exception:
            logger.exception("Chat proxy error")
            return ERROR_RESPONSE

        text = (text or "").strip()
        return text or EMPTY_RESPONSE

    async def close(self):
        if self.provider is not None:
            await self.provider.close()
