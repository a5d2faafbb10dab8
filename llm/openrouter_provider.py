"""
OpenRouter chat completions via the OpenAI-compatible API.
"""
import logging
from typing import Optional

import httpx
import openai
from openai import AsyncOpenAI

from config import (
    CHAT_MAX_TOKENS, CHAT_MODEL, CHAT_TEMPERATURE, CHAT_TIMEOUT,
    OPENROUTER_BASE_URL, SITE_TITLE, SITE_URL
)
from errors import UpstreamError
from .base import ChatProvider

logger = logging.getLogger(__name__)


class OpenRouterProvider(ChatProvider):
    """OpenRouter inference via the OpenAI SDK. One attempt per call, bounded timeout."""

    def __init__(
        self,
        api_key: str,
        model: str = CHAT_MODEL,
        base_url: str = OPENROUTER_BASE_URL,
        timeout: float = CHAT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.model = model
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers={
                "HTTP-Referer": SITE_URL,
                "X-Title": SITE_TITLE,
            },
            http_client=http_client
        )
        logger.info("OpenRouter client ready (model: %s)", self.model)

    async def complete(self, system_prompt: str, message: str) -> str:
        """Generate a reply using the OpenRouter API."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": message},
                ],
                temperature=CHAT_TEMPERATURE,
                max_tokens=CHAT_MAX_TOKENS,
            )
        except openai.APIStatusError as e:
            logger.error("OpenRouter API error: HTTP %s", e.status_code)
            raise UpstreamError(f"HTTP {e.status_code}") from e
        except openai.APIError as e:
            logger.error("OpenRouter request failed: %s", type(e).__name__)
            raise UpstreamError(type(e).__name__) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    async def close(self) -> None:
        await self.client.close()
