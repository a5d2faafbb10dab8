"""
Chat provider factory.
Creates the upstream chat completion provider, or None for demo mode.
"""
from typing import Optional
from .base import ChatProvider


def create_chat_provider(api_key: str = None) -> Optional[ChatProvider]:
    """
    Factory function for the chat completion provider.

    Set OPENROUTER_API_KEY to talk to OpenRouter. Without a key this returns
    None and the chatbot answers in demo mode without any network call.
    """
    from config import OPENROUTER_API_KEY
    api_key = api_key if api_key is not None else OPENROUTER_API_KEY
    if not api_key:
        return None

    from .openrouter_provider import OpenRouterProvider
    return OpenRouterProvider(api_key=api_key)
