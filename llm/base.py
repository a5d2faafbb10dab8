"""
Abstract base class for chat completion providers.
"""
from abc import ABC, abstractmethod


class ChatProvider(ABC):
    """Abstract base class for chat completion providers."""

    @abstractmethod
    async def complete(self, system_prompt: str, message: str) -> str:
        """Return the completion text for one user message.

        Raises UpstreamError when the API fails or cannot be reached.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        pass
