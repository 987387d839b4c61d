"""Base class for LLM providers."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class BaseLLMProvider(ABC):
    """Abstract base class for chat-completion providers."""

    def __init__(self, api_key: str, model: str, **kwargs: Any) -> None:
        """Initialize the LLM provider.

        Args:
            api_key: API key for the provider
            model: Model name to use
            **kwargs: Additional provider-specific parameters
        """
        self.api_key = api_key
        self.model = model
        self.config = kwargs

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        temperature: float = 1.0,
        max_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> str:
        """Generate a completion from the LLM.

        Args:
            prompt: The prompt to send as a single user message
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response (provider default if None)
            **kwargs: Additional provider-specific parameters

        Returns:
            The assistant's reply text

        Raises:
            SummaryError: If the request fails or the response is unusable
        """
        pass
