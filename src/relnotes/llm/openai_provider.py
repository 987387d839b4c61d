"""OpenAI-compatible chat-completion provider."""

from typing import Any, Optional

import openai
import structlog
from openai import AsyncOpenAI

from relnotes.errors import SummaryError
from relnotes.llm.base import BaseLLMProvider

logger = structlog.get_logger(__name__)

CHAT_COMPLETIONS_SUFFIX = "/chat/completions"


def api_base_url(endpoint: str) -> str:
    """Turn a chat-completions endpoint into the base URL the SDK expects.

    ``https://api.openai.com/v1/chat/completions`` and
    ``https://api.openai.com/v1`` both give ``https://api.openai.com/v1``.
    """
    base = endpoint.rstrip("/")
    if base.endswith(CHAT_COMPLETIONS_SUFFIX):
        base = base[: -len(CHAT_COMPLETIONS_SUFFIX)]
    return base


class OpenAIProvider(BaseLLMProvider):
    """Chat-completion provider for OpenAI and compatible endpoints.

    The client is created with ``max_retries=0``: one call, one HTTP request.
    """

    DEFAULT_MODEL = "gpt-3.5-turbo"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize OpenAI provider.

        Args:
            api_key: Bearer key for the endpoint
            model: Model for completions
            base_url: API base URL or full chat-completions endpoint
            **kwargs: Additional parameters
        """
        super().__init__(api_key, model, **kwargs)
        self.base_url = api_base_url(base_url) if base_url else None
        self.client = AsyncOpenAI(api_key=api_key, base_url=self.base_url, max_retries=0)
        self.total_tokens = {"input": 0, "output": 0}

    async def complete(
        self,
        prompt: str,
        temperature: float = 1.0,
        max_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> str:
        """Send one chat-completion request and return the reply text.

        Raises:
            SummaryError: On connection errors, non-success HTTP status or a
                response without an assistant message
        """
        params = dict(kwargs)
        if max_tokens is not None:
            params["max_tokens"] = max_tokens

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                **params,
            )
        except openai.APIStatusError as e:
            raise SummaryError(f"Chat completion failed with HTTP {e.status_code}: {e.message}") from e
        except openai.OpenAIError as e:
            raise SummaryError(f"Chat completion request failed: {e}") from e

        usage = getattr(response, "usage", None)
        if usage is not None:
            self.total_tokens["input"] += usage.prompt_tokens or 0
            self.total_tokens["output"] += usage.completion_tokens or 0

        if not response.choices or response.choices[0].message.content is None:
            raise SummaryError("Chat completion response did not contain an assistant message")

        return response.choices[0].message.content

    def get_usage_stats(self) -> dict:
        """Get token counts for the calls made so far."""
        return {
            "total_tokens": self.total_tokens,
            "model": self.model,
            "base_url": self.base_url,
        }
