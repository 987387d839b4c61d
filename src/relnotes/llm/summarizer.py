"""Release-notes summaries, plain or generated by a chat-completion model."""

from typing import Callable, List, Optional

import structlog
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from relnotes.errors import SummaryError
from relnotes.llm.base import BaseLLMProvider
from relnotes.llm.openai_provider import OpenAIProvider
from relnotes.llm.prompts import PromptTemplates

logger = structlog.get_logger(__name__)

PLAIN_HEADER = "Commits since the last release:"
TEMPERATURE = 1.0

ProviderFactory = Callable[[str, str], BaseLLMProvider]

_http_url = TypeAdapter(AnyHttpUrl)


def _openai_factory(endpoint: str, api_key: str) -> BaseLLMProvider:
    return OpenAIProvider(api_key=api_key, base_url=endpoint)


class ReleaseSummarizer:
    """Turns a list of commit message bodies into release-notes text."""

    def __init__(self, provider_factory: Optional[ProviderFactory] = None) -> None:
        """Initialize the summarizer.

        Args:
            provider_factory: Builds a provider from (endpoint, api_key).
                Defaults to OpenAIProvider.
        """
        self.provider_factory = provider_factory or _openai_factory
        self.prompts = PromptTemplates()
        self.last_provider: Optional[BaseLLMProvider] = None

    @staticmethod
    def summarize_plain(commits: List[str]) -> str:
        """Join the commit messages under a fixed header, one per line."""
        return "\n".join([PLAIN_HEADER, *commits])

    async def summarize_with_ai(self, commits: List[str], endpoint: str, api_key: str) -> str:
        """Ask the chat-completion endpoint for structured release notes.

        Exactly one request is made; failures are not retried.

        Args:
            commits: Commit message bodies
            endpoint: Chat-completions URL (or API base URL)
            api_key: Bearer key for the endpoint

        Returns:
            The assistant's reply text

        Raises:
            SummaryError: If the URL is invalid or the request fails
        """
        try:
            _http_url.validate_python(endpoint)
        except ValidationError as e:
            raise SummaryError(f"Invalid endpoint URL: {endpoint}") from e

        provider = self.provider_factory(endpoint, api_key)
        self.last_provider = provider
        prompt = self.prompts.release_notes(commits)

        logger.info("summary_requested", endpoint=endpoint, model=provider.model, commits=len(commits))
        text = await provider.complete(prompt, temperature=TEMPERATURE)
        logger.info("summary_received", chars=len(text))
        return text
