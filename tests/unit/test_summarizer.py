"""Tests for release-notes summaries."""

from typing import Any, List, Optional

import pytest

from relnotes.errors import SummaryError
from relnotes.llm import PLAIN_HEADER, BaseLLMProvider, PromptTemplates, ReleaseSummarizer


class RecordingProvider(BaseLLMProvider):
    """Provider that records requests and returns a fixed reply."""

    def __init__(self, reply: str = "release notes text", error: Optional[Exception] = None) -> None:
        super().__init__(api_key="sk-test", model="test-model")
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    async def complete(self, prompt: str, temperature: float = 1.0, max_tokens: Optional[int] = None, **kwargs: Any) -> str:
        self.calls.append({"prompt": prompt, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.reply


class TestSummarizePlain:
    def test_empty(self):
        assert ReleaseSummarizer.summarize_plain([]) == PLAIN_HEADER

    def test_one_line_per_commit(self):
        assert ReleaseSummarizer.summarize_plain(["a", "b"]) == f"{PLAIN_HEADER}\na\nb"


class TestPromptTemplates:
    def test_release_notes_prompt(self):
        prompt = PromptTemplates.release_notes(["Add export command", "Fix crash on empty config"])

        assert "1. New features" in prompt
        assert "2. Fixed defects" in prompt
        assert "3. Improvements" in prompt
        assert "lettered sub-items" in prompt
        assert "Commit 1:\nAdd export command" in prompt
        assert "Commit 2:\nFix crash on empty config" in prompt


class TestSummarizeWithAI:
    @pytest.mark.asyncio
    async def test_single_request(self):
        """Test one request with temperature 1.0 carrying every commit."""
        provider = RecordingProvider()
        factory_calls = []

        def factory(endpoint, api_key):
            factory_calls.append((endpoint, api_key))
            return provider

        summarizer = ReleaseSummarizer(provider_factory=factory)
        text = await summarizer.summarize_with_ai(
            ["Add export command", "Fix tag ordering"],
            "https://api.openai.com/v1/chat/completions",
            "sk-test",
        )

        assert text == "release notes text"
        assert factory_calls == [("https://api.openai.com/v1/chat/completions", "sk-test")]
        assert len(provider.calls) == 1
        assert provider.calls[0]["temperature"] == 1.0
        assert "Add export command" in provider.calls[0]["prompt"]
        assert "Fix tag ordering" in provider.calls[0]["prompt"]
        assert summarizer.last_provider is provider

    @pytest.mark.asyncio
    async def test_invalid_endpoint(self):
        def factory(endpoint, api_key):
            raise AssertionError("no provider should be built for an invalid URL")

        summarizer = ReleaseSummarizer(provider_factory=factory)

        with pytest.raises(SummaryError, match="Invalid endpoint URL"):
            await summarizer.summarize_with_ai(["a"], "not a url", "sk-test")

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self):
        provider = RecordingProvider(error=SummaryError("Chat completion failed with HTTP 500"))
        summarizer = ReleaseSummarizer(provider_factory=lambda endpoint, key: provider)

        with pytest.raises(SummaryError, match="HTTP 500"):
            await summarizer.summarize_with_ai(["a"], "https://api.openai.com/v1", "sk-test")

        assert len(provider.calls) == 1
