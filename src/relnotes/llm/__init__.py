"""LLM integration for release-notes drafting."""

from relnotes.llm.base import BaseLLMProvider
from relnotes.llm.openai_provider import OpenAIProvider
from relnotes.llm.prompts import PromptTemplates
from relnotes.llm.summarizer import PLAIN_HEADER, ReleaseSummarizer

__all__ = [
    "BaseLLMProvider",
    "OpenAIProvider",
    "PromptTemplates",
    "ReleaseSummarizer",
    "PLAIN_HEADER",
]
