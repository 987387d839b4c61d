"""Data models for relnotes."""

from relnotes.models.config import (
    DEFAULT_AI_ENDPOINT,
    AISettings,
    GitSettings,
    ReleaseConfig,
    Settings,
)
from relnotes.models.release import CommandResult, SummaryResult

__all__ = [
    "DEFAULT_AI_ENDPOINT",
    "AISettings",
    "GitSettings",
    "ReleaseConfig",
    "Settings",
    "CommandResult",
    "SummaryResult",
]
