"""Git command execution and log parsing."""

from relnotes.extraction.log_parser import split_commits
from relnotes.extraction.repository import GitRepository
from relnotes.extraction.runner import CommandRunner

__all__ = [
    "CommandRunner",
    "GitRepository",
    "split_commits",
]
