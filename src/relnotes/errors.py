"""Exception hierarchy for relnotes.

Every error carries a ``kind`` so the CLI can decide how to react
(offer reconfiguration, or abort with a diagnostic).
"""

from typing import List, Optional


class ReleaseNotesError(Exception):
    """Base class for all relnotes errors."""

    kind = "error"


class ConfigError(ReleaseNotesError):
    """Configuration document is missing, unreadable or invalid."""

    kind = "config"


class CommandError(ReleaseNotesError):
    """An external command could not be run or exited with a non-zero status."""

    kind = "command"

    def __init__(
        self,
        message: str,
        args: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = list(args or [])
        self.returncode = returncode
        self.stderr = stderr


class LogParseError(ReleaseNotesError):
    """Command output did not contain what the pipeline needs."""

    kind = "parse"


class NoTagError(LogParseError):
    """The repository has no tags to use as a release boundary."""


class SummaryError(ReleaseNotesError):
    """The chat-completion request failed or returned an unusable response."""

    kind = "api"
