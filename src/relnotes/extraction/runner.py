"""Synchronous execution of external commands."""

from typing import Sequence, Union

import structlog
from git import Git
from git.exc import GitCommandNotFound

from relnotes.errors import CommandError
from relnotes.models import CommandResult

logger = structlog.get_logger(__name__)


def _decode(value: Union[bytes, str, None]) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class CommandRunner:
    """Runs an executable and captures its exit status and output.

    Commands go through GitPython's ``Git.execute`` so the process handling
    matches the rest of the Git tooling. There is no timeout: the call blocks
    until the process exits.
    """

    def __init__(self) -> None:
        self._git = Git()

    def run(self, executable: str, args: Sequence[str]) -> CommandResult:
        """Run ``executable`` with ``args`` and wait for it to finish.

        Args:
            executable: Program to run (e.g. "git")
            args: Argument list, passed through without shell splitting

        Returns:
            CommandResult with exit status, stdout and stderr. Invalid UTF-8
            in the output is replaced rather than rejected.

        Raises:
            CommandError: If the executable cannot be started
        """
        command = [executable, *args]
        logger.debug("running_command", command=" ".join(command))

        try:
            status, stdout, stderr = self._git.execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
                stdout_as_string=False,
            )
        except GitCommandNotFound as e:
            raise CommandError(
                f"Could not run {executable}: executable not found",
                args=command,
            ) from e

        result = CommandResult(
            args=command,
            returncode=status,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )
        logger.debug("command_finished", command=" ".join(command), returncode=status)
        return result
