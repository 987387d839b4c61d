"""Git operations needed to draft release notes."""

from typing import List, Optional

import structlog

from relnotes.errors import NoTagError
from relnotes.extraction.log_parser import split_commits
from relnotes.extraction.runner import CommandRunner
from relnotes.models import CommandResult, GitSettings

logger = structlog.get_logger(__name__)

GIT_EXECUTABLE = "git"


class GitRepository:
    """Runs the ``git`` sub-commands relnotes needs against one repository."""

    def __init__(self, config: GitSettings, runner: Optional[CommandRunner] = None) -> None:
        """Initialize the repository wrapper.

        Args:
            config: Repository path and branch
            runner: Command runner (defaults to CommandRunner())
        """
        self.config = config
        self.runner = runner or CommandRunner()

    def _git(self, *args: str) -> CommandResult:
        result = self.runner.run(GIT_EXECUTABLE, ["-C", self.config.path, *args])
        return result.check()

    def sync(self) -> None:
        """Check out the configured branch and pull it.

        Raises:
            CommandError: If either command exits with a non-zero status
        """
        self._git("checkout", self.config.branch)
        self._git("pull")
        logger.info("repository_synced", path=self.config.path, branch=self.config.branch)

    def latest_tag(self) -> str:
        """Return the most recently created tag.

        Raises:
            NoTagError: If the repository has no tags
            CommandError: If ``git tag`` fails
        """
        output = self._git("tag", "--sort=-creatordate").stdout
        tags = output.split()
        if not tags:
            raise NoTagError(f"No tags found in repository {self.config.path}")
        logger.info("latest_tag", tag=tags[0])
        return tags[0]

    def log_since(self, tag: str) -> str:
        """Return raw ``git log`` output for commits after ``tag``."""
        return self._git("log", f"{tag}..HEAD").stdout

    def commits_since(self, tag: str) -> List[str]:
        """Return the message bodies of the commits after ``tag``, newest first."""
        raw_log = self.log_since(tag)
        logger.debug("git_log", tag=tag, log=raw_log)
        commits = split_commits(raw_log)
        logger.info("commits_parsed", tag=tag, count=len(commits))
        return commits
