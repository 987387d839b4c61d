"""End-to-end release-notes drafting: sync, read the log, summarize."""

import asyncio
from typing import List, Optional, Tuple

import click
import structlog

from relnotes.extraction import GitRepository
from relnotes.llm import ReleaseSummarizer
from relnotes.models import ReleaseConfig, SummaryResult

logger = structlog.get_logger(__name__)

ACKNOWLEDGE_PROMPT = "Press any key to exit..."


def nothing_to_summarize(tag: str) -> str:
    return f"No commits since {tag}, nothing to summarize."


class ReleaseNotesPipeline:
    """Drafts release notes for the configured repository.

    Runs checkout and pull, finds the most recent tag, parses the commits
    made since then and summarizes them, plainly or through the
    chat-completion endpoint when an AI key is configured.
    """

    def __init__(
        self,
        config: ReleaseConfig,
        repository: Optional[GitRepository] = None,
        summarizer: Optional[ReleaseSummarizer] = None,
    ) -> None:
        self.config = config
        self.repository = repository or GitRepository(config.git)
        self.summarizer = summarizer or ReleaseSummarizer()

    def collect_commits(self) -> Tuple[str, List[str]]:
        """Sync the repository and return (latest tag, commits since it)."""
        self.repository.sync()
        tag = self.repository.latest_tag()
        return tag, self.repository.commits_since(tag)

    def summarize(self, tag: str, commits: List[str]) -> SummaryResult:
        """Summarize ``commits`` made after ``tag``.

        No summarizer is called when there are no commits.

        Raises:
            SummaryError: If the AI summary was requested and failed
        """
        if not commits:
            logger.info("no_commits", tag=tag)
            return SummaryResult(tag=tag, kind="empty", text=nothing_to_summarize(tag))

        ai = self.config.ai
        if not ai.enabled:
            text = self.summarizer.summarize_plain(commits)
            return SummaryResult(tag=tag, kind="plain", text=text, commit_count=len(commits))

        text = asyncio.run(self.summarizer.summarize_with_ai(commits, ai.endpoint, ai.key))
        return SummaryResult(tag=tag, kind="ai", text=text, commit_count=len(commits))

    def run(self) -> SummaryResult:
        """Run the whole pipeline.

        Raises:
            CommandError: If a git command fails
            NoTagError: If the repository has no tags
            SummaryError: If the AI summary fails
        """
        tag, commits = self.collect_commits()
        result = self.summarize(tag, commits)
        logger.info("summary_ready", tag=tag, kind=result.kind, commits=result.commit_count)
        return result


def wait_for_acknowledgment(interactive: bool = True) -> None:
    """Block until the operator presses a key.

    Skipped when not interactive; click also skips it when stdin is not a
    terminal.
    """
    if interactive:
        click.pause(ACKNOWLEDGE_PROMPT)
