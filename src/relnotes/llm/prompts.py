"""Prompt templates for release-notes drafting."""

from typing import List


class PromptTemplates:
    """Collection of prompt templates."""

    @staticmethod
    def release_notes(commits: List[str]) -> str:
        """Generate prompt for summarizing commits into release notes.

        Args:
            commits: Commit message bodies, newest first

        Returns:
            Formatted prompt
        """
        commits_text = "\n\n".join(
            f"Commit {i + 1}:\n{message}" for i, message in enumerate(commits)
        )

        return f"""You are drafting release notes from the commit messages below.
Summarize them into exactly these three sections:

1. New features
2. Fixed defects
3. Improvements

List the items of each section as lettered sub-items (a., b., c., ...).
Merge commits that describe the same change into one item.
If a section has no items, write "None" under it.

Commits:
{commits_text}

Release notes:"""
