"""Models produced while drafting release notes."""

from dataclasses import dataclass
from typing import List, Literal

from pydantic import BaseModel, Field

from relnotes.errors import CommandError


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""

    args: List[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def check(self) -> "CommandResult":
        """Return self, or raise CommandError if the command failed."""
        if not self.ok:
            detail = self.stderr.strip() or "no error output"
            raise CommandError(
                f"Command failed with exit status {self.returncode}: "
                f"{' '.join(self.args)}\n{detail}",
                args=self.args,
                returncode=self.returncode,
                stderr=self.stderr,
            )
        return self


class SummaryResult(BaseModel):
    """Release-notes draft for one run."""

    tag: str = Field(..., description="Most recent tag, the lower bound of the log")
    kind: Literal["empty", "plain", "ai"] = Field(..., description="How the text was produced")
    text: str = Field(..., description="Summary text")
    commit_count: int = Field(0, description="Number of commits summarized")

    def render(self) -> str:
        return f"previous tag = {self.tag}; summary = {self.text}"
