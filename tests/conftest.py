"""Shared fixtures."""

import pytest
import structlog

from relnotes.models import CommandResult, ReleaseConfig

_SAMPLE_LOG = """commit 3f2a9c1d8e7b6a5f4e3d2c1b0a9f8e7d6c5b4a39
Author: Test User <test@example.com>
Date:   Mon Oct 19 10:15:00 2026 +0000

    Add export command

    Supports CSV and JSON output.

commit 9b8a7c6d5e4f3a2b1c0d9e8f7a6b5c4d3e2f1a0b
Merge: 1a2b3c4 5d6e7f8
Author: Test User <test@example.com>
Date:   Sun Oct 18 09:00:00 2026 +0000

    Merge branch 'fix/empty-config'

commit 1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b
Author: Other Dev <other@example.com>
Date:   Sat Oct 17 18:30:00 2026 +0000

    Fix crash when the config file is empty
"""

_TWO_COMMIT_LOG = """commit aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa
Author: Test User <test@example.com>
Date:   Mon Oct 19 10:15:00 2026 +0000

    Add release notes command

commit bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb
Author: Test User <test@example.com>
Date:   Sun Oct 18 09:00:00 2026 +0000

    Fix tag ordering
"""


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def plain_config():
    return ReleaseConfig.model_validate(
        {"git": {"path": "/repo", "branch": "main"}, "ai": {"key": "", "url": None}}
    )


@pytest.fixture
def ai_config():
    return ReleaseConfig.model_validate(
        {"git": {"path": "/repo", "branch": "main"}, "ai": {"key": "sk-test", "url": None}}
    )


@pytest.fixture
def sample_log():
    """Log with a regular commit, a merge commit and a multi-paragraph message."""
    return _SAMPLE_LOG


@pytest.fixture
def two_commit_log():
    return _TWO_COMMIT_LOG


class FakeRunner:
    """Command runner returning canned output per git sub-command.

    Arguments arrive as ``["-C", <path>, <subcommand>, ...]``.
    """

    def __init__(self, outputs=None, returncodes=None):
        self.outputs = outputs or {}
        self.returncodes = returncodes or {}
        self.calls = []

    def run(self, executable, args):
        self.calls.append([executable, *args])
        subcommand = args[2]
        returncode = self.returncodes.get(subcommand, 0)
        return CommandResult(
            args=[executable, *args],
            returncode=returncode,
            stdout=self.outputs.get(subcommand, ""),
            stderr="fatal: simulated failure" if returncode else "",
        )


@pytest.fixture
def fake_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner
