"""Extraction of commit message bodies from ``git log`` output."""

import re
import textwrap
from typing import List

# Default ``git log`` layout:
#
#   commit <hash>
#   Author: ...
#   Date:   ...
#   <blank line>
#       message, indented four spaces
#
# A body runs until the next "commit <hash>" line or the end of the text.
COMMIT_BODY_PATTERN = re.compile(
    r"^Date:[^\n]*\n[ \t]*\n(.*?)(?=^commit [0-9a-f]{7,}|\Z)",
    re.MULTILINE | re.DOTALL,
)


def split_commits(raw_log: str) -> List[str]:
    """Return the message body of every entry in ``raw_log``, in order.

    Each body is dedented and stripped. Text without any matching entry
    gives an empty list.
    """
    return [
        textwrap.dedent(match.group(1)).strip()
        for match in COMMIT_BODY_PATTERN.finditer(raw_log)
    ]
