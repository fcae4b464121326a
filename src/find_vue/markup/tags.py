"""
Opening-tag discovery.

This is a textual approximation, not a parser: a `>` inside a quoted attribute
value ends the match early. Callers only depend on `TagFinder`, so a real
parser can be swapped in without touching the heuristics or the reporting.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from collections.abc import Iterator

from ..types import TagOccurrence

TagFinder = Callable[[str], Iterator[TagOccurrence]]

# `<name attrs>`; closing tags never match since `/` is not a letter.
TAG_RE = re.compile(r"<([a-zA-Z][\w:-]*)\b([^>]*?)>", re.DOTALL)


def find_tags(content: str) -> Iterator[TagOccurrence]:
    """
    Yield every opening tag in `content`, left to right.

    The offset is the position of the tag's `<`.
    """
    for match in TAG_RE.finditer(content):
        yield TagOccurrence(
            name=match.group(1),
            attrs=match.group(2),
            offset=match.start(),
        )


def line_from_offset(content: str, offset: int) -> int:
    return content.count("\n", 0, offset) + 1
