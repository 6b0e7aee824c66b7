"""Strip doc-comment syntax from raw NatSpec blocks."""

from __future__ import annotations

import re
from typing import List

_BLOCK_PATTERN = re.compile(r"/\*\*(?!/)(.*?)\*/", re.DOTALL)
_BLOCK_LINE_PREFIX = re.compile(r"^\s*\*(?!/)\s?")
_LINE_PREFIX = re.compile(r"^\s*///\s?")
# Tags written back to back on one physical line, e.g. `/** @notice A. @param x y */`.
_INLINE_TAG_BOUNDARY = re.compile(
    r"\s+(?=@(?:custom:[\w-]+|title|author|notice|dev|param|returns?|field|value|name|type|inheritdoc)\b)"
)


def normalize_docblock(doc: str) -> List[str]:
    """Return the content lines of a ``/** */`` or ``///`` comment.

    Comment markers and surrounding whitespace are removed, blank lines are
    dropped, and tags sharing one physical line are split into separate
    logical lines. Text carrying neither comment form yields an empty list.
    """
    if not doc:
        return []

    block = _BLOCK_PATTERN.search(doc)
    if block:
        raw_lines = [_BLOCK_LINE_PREFIX.sub("", line) for line in block.group(1).splitlines()]
    else:
        raw_lines = [
            _LINE_PREFIX.sub("", line) for line in doc.splitlines() if _LINE_PREFIX.match(line)
        ]

    lines: List[str] = []
    for raw in raw_lines:
        for part in _INLINE_TAG_BOUNDARY.split(raw.strip()):
            cleaned = part.strip()
            if cleaned:
                lines.append(cleaned)
    return lines


__all__ = ["normalize_docblock"]
