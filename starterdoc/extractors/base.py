"""Base class for declaration extractors and the shared source view."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from ..models import EntityKind, FunctionParam, FunctionTags, SourceEntity, TagRecord
from ..natspec import normalize_docblock, parse_tags

_HEADER_KEYWORD = re.compile(
    r"\b(contract|library|interface|struct|enum|function|modifier|constructor|fallback|receive)\b"
)
_PARAM = re.compile(
    r"^(?P<type>(?:mapping\s*\(.*\)|[A-Za-z_][\w.]*)(?:\s+payable)?(?:\s*\[[^\]]*\])*)"
    r"(?:\s+(?P<location>memory|calldata|storage))?"
    r"(?:\s+(?P<name>[A-Za-z_]\w*))?$"
)
_DATA_LOCATIONS = {"memory", "calldata", "storage"}


class SourceText:
    """Read-only view of a source file prepared for pattern matching.

    ``masked`` has the same length as ``text`` with comment and string
    contents blanked out, so offsets found in one are valid in the other and
    declarations mentioned in comments never match.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.masked = mask_comments_and_strings(text)
        self._depth: List[int] = []
        self._enclosing: List[int] = []
        stack: List[int] = []
        for index, char in enumerate(self.masked):
            self._depth.append(len(stack))
            self._enclosing.append(stack[-1] if stack else -1)
            if char == "{":
                stack.append(index)
            elif char == "}" and stack:
                stack.pop()
        self._depth.append(len(stack))
        self._enclosing.append(stack[-1] if stack else -1)

    def depth_at(self, offset: int) -> int:
        """Number of unclosed ``{`` before ``offset``."""
        return self._depth[max(0, min(offset, len(self.text)))]

    def enclosing_block(self, offset: int) -> Optional[str]:
        """Keyword introducing the innermost block around ``offset`` (``None`` at file level)."""
        open_index = self._enclosing[max(0, min(offset, len(self.text)))]
        if open_index < 0:
            return None
        start = max(
            self.masked.rfind(";", 0, open_index),
            self.masked.rfind("{", 0, open_index),
            self.masked.rfind("}", 0, open_index),
        )
        match = _HEADER_KEYWORD.search(self.masked, start + 1, open_index)
        return match.group(1) if match else "block"

    def docblock_before(self, offset: int) -> str:
        """Return the doc-comment immediately preceding ``offset`` (or ``""``)."""
        prefix = self.text[:offset].rstrip()
        if prefix.endswith("*/"):
            start = prefix.rfind("/*")
            if start != -1 and prefix.startswith("/**", start) and not prefix.startswith("/**/", start):
                return prefix[start:]
            return ""
        collected: List[str] = []
        for line in reversed(prefix.splitlines()):
            if not line.strip().startswith("///"):
                break
            collected.append(line)
        return "\n".join(reversed(collected))

    def matching_close(self, open_index: int) -> int:
        """Index of the bracket closing ``masked[open_index]``, or end of text when unbalanced."""
        opener = self.masked[open_index]
        closer = {"(": ")", "{": "}", "[": "]"}[opener]
        depth = 0
        for index in range(open_index, len(self.masked)):
            char = self.masked[index]
            if char == opener:
                depth += 1
            elif char == closer:
                depth -= 1
                if depth == 0:
                    return index
        return len(self.masked)

    def original(self, start: int, end: int) -> str:
        return " ".join(self.text[start:end].split())


class Extractor(ABC):
    """Contract for extractors that find one declaration kind in a source file."""

    kind: EntityKind
    keyword: str = ""

    def supports(self, source: SourceText) -> bool:
        """Return True when the source may contain this declaration kind."""
        return not self.keyword or self.keyword in source.masked

    @abstractmethod
    def extract(self, source: SourceText) -> Iterable[SourceEntity]:
        """Yield every declaration of ``kind`` in source order."""

    def docs_for(self, source: SourceText, offset: int) -> TagRecord:
        return parse_tags(self.kind, normalize_docblock(source.docblock_before(offset)))


def mask_comments_and_strings(text: str) -> str:
    """Blank comments and string literals, keeping length and newlines."""
    out = list(text)
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        pair = text[index:index + 2]
        if pair == "//":
            end = text.find("\n", index)
            end = length if end == -1 else end
        elif pair == "/*":
            end = text.find("*/", index + 2)
            end = length if end == -1 else end + 2
        elif char in {'"', "'"}:
            end = index + 1
            while end < length and text[end] != char and text[end] != "\n":
                end += 2 if text[end] == "\\" else 1
            end = min(end + 1, length)
        else:
            index += 1
            continue
        for position in range(index, end):
            if out[position] != "\n":
                out[position] = " "
        index = end
    return "".join(out)


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """Split on ``separator`` outside of brackets; empty segments are dropped."""
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for char in text:
        if char in "([{":
            depth += 1
        elif char in ")]}":
            depth = max(0, depth - 1)
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [" ".join(part.split()) for part in parts if part.strip()]


def parse_parameter_list(text: str) -> List[FunctionParam]:
    """Parse ``type [location] name`` segments; unnamed segments are skipped."""
    params: List[FunctionParam] = []
    for segment in split_top_level(text):
        match = _PARAM.match(segment)
        if not match or not match.group("name") or match.group("name") in _DATA_LOCATIONS:
            continue
        params.append(
            FunctionParam(
                name=match.group("name"),
                type=" ".join(match.group("type").split()),
                location=match.group("location"),
            )
        )
    return params


def attach_param_docs(params: Sequence[FunctionParam], docs: FunctionTags) -> tuple[FunctionParam, ...]:
    """Copy ``@param`` descriptions onto signature parameters by name."""
    attached = []
    for param in params:
        documented = docs.param(param.name)
        description = documented.description if documented else None
        attached.append(
            FunctionParam(
                name=param.name,
                type=param.type,
                location=param.location,
                description=description or None,
            )
        )
    return tuple(attached)


__all__ = [
    "Extractor",
    "SourceText",
    "attach_param_docs",
    "mask_comments_and_strings",
    "parse_parameter_list",
    "split_top_level",
]
