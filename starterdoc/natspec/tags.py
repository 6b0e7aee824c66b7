"""Per-entity NatSpec tag parsing.

Every parser walks the normalized lines once. Each line is classified as a
``@custom:<key>`` tag, a standard ``@<tag>``, or a continuation of whatever
was opened last. The "last opened" position is a :class:`Cursor` value
returned by each step and passed into the next one, so a parse keeps no state
outside its own call.

Documentation problems never raise: unknown tags (and their continuation
lines) are dropped, empty values disappear, and a block without any tag is
read as a ``@notice`` like the Solidity compiler does.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ..models import (
    Author,
    ContractTags,
    DevSections,
    EntityKind,
    EnumValueDoc,
    FieldDoc,
    FunctionTags,
    ParamDoc,
    TagRecord,
    TypeTags,
    VariableTags,
)

_CUSTOM_TAG = re.compile(r"^@custom:([\w-]+)(?:\s+(.*))?$")
_STANDARD_TAG = re.compile(r"^@(\w+)(?:\s+(.*))?$")
_BULLET = re.compile(r"^-\s+")
_NAMED_VALUE = re.compile(r"^(\w+)(?:\s+(.*))?$")
_FIELD_VALUE = re.compile(r"^(\w+)(?:\s+(\S+))?(?:\s+(.*))?$")
_FIELD_BULLET = re.compile(r"^-\s*(\w+)\s*\(([^)]*)\)\s*:?\s*(.*)$")
_VALUE_BULLET = re.compile(r"^-\s*(\w+)\s*:\s*(.*)$")
_AUTHOR_EMAIL = re.compile(r"<([^>]*)>")
_AUTHOR_URL = re.compile(r"\(([^)]*)\)")

_DEV_MARKERS = (
    (re.compile(r"^usage summary\s*:\s*", re.IGNORECASE), "usage"),
    (re.compile(r"^prerequisites?\s*:\s*", re.IGNORECASE), "prerequisites"),
    (re.compile(r"^notes\s*:\s*", re.IGNORECASE), "notes"),
)


@dataclass(frozen=True)
class TagLine:
    """A classified normalized line."""

    shape: str  # "custom", "tag" or "text"
    value: str
    name: Optional[str] = None


@dataclass(frozen=True)
class Cursor:
    """Where continuation text goes.

    ``mode`` is one of ``scalar`` (join onto a text field), ``item`` (each
    line becomes a new list item), ``extend`` (join onto the last list item),
    ``entry`` (extend the last param/field/value description), ``custom`` or
    ``drop``.
    """

    mode: str
    slot: Optional[str] = None


_DROP = Cursor("drop")
_NOTICE = Cursor("scalar", "notice")


def classify_line(line: str) -> TagLine:
    custom = _CUSTOM_TAG.match(line)
    if custom:
        return TagLine("custom", (custom.group(2) or "").strip(), name=custom.group(1))
    tag = _STANDARD_TAG.match(line)
    if tag:
        return TagLine("tag", (tag.group(2) or "").strip(), name=tag.group(1))
    return TagLine("text", line.strip())


@dataclass
class _Entry:
    name: str
    type: Optional[str]
    parts: List[str]


class _Scratch:
    """Mutable accumulators owned by a single parse call."""

    def __init__(self) -> None:
        self.scalars: Dict[str, List[str]] = {}
        self.lists: Dict[str, List[str]] = {}
        self.entries: Dict[str, List[_Entry]] = {}
        self.custom: Dict[str, List[str]] = {}

    def add_scalar(self, slot: str, text: str) -> None:
        parts = self.scalars.setdefault(slot, [])
        if text:
            parts.append(text)

    def add_item(self, slot: str, text: str) -> None:
        items = self.lists.setdefault(slot, [])
        if text:
            items.append(text)

    def extend_item(self, slot: str, text: str) -> None:
        items = self.lists.setdefault(slot, [])
        if not text:
            return
        if items:
            items[-1] = f"{items[-1]} {text}".strip()
        else:
            items.append(text)

    def add_entry(self, slot: str, name: str, description: str, type_: Optional[str] = None) -> None:
        parts = [description] if description else []
        self.entries.setdefault(slot, []).append(_Entry(name=name, type=type_, parts=parts))

    def extend_entry(self, slot: str, text: str) -> None:
        entries = self.entries.get(slot)
        if entries and text:
            entries[-1].parts.append(text)

    def set_custom(self, key: str, text: str) -> None:
        # last occurrence of a key wins
        self.custom[key] = [text] if text else []

    def extend_custom(self, key: str, text: str) -> None:
        if text:
            self.custom.setdefault(key, []).append(text)

    # -- finalisation helpers -------------------------------------------------

    def scalar(self, slot: str) -> Optional[str]:
        return _join(self.scalars.get(slot, ()))

    def items(self, slot: str) -> tuple[str, ...]:
        return tuple(item for item in self.lists.get(slot, ()) if item)

    def custom_map(self) -> Dict[str, str]:
        result: Dict[str, str] = {}
        for key, parts in self.custom.items():
            text = _join(parts)
            if text:
                result[key] = text
        return result

    def entry_list(self, slot: str) -> List[_Entry]:
        return self.entries.get(slot, [])


def _join(parts: Iterable[str]) -> Optional[str]:
    text = " ".join(part.strip() for part in parts if part and part.strip())
    return text or None


def _strip_bullet(text: str) -> str:
    return _BULLET.sub("", text, count=1).strip()


TagHandler = Callable[[_Scratch, str], Cursor]
TextHandler = Callable[[_Scratch, str, Cursor], Cursor]


def _scalar_tag(slot: str) -> TagHandler:
    def handler(scratch: _Scratch, value: str) -> Cursor:
        scratch.add_scalar(slot, value)
        return Cursor("scalar", slot)

    return handler


def _item_tag(slot: str) -> TagHandler:
    def handler(scratch: _Scratch, value: str) -> Cursor:
        scratch.add_item(slot, value)
        return Cursor("item", slot)

    return handler


def _extend_tag(slot: str) -> TagHandler:
    def handler(scratch: _Scratch, value: str) -> Cursor:
        scratch.lists.setdefault(slot, []).append(value)
        return Cursor("extend", slot)

    return handler


def _param_tag(scratch: _Scratch, value: str) -> Cursor:
    match = _NAMED_VALUE.match(value)
    if not match:
        return _DROP
    scratch.add_entry("params", match.group(1), (match.group(2) or "").strip())
    return Cursor("entry", "params")


def _field_tag(scratch: _Scratch, value: str) -> Cursor:
    match = _FIELD_VALUE.match(value)
    if not match:
        return _DROP
    scratch.add_entry("fields", match.group(1), (match.group(3) or "").strip(), match.group(2))
    return Cursor("entry", "fields")


def _value_tag(scratch: _Scratch, value: str) -> Cursor:
    match = _NAMED_VALUE.match(value)
    if not match:
        return _DROP
    scratch.add_entry("values", match.group(1), (match.group(2) or "").strip())
    return Cursor("entry", "values")


def _contract_dev_tag(scratch: _Scratch, value: str) -> Cursor:
    marker, remainder = _match_dev_marker(value)
    slot = marker or "notes"
    scratch.add_item(slot, _strip_bullet(remainder))
    return Cursor("item", slot)


def _match_dev_marker(text: str) -> tuple[Optional[str], str]:
    for pattern, slot in _DEV_MARKERS:
        match = pattern.match(text)
        if match:
            return slot, text[match.end():].strip()
    return None, text


def _continue(scratch: _Scratch, text: str, cursor: Cursor) -> Cursor:
    """Default continuation: append to whatever the cursor points at."""
    text = _strip_bullet(text)
    if not text or cursor.slot is None:
        return cursor
    if cursor.mode == "scalar":
        scratch.add_scalar(cursor.slot, text)
    elif cursor.mode == "item":
        scratch.add_item(cursor.slot, text)
    elif cursor.mode == "extend":
        scratch.extend_item(cursor.slot, text)
    elif cursor.mode == "entry":
        scratch.extend_entry(cursor.slot, text)
    elif cursor.mode == "custom":
        scratch.extend_custom(cursor.slot, text)
    return cursor


def _continue_contract(scratch: _Scratch, text: str, cursor: Cursor) -> Cursor:
    if cursor.mode == "item" and cursor.slot in {"usage", "prerequisites", "notes"}:
        slot, remainder = _match_dev_marker(_strip_bullet(text))
        if slot is not None:
            cursor = Cursor("item", slot)
            scratch.lists.setdefault(slot, [])
            if remainder:
                scratch.add_item(slot, remainder)
            return cursor
    return _continue(scratch, text, cursor)


def _continue_type(allow_values: bool) -> TextHandler:
    def handler(scratch: _Scratch, text: str, cursor: Cursor) -> Cursor:
        field_match = _FIELD_BULLET.match(text)
        if field_match:
            name, type_, description = field_match.groups()
            scratch.add_entry("fields", name, description.strip(), type_.strip() or None)
            return Cursor("entry", "fields")
        if allow_values:
            value_match = _VALUE_BULLET.match(text)
            if value_match:
                name, description = value_match.groups()
                scratch.add_entry("values", name, description.strip())
                return Cursor("entry", "values")
        return _continue(scratch, text, cursor)

    return handler


def _run(
    lines: Sequence[str],
    tag_handlers: Mapping[str, TagHandler],
    text_handler: TextHandler = _continue,
) -> _Scratch:
    scratch = _Scratch()
    cursor = _NOTICE
    for line in lines:
        cursor = _step(scratch, classify_line(line), cursor, tag_handlers, text_handler)
    return scratch


def _step(
    scratch: _Scratch,
    line: TagLine,
    cursor: Cursor,
    tag_handlers: Mapping[str, TagHandler],
    text_handler: TextHandler,
) -> Cursor:
    if line.shape == "custom" and line.name:
        scratch.set_custom(line.name, line.value)
        return Cursor("custom", line.name)
    if line.shape == "tag" and line.name:
        handler = tag_handlers.get(line.name)
        if handler is None:
            return _DROP
        return handler(scratch, line.value)
    return text_handler(scratch, line.value, cursor)


_CONTRACT_TAGS: Dict[str, TagHandler] = {
    "title": _scalar_tag("title"),
    "author": _extend_tag("authors"),
    "notice": _scalar_tag("notice"),
    "dev": _contract_dev_tag,
}

_FUNCTION_TAGS: Dict[str, TagHandler] = {
    "notice": _scalar_tag("notice"),
    "dev": _item_tag("dev"),
    "param": _param_tag,
    "return": _extend_tag("returns"),
    "returns": _extend_tag("returns"),
}

_VARIABLE_TAGS: Dict[str, TagHandler] = {
    "notice": _scalar_tag("notice"),
    "dev": _item_tag("dev"),
    "name": _scalar_tag("name"),
    "type": _scalar_tag("type"),
}

_STRUCT_TAGS: Dict[str, TagHandler] = {
    "notice": _scalar_tag("notice"),
    "dev": _item_tag("dev"),
    "field": _field_tag,
}

_ENUM_TAGS: Dict[str, TagHandler] = dict(_STRUCT_TAGS, value=_value_tag)


def parse_author(text: str) -> Author:
    """Parse ``Name <email> (url)``; email and url are optional."""
    email_match = _AUTHOR_EMAIL.search(text)
    url_match = _AUTHOR_URL.search(text)
    name = _AUTHOR_URL.sub("", _AUTHOR_EMAIL.sub("", text, count=1), count=1)
    return Author(
        name=" ".join(name.split()),
        email=(email_match.group(1).strip() or None) if email_match else None,
        url=(url_match.group(1).strip() or None) if url_match else None,
    )


def parse_contract_tags(lines: Sequence[str]) -> ContractTags:
    scratch = _run(lines, _CONTRACT_TAGS, _continue_contract)
    authors = tuple(parse_author(raw) for raw in scratch.items("authors"))
    return ContractTags(
        title=scratch.scalar("title"),
        notice=scratch.scalar("notice"),
        authors=tuple(author for author in authors if author.name),
        dev=DevSections(
            usage=scratch.items("usage"),
            prerequisites=scratch.items("prerequisites"),
            notes=scratch.items("notes"),
        ),
        custom=scratch.custom_map(),
    )


def parse_function_tags(lines: Sequence[str]) -> FunctionTags:
    """Parse tags for a function or constructor."""
    scratch = _run(lines, _FUNCTION_TAGS)
    returns = scratch.items("returns")
    return FunctionTags(
        notice=scratch.scalar("notice"),
        dev=scratch.items("dev"),
        params=tuple(
            ParamDoc(name=entry.name, description=_join(entry.parts))
            for entry in scratch.entry_list("params")
        ),
        returns="; ".join(returns) if returns else None,
        custom=scratch.custom_map(),
    )


def parse_variable_tags(lines: Sequence[str]) -> VariableTags:
    """Parse tags for a state variable or constant."""
    scratch = _run(lines, _VARIABLE_TAGS)
    return VariableTags(
        notice=scratch.scalar("notice"),
        dev=scratch.items("dev"),
        name=scratch.scalar("name"),
        type=scratch.scalar("type"),
        custom=scratch.custom_map(),
    )


def _type_tags(scratch: _Scratch) -> TypeTags:
    return TypeTags(
        notice=scratch.scalar("notice"),
        dev=scratch.items("dev"),
        fields=tuple(
            FieldDoc(
                name=entry.name,
                type=entry.type or None,
                description=_join(entry.parts),
            )
            for entry in scratch.entry_list("fields")
        ),
        values=tuple(
            EnumValueDoc(name=entry.name, description=_join(entry.parts))
            for entry in scratch.entry_list("values")
        ),
        custom=scratch.custom_map(),
    )


def parse_struct_tags(lines: Sequence[str]) -> TypeTags:
    return _type_tags(_run(lines, _STRUCT_TAGS, _continue_type(allow_values=False)))


def parse_enum_tags(lines: Sequence[str]) -> TypeTags:
    return _type_tags(_run(lines, _ENUM_TAGS, _continue_type(allow_values=True)))


_PARSERS: Dict[EntityKind, Callable[[Sequence[str]], TagRecord]] = {
    EntityKind.CONTRACT: parse_contract_tags,
    EntityKind.FUNCTION: parse_function_tags,
    EntityKind.CONSTRUCTOR: parse_function_tags,
    EntityKind.STATE_VARIABLE: parse_variable_tags,
    EntityKind.CONSTANT: parse_variable_tags,
    EntityKind.STRUCT: parse_struct_tags,
    EntityKind.ENUM: parse_enum_tags,
}


def parse_tags(kind: EntityKind, lines: Sequence[str]) -> TagRecord:
    """Dispatch to the parser for ``kind``."""
    return _PARSERS[kind](lines)


__all__ = [
    "Cursor",
    "TagLine",
    "classify_line",
    "parse_author",
    "parse_contract_tags",
    "parse_enum_tags",
    "parse_function_tags",
    "parse_struct_tags",
    "parse_tags",
    "parse_variable_tags",
]
