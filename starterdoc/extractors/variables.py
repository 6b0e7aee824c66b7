"""Extractors for state variables and constants.

Both kinds share one declaration shape, ``type [attributes] name [= value];``,
and are told apart by the ``constant`` attribute and by where the statement
sits: state variables live directly in a contract or library body, constants
may also appear at file level.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, cast

from .base import Extractor, SourceText
from ..models import ConstantEntity, EntityKind, StateVariableEntity, VariableTags

_DECLARATION = re.compile(
    r"(?:^|(?<=[;{}]))\s*"
    r"(?P<type>mapping\s*\((?:[^()]|\((?:[^()]|\([^()]*\))*\))*\)"
    r"|[A-Za-z_][\w.]*(?:\s+payable)?(?:\s*\[[^\]]*\])*)"
    r"(?P<attrs>(?:\s+(?:public|private|internal|constant|immutable|transient"
    r"|override(?:\s*\([^)]*\))?))*)"
    r"\s+(?P<name>[A-Za-z_]\w*)\s*(?:=(?P<value>[^;]*))?;"
)
_ATTRIBUTE = re.compile(r"\b(public|private|internal|constant|immutable|transient|override)\b")
_NOT_A_TYPE = {
    "return",
    "emit",
    "delete",
    "else",
    "using",
    "import",
    "pragma",
    "revert",
    "throw",
    "new",
    "event",
    "error",
}
_VISIBILITY = ("public", "private", "internal")
_STATE_CONTAINERS = {"contract", "library"}
_CONSTANT_CONTAINERS = {None, "contract", "library", "interface"}


@dataclass(frozen=True)
class _Declaration:
    offset: int
    type: str
    name: str
    attributes: Tuple[str, ...]
    value: Optional[str]
    container: Optional[str]

    @property
    def visibility(self) -> Optional[str]:
        for attribute in self.attributes:
            if attribute in _VISIBILITY:
                return attribute
        return None


def _iter_declarations(source: SourceText) -> Iterator[_Declaration]:
    for match in _DECLARATION.finditer(source.masked):
        type_text = " ".join(match.group("type").split())
        if type_text.split(" ", 1)[0] in _NOT_A_TYPE:
            continue
        offset = match.start("type")
        value = None
        if match.group("value") is not None:
            value = source.original(match.start("value"), match.end("value")) or None
        yield _Declaration(
            offset=offset,
            type=type_text,
            name=match.group("name"),
            attributes=tuple(_ATTRIBUTE.findall(match.group("attrs"))),
            value=value,
            container=source.enclosing_block(offset),
        )


class StateVariableExtractor(Extractor):
    kind = EntityKind.STATE_VARIABLE

    def extract(self, source: SourceText) -> Iterable[StateVariableEntity]:
        for declaration in _iter_declarations(source):
            if "constant" in declaration.attributes:
                continue
            if declaration.container not in _STATE_CONTAINERS:
                continue
            yield StateVariableEntity(
                name=declaration.name,
                offset=declaration.offset,
                type=declaration.type,
                docs=cast(VariableTags, self.docs_for(source, declaration.offset)),
                visibility=declaration.visibility or "internal",
                attributes=tuple(
                    attribute for attribute in declaration.attributes if attribute not in _VISIBILITY
                ),
                value=declaration.value,
            )


class ConstantExtractor(Extractor):
    kind = EntityKind.CONSTANT
    keyword = "constant"

    def extract(self, source: SourceText) -> Iterable[ConstantEntity]:
        for declaration in _iter_declarations(source):
            if "constant" not in declaration.attributes:
                continue
            if declaration.container not in _CONSTANT_CONTAINERS:
                continue
            yield ConstantEntity(
                name=declaration.name,
                offset=declaration.offset,
                type=declaration.type,
                docs=cast(VariableTags, self.docs_for(source, declaration.offset)),
                visibility=declaration.visibility,
                value=declaration.value,
            )


__all__ = ["ConstantExtractor", "StateVariableExtractor"]
