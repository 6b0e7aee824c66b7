"""Extractors for struct and enum definitions."""

from __future__ import annotations

import re
from typing import Iterable, List, cast

from .base import Extractor, SourceText, split_top_level
from ..models import EntityKind, EnumEntity, StructEntity, StructMember, TypeTags

_STRUCT = re.compile(r"\bstruct\s+([A-Za-z_]\w*)\s*\{")
_ENUM = re.compile(r"\benum\s+([A-Za-z_]\w*)\s*\{")
_MEMBER = re.compile(r"^(?P<type>.+?)\s+(?P<name>[A-Za-z_]\w*)$")
_IDENTIFIER = re.compile(r"^[A-Za-z_]\w*$")


class StructExtractor(Extractor):
    kind = EntityKind.STRUCT
    keyword = "struct"

    def extract(self, source: SourceText) -> Iterable[StructEntity]:
        for match in _STRUCT.finditer(source.masked):
            open_brace = match.end() - 1
            body = source.masked[open_brace + 1:source.matching_close(open_brace)]
            members: List[StructMember] = []
            for statement in split_top_level(body, ";"):
                member = _MEMBER.match(statement)
                if member:
                    members.append(StructMember(name=member.group("name"), type=member.group("type")))
            yield StructEntity(
                name=match.group(1),
                offset=match.start(),
                docs=cast(TypeTags, self.docs_for(source, match.start())),
                members=tuple(members),
            )


class EnumExtractor(Extractor):
    kind = EntityKind.ENUM
    keyword = "enum"

    def extract(self, source: SourceText) -> Iterable[EnumEntity]:
        for match in _ENUM.finditer(source.masked):
            open_brace = match.end() - 1
            body = source.masked[open_brace + 1:source.matching_close(open_brace)]
            members = tuple(item for item in split_top_level(body) if _IDENTIFIER.match(item))
            yield EnumEntity(
                name=match.group(1),
                offset=match.start(),
                docs=cast(TypeTags, self.docs_for(source, match.start())),
                members=members,
            )


__all__ = ["EnumExtractor", "StructExtractor"]
