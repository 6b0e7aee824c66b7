"""Extractor for contract, library and interface declarations."""

from __future__ import annotations

import re
from typing import Iterable, cast

from .base import Extractor, SourceText, split_top_level
from ..models import ContractEntity, ContractTags, EntityKind

_CONTRACT = re.compile(
    r"\b(?P<abstract>abstract\s+)?(?P<kind>contract|library|interface)\s+(?P<name>[A-Za-z_]\w*)"
    r"(?P<rest>[^{;]*)\{"
)
_INHERITANCE = re.compile(r"^\s*is\s+(.*)$", re.DOTALL)
_BASE_NAME = re.compile(r"^[A-Za-z_][\w.]*")


class ContractExtractor(Extractor):
    kind = EntityKind.CONTRACT

    def extract(self, source: SourceText) -> Iterable[ContractEntity]:
        for match in _CONTRACT.finditer(source.masked):
            if source.depth_at(match.start()) != 0:
                continue
            bases = []
            inheritance = _INHERITANCE.match(match.group("rest"))
            if inheritance:
                for segment in split_top_level(inheritance.group(1)):
                    base = _BASE_NAME.match(segment)
                    if base:
                        bases.append(base.group(0))
            yield ContractEntity(
                name=match.group("name"),
                offset=match.start(),
                docs=cast(ContractTags, self.docs_for(source, match.start())),
                contract_kind=match.group("kind"),
                is_abstract=bool(match.group("abstract")),
                bases=tuple(bases),
            )


__all__ = ["ContractExtractor"]
