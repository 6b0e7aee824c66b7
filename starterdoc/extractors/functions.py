"""Extractors for functions and constructors."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple, cast

from .base import Extractor, SourceText, attach_param_docs, parse_parameter_list, split_top_level
from ..models import ConstructorEntity, EntityKind, FunctionEntity, FunctionTags

_FUNCTION = re.compile(r"\bfunction\s+([A-Za-z_]\w*)\s*\(")
_CONSTRUCTOR = re.compile(r"\bconstructor\s*\(")
_TAIL_TOKEN = re.compile(r"[A-Za-z_][\w.]*")

_VISIBILITY = {"external", "public", "internal", "private"}
_MUTABILITY = {"view", "pure", "payable"}


class FunctionExtractor(Extractor):
    """Finds ``function name(...)`` declarations with their signatures."""

    kind = EntityKind.FUNCTION
    keyword = "function"

    def extract(self, source: SourceText) -> Iterable[FunctionEntity]:
        for match in _FUNCTION.finditer(source.masked):
            open_paren = match.end() - 1
            close_paren = source.matching_close(open_paren)
            docs = cast(FunctionTags, self.docs_for(source, match.start()))
            params = parse_parameter_list(source.masked[open_paren + 1:close_paren])
            visibility, mutability, modifiers, returns = _parse_tail(source, close_paren + 1)
            yield FunctionEntity(
                name=match.group(1),
                offset=match.start(),
                docs=docs,
                params=attach_param_docs(params, docs),
                visibility=visibility,
                mutability=mutability,
                modifiers=modifiers,
                returns=returns,
            )


class ConstructorExtractor(Extractor):
    kind = EntityKind.CONSTRUCTOR
    keyword = "constructor"

    def extract(self, source: SourceText) -> Iterable[ConstructorEntity]:
        for match in _CONSTRUCTOR.finditer(source.masked):
            open_paren = match.end() - 1
            close_paren = source.matching_close(open_paren)
            docs = cast(FunctionTags, self.docs_for(source, match.start()))
            params = parse_parameter_list(source.masked[open_paren + 1:close_paren])
            _, mutability, modifiers, _ = _parse_tail(source, close_paren + 1)
            if mutability == "payable":
                modifiers = ("payable",) + modifiers
            yield ConstructorEntity(
                offset=match.start(),
                docs=docs,
                params=attach_param_docs(params, docs),
                modifiers=modifiers,
            )


def _parse_tail(
    source: SourceText, start: int
) -> Tuple[Optional[str], Optional[str], Tuple[str, ...], Tuple[str, ...]]:
    """Read visibility, mutability, modifiers and return types up to ``{`` or ``;``."""
    masked = source.masked
    end = _header_end(masked, start)
    words: List[str] = []
    returns: Tuple[str, ...] = ()
    index = start
    while index < end:
        if masked[index] == "(":
            close = min(source.matching_close(index), end)
            if words and words[-1] == "returns":
                returns = tuple(split_top_level(masked[index + 1:close]))
            index = close + 1
            continue
        token = _TAIL_TOKEN.match(masked, index)
        if token:
            words.append(token.group(0))
            index = token.end()
        else:
            index += 1

    visibility: Optional[str] = None
    mutability: Optional[str] = None
    modifiers: List[str] = []
    for word in words:
        if word in _VISIBILITY:
            visibility = word
        elif word in _MUTABILITY:
            mutability = word
        elif word != "returns":
            modifiers.append(word)
    return visibility, mutability, tuple(modifiers), returns


def _header_end(masked: str, start: int) -> int:
    depth = 0
    for index in range(start, len(masked)):
        char = masked[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        elif depth == 0 and char in "{;":
            return index
    return len(masked)


__all__ = ["ConstructorExtractor", "FunctionExtractor"]
