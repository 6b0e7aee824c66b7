"""Tests for the combined extraction entry point."""

from __future__ import annotations

from typing import Iterable

import pytest

from starterdoc.extractors import Extractor, SourceText, detect_concepts, discover_extractors, extract_entities
from starterdoc.models import (
    ConstantEntity,
    ConstructorEntity,
    ContractEntity,
    EntityKind,
    EnumEntity,
    FunctionEntity,
    StateVariableEntity,
    StructEntity,
)
from tests._fixtures.draft_builder import FHE_COUNTER, UNDOCUMENTED


def test_entities_are_ordered_by_position() -> None:
    entities = extract_entities(FHE_COUNTER)

    assert [type(entity) for entity in entities] == [
        ContractEntity,
        ConstantEntity,
        EnumEntity,
        StructEntity,
        StateVariableEntity,
        StateVariableEntity,
        ConstructorEntity,
        FunctionEntity,
        FunctionEntity,
        FunctionEntity,
    ]
    offsets = [entity.offset for entity in entities]
    assert offsets == sorted(offsets)


def test_undocumented_source_degrades_gracefully() -> None:
    entities = extract_entities(UNDOCUMENTED)

    contract = entities[0]
    assert isinstance(contract, ContractEntity)
    assert contract.docs.notice is None
    function = next(entity for entity in entities if isinstance(entity, FunctionEntity))
    assert function.docs.notice is None
    assert function.params[0].description is None


def test_malformed_input_never_raises() -> None:
    assert extract_entities("contract { function ( struct enum ;;; }}} /**") == []
    assert extract_entities("") == []


class _ExplodingExtractor(Extractor):
    kind = EntityKind.FUNCTION

    def extract(self, source: SourceText) -> Iterable[FunctionEntity]:
        raise RuntimeError("boom")


def test_failing_extractor_contributes_nothing() -> None:
    extractors = [_ExplodingExtractor(), *discover_extractors(["contract"])]

    entities = extract_entities(UNDOCUMENTED, extractors)

    assert [entity.name for entity in entities] == ["Plain"]


def test_discover_extractors_rejects_unknown_kinds() -> None:
    with pytest.raises(ValueError):
        discover_extractors(["event"])


def test_detect_concepts_follows_vocabulary_order_and_ignores_comments() -> None:
    vocabulary = {
        "arithmetic-operations": ["FHE.add", "FHE.sub"],
        "comparison-operations": ["FHE.eq"],
        "access-control": ["FHE.allow", "FHE.allowThis"],
    }
    source = """
contract C {
    // FHE.eq(a, b) is not called
    function f() external {
        FHE.allowThis(x);
        y = FHE.add(x, x);
    }
}
"""
    assert detect_concepts(source, vocabulary) == ["arithmetic-operations", "access-control"]


def test_detect_concepts_matches_whole_operation_names() -> None:
    vocabulary = {"arithmetic-operations": ["FHE.add"]}

    assert detect_concepts("x = FHE.addMod(a, b);", vocabulary) == []
