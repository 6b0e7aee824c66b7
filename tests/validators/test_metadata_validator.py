"""Tests for starterdoc.validators.metadata."""

from __future__ import annotations

import pytest

from starterdoc.config import TaxonomyConfig
from starterdoc.models import Author, Metadata
from starterdoc.validators import MetadataValidator, ValidationError


def _metadata(**overrides) -> Metadata:
    values = dict(
        name="fhe-counter",
        label="FHE Counter",
        description="A confidential counter that keeps its value encrypted.",
        category="fundamental",
        chapter="basics",
        authors=[Author(name="Jane Doe", email="jane@example.com", url="https://example.com")],
        has_ui=False,
        version="1.0.0",
        concepts=["arithmetic-operations"],
        tags=["DeFi"],
    )
    values.update(overrides)
    return Metadata(**values)


def test_valid_record_passes() -> None:
    result = MetadataValidator().validate(_metadata())

    assert result.ok
    assert result.errors == []
    result.raise_for_errors()


def test_description_boundary() -> None:
    validator = MetadataValidator()

    assert validator.validate(_metadata(description="x" * 300)).ok
    errors = validator.validate(_metadata(description="x" * 301)).errors
    assert errors == ["description: must be at most 300 characters (got 301)"]


def test_every_violation_is_reported() -> None:
    result = MetadataValidator().validate(_metadata(description="x" * 301, category="expert"))

    assert len(result.errors) == 2
    assert result.errors[0].startswith("description:")
    assert result.errors[1].startswith("category:")


def test_invalid_draft_reports_all_rules_in_order() -> None:
    record = _metadata(name="Bad Name!", label="", description="", authors=[])

    errors = MetadataValidator().validate(record).errors

    assert [error.split(":", 1)[0] for error in errors] == ["name", "label", "description", "authors"]


def test_strict_profile_requires_longer_description() -> None:
    record = _metadata(description="Too short")

    assert MetadataValidator().validate(record).ok
    errors = MetadataValidator(profile="strict").validate(record).errors
    assert errors == ["description: must be at least 20 characters (got 9)"]


def test_unknown_profile_is_rejected() -> None:
    with pytest.raises(ValueError):
        MetadataValidator(profile="lenient")


def test_author_contact_details_are_checked() -> None:
    record = _metadata(authors=[Author(name="", email="not-an-email", url="ftp:/nowhere")])

    errors = MetadataValidator().validate(record).errors

    assert errors == [
        "authors[0].name: must not be empty",
        "authors[0].email: 'not-an-email' is not a valid email address",
        "authors[0].url: 'ftp:/nowhere' is not a valid URL",
    ]


def test_has_ui_must_be_boolean() -> None:
    errors = MetadataValidator().validate(_metadata(has_ui="yes")).errors

    assert errors == ["has_ui: must be a boolean (got str)"]


def test_concepts_and_chapter_follow_the_taxonomy() -> None:
    taxonomy = TaxonomyConfig(chapters=["basics"], concepts={"custom-concept": ["Lib.call"]})
    validator = MetadataValidator(taxonomy)

    errors = validator.validate(_metadata(chapter="handles", concepts=["custom-concept", "magic"])).errors

    assert errors == [
        "chapter: 'handles' is not one of: basics",
        "concepts: unknown concept 'magic'",
    ]


@pytest.mark.parametrize("concepts", [[["nested"]], [{"a": 1}], ["arithmetic-operations", 3]])
def test_non_string_concepts_are_reported(concepts) -> None:
    errors = MetadataValidator().validate(_metadata(concepts=concepts)).errors

    assert errors == ["concepts: entries must be strings"]


def test_supplementary_rules() -> None:
    record = _metadata(details="d" * 1001, version="v1", tags=["ok", 3])

    errors = MetadataValidator().validate(record).errors

    assert [error.split(":", 1)[0] for error in errors] == ["details", "version", "tags"]


def test_validation_never_mutates_the_record() -> None:
    record = _metadata(name="Bad Name!", has_ui="yes")
    before = record.to_dict()

    MetadataValidator().validate(record)

    assert record.to_dict() == before


def test_raise_for_errors_carries_all_messages() -> None:
    result = MetadataValidator().validate(_metadata(label="", description=""))

    with pytest.raises(ValidationError) as excinfo:
        result.raise_for_errors()

    assert excinfo.value.errors == result.errors
    assert len(excinfo.value.errors) == 2
