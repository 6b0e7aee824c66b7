"""Tests for starterdoc.natspec.tags."""

from __future__ import annotations

from starterdoc.models import Author, EntityKind, FunctionTags, TypeTags
from starterdoc.natspec import (
    parse_contract_tags,
    parse_enum_tags,
    parse_function_tags,
    parse_struct_tags,
    parse_tags,
    parse_variable_tags,
)
from starterdoc.natspec.tags import classify_line, parse_author


def test_contract_tags_split_dev_markers() -> None:
    tags = parse_contract_tags(
        [
            "@title FHE Counter",
            "@author Jane Doe <jane@example.com> (https://example.com)",
            "@notice A confidential counter.",
            "@dev Usage summary:",
            "- Call increment",
            "- Call decrement",
            "Prerequisites:",
            "- Node 20",
            "Notes:",
            "Handles are opaque.",
            "@custom:category fundamental",
        ]
    )

    assert tags.title == "FHE Counter"
    assert tags.notice == "A confidential counter."
    assert tags.authors == (Author(name="Jane Doe", email="jane@example.com", url="https://example.com"),)
    assert tags.dev.usage == ("Call increment", "Call decrement")
    assert tags.dev.prerequisites == ("Node 20",)
    assert tags.dev.notes == ("Handles are opaque.",)
    assert tags.custom == {"category": "fundamental"}


def test_usage_marker_is_case_insensitive_on_the_dev_line() -> None:
    tags = parse_contract_tags(["@dev USAGE SUMMARY: deploy then call increment"])

    assert tags.dev.usage == ("deploy then call increment",)
    assert tags.dev.notes == ()


def test_singular_prerequisite_marker() -> None:
    tags = parse_contract_tags(["@dev Prerequisite: node 20"])

    assert tags.dev.prerequisites == ("node 20",)
    assert tags.dev.notes == ()


def test_plain_dev_lines_become_notes() -> None:
    tags = parse_contract_tags(["@dev Uses the FHE library.", "@dev Not audited."])

    assert tags.dev.notes == ("Uses the FHE library.", "Not audited.")


def test_untagged_text_is_read_as_notice() -> None:
    tags = parse_contract_tags(["Keeps a counter", "encrypted at rest."])

    assert tags.notice == "Keeps a counter encrypted at rest."


def test_multiline_notice_is_joined() -> None:
    tags = parse_function_tags(["@notice Adds two", "numbers together.", "@param a First."])

    assert tags.notice == "Adds two numbers together."
    assert tags.params[0].name == "a"


def test_function_params_and_returns() -> None:
    tags = parse_function_tags(
        [
            "@notice Transfers tokens.",
            "@param to Recipient address.",
            "@param amount Encrypted amount",
            "that will be moved.",
            "@return ok Whether it worked.",
            "@return balance New balance.",
            "@dev Emits Transfer.",
        ]
    )

    assert isinstance(tags, FunctionTags)
    assert tags.param("to").description == "Recipient address."
    assert tags.param("amount").description == "Encrypted amount that will be moved."
    assert tags.param("missing") is None
    assert tags.returns == "ok Whether it worked.; balance New balance."
    assert tags.dev == ("Emits Transfer.",)


def test_unknown_tags_and_their_continuations_are_dropped() -> None:
    tags = parse_function_tags(["@notice Kept.", "@since v2", "continuation of since", "@param x Value."])

    assert tags.notice == "Kept."
    assert [param.name for param in tags.params] == ["x"]


def test_custom_tags_last_occurrence_wins() -> None:
    tags = parse_function_tags(["@custom:security first", "@custom:security second", "more"])

    assert tags.custom == {"security": "second more"}


def test_variable_tags() -> None:
    tags = parse_variable_tags(["@notice Owner account.", "@dev Set once.", "@name owner", "@type address"])

    assert tags.notice == "Owner account."
    assert tags.dev == ("Set once.",)
    assert tags.name == "owner"
    assert tags.type == "address"


def test_struct_fields_from_tags_and_bullets() -> None:
    tags = parse_struct_tags(
        [
            "@notice A position.",
            "@field amount uint64 Size of the position.",
            "- owner (address): Who holds it",
        ]
    )

    assert isinstance(tags, TypeTags)
    assert [(item.name, item.type, item.description) for item in tags.fields] == [
        ("amount", "uint64", "Size of the position."),
        ("owner", "address", "Who holds it"),
    ]


def test_enum_values_from_tags_and_bullets() -> None:
    tags = parse_enum_tags(["@notice Order state.", "@value Open Accepting fills.", "- Closed: Done"])

    assert [(item.name, item.description) for item in tags.values] == [
        ("Open", "Accepting fills."),
        ("Closed", "Done"),
    ]


def test_parse_tags_dispatches_by_kind() -> None:
    record = parse_tags(EntityKind.CONSTRUCTOR, ["@param owner Initial owner."])

    assert isinstance(record, FunctionTags)
    assert record.param("owner").description == "Initial owner."


def test_empty_input_gives_empty_records() -> None:
    tags = parse_contract_tags([])

    assert tags.title is None
    assert tags.notice is None
    assert tags.authors == ()
    assert tags.custom == {}


def test_classify_line_shapes() -> None:
    assert classify_line("@custom:has-ui true").shape == "custom"
    assert classify_line("@custom:has-ui true").name == "has-ui"
    assert classify_line("@notice hi").name == "notice"
    assert classify_line("plain").shape == "text"


def test_parse_author_without_contact_details() -> None:
    assert parse_author("Zama Team") == Author(name="Zama Team")
