"""Tests for struct, enum and contract extraction."""

from __future__ import annotations

from starterdoc.extractors import SourceText
from starterdoc.extractors.contracts import ContractExtractor
from starterdoc.extractors.definitions import EnumExtractor, StructExtractor


def test_struct_members_and_field_docs() -> None:
    source = """
contract Book {
    /**
     * @notice An order.
     * @field price uint64 Limit price.
     */
    struct Order {
        uint64 price;
        mapping(address => bool) seen;
    }
}
"""
    (struct,) = list(StructExtractor().extract(SourceText(source)))

    assert struct.name == "Order"
    assert struct.docs.notice == "An order."
    assert [(m.name, m.type) for m in struct.members] == [
        ("price", "uint64"),
        ("seen", "mapping(address => bool)"),
    ]
    assert struct.docs.fields[0].description == "Limit price."


def test_enum_members() -> None:
    source = "/// @notice States.\nenum Phase { Open, Closed, Settled }"

    (enum,) = list(EnumExtractor().extract(SourceText(source)))

    assert enum.name == "Phase"
    assert enum.members == ("Open", "Closed", "Settled")
    assert enum.docs.notice == "States."


def test_contracts_libraries_and_interfaces() -> None:
    source = """
interface ICounter { function count() external view returns (uint256); }

library Math {}

/// @title Counter
abstract contract Base is ICounter, Ownable(msg.sender) {}

contract Counter is Base {}
"""
    contracts = list(ContractExtractor().extract(SourceText(source)))

    assert [(c.name, c.contract_kind, c.is_abstract) for c in contracts] == [
        ("ICounter", "interface", False),
        ("Math", "library", False),
        ("Base", "contract", True),
        ("Counter", "contract", False),
    ]
    assert contracts[2].bases == ("ICounter", "Ownable")
    assert contracts[2].docs.title == "Counter"
