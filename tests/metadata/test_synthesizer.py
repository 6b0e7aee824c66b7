"""Tests for starterdoc.metadata.synthesizer."""

from __future__ import annotations

from pathlib import Path

import pytest

from starterdoc.config import StarterdocConfig
from starterdoc.metadata import SynthesisDefaults, SynthesisError, synthesize_metadata, to_starter_name
from starterdoc.models import Author
from tests._fixtures.draft_builder import FHE_COUNTER, UNDOCUMENTED


@pytest.fixture
def config(tmp_path: Path) -> StarterdocConfig:
    return StarterdocConfig.for_root(tmp_path)


def test_synthesizes_documented_contract(config: StarterdocConfig) -> None:
    metadata = synthesize_metadata(FHE_COUNTER, Path("contracts/FHECounter.sol"), config)

    assert metadata.name == "fhe-counter"
    assert metadata.contract_name == "FHECounter"
    assert metadata.contract_filename == "FHECounter.sol"
    assert metadata.label == "FHE Counter"
    assert metadata.description == "A confidential counter that keeps its value encrypted on-chain."
    assert metadata.category == "fundamental"
    assert metadata.chapter == "basics"
    assert metadata.tags == ["DeFi", "Infra"]
    assert metadata.concepts == ["arithmetic-operations", "access-control"]
    assert metadata.authors == [Author(name="Jane Doe", email="jane@example.com", url="https://example.com")]
    assert metadata.has_ui is False
    assert metadata.version == "1.0.0"
    assert metadata.fhevm_version == "0.9.1"
    assert metadata.constructor_args == ["initialOwner"]


def test_explicit_defaults_win_over_custom_tags(config: StarterdocConfig) -> None:
    defaults = SynthesisDefaults(starter_name="my-counter", category="patterns", has_ui=True)

    metadata = synthesize_metadata(FHE_COUNTER, Path("FHECounter.sol"), config, defaults)

    assert metadata.name == "my-counter"
    assert metadata.category == "patterns"
    assert metadata.chapter == "basics"
    assert metadata.has_ui is True


def test_description_falls_back_to_dev_usage(config: StarterdocConfig) -> None:
    source = "/// @dev Usage summary: deploy then call increment\ncontract Bare {}"

    metadata = synthesize_metadata(source, Path("Bare.sol"), config)

    assert metadata.description == "deploy then call increment"


def test_undocumented_contract_gets_safe_defaults(config: StarterdocConfig) -> None:
    metadata = synthesize_metadata(UNDOCUMENTED, Path("Plain.sol"), config)

    assert metadata.name == "plain"
    assert metadata.label == "Plain Starter"
    assert metadata.description == ""
    assert metadata.tags == []
    assert metadata.concepts == []
    assert metadata.authors == [Author(name="Unknown")]
    assert metadata.constructor_args == []


def test_missing_contract_without_name_is_fatal(config: StarterdocConfig) -> None:
    with pytest.raises(SynthesisError):
        synthesize_metadata("pragma solidity ^0.8.24;", Path("Empty.sol"), config)


def test_has_ui_custom_tag(config: StarterdocConfig) -> None:
    source = "/// @notice Shows a UI.\n/// @custom:has-ui true\ncontract Dapp {}"

    metadata = synthesize_metadata(source, Path("Dapp.sol"), config)

    assert metadata.has_ui is True


def test_defaults_from_mapping_ignores_unknown_keys() -> None:
    defaults = SynthesisDefaults.from_mapping({"category": "applied", "colour": "blue"})

    assert defaults.category == "applied"
    assert defaults.chapter is None


@pytest.mark.parametrize(
    ("contract_name", "expected"),
    [("FHECounter", "fhe-counter"), ("EncryptedERC20", "encrypted-erc20"), ("simpleVault", "simple-vault")],
)
def test_to_starter_name(contract_name: str, expected: str) -> None:
    assert to_starter_name(contract_name) == expected
