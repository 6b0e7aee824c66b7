"""Tests for starterdoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from starterdoc.config import ConfigError, StarterdocConfig, load_config
from starterdoc.constants import DEFAULT_CATEGORIES


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, StarterdocConfig)
    assert config.root == tmp_path.resolve()
    assert config.catalog_dir == tmp_path.resolve() / "starters"
    assert config.working_dir == tmp_path.resolve() / "workspace"
    assert config.docs_dir == tmp_path.resolve() / "docs" / "starters"
    assert config.template_path is None
    assert config.metadata_file == "metadata.json"
    assert config.document_file == "README.md"
    assert config.taxonomy.categories == list(DEFAULT_CATEGORIES)
    assert config.validation.profile == "default"


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".starterdoc.yml"
    config_file.write_text(
        """
catalog_dir: examples
working_dir: drafts
template: templates/starter.md.j2
document_file: DOCS.md
defaults:
  category: applied
  chapter: handles
  author: "Zama Team"
  version: 2.0.0
taxonomy:
  chapters: [basics, auctions]
  concepts:
    arithmetic: [add, sub]
validation:
  profile: Strict
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.catalog_dir == root / "examples"
    assert config.working_dir == root / "drafts"
    assert config.template_path == root / "templates" / "starter.md.j2"
    assert config.document_file == "DOCS.md"
    assert config.defaults.category == "applied"
    assert config.defaults.chapter == "handles"
    assert config.defaults.author == "Zama Team"
    assert config.defaults.version == "2.0.0"
    assert config.taxonomy.chapters == ["basics", "auctions"]
    assert config.taxonomy.concepts == {"arithmetic": ["add", "sub"]}
    assert config.taxonomy.categories == list(DEFAULT_CATEGORIES)
    assert config.validation.profile == "strict"


def test_load_config_null_docs_dir_disables_mirror(tmp_path: Path) -> None:
    (tmp_path / ".starterdoc.yml").write_text("docs_dir: null\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.docs_dir is None


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".starterdoc.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).catalog_dir == tmp_path.resolve() / "starters"


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".starterdoc.yml").write_text("taxonomy: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".starterdoc.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_unknown_profile(tmp_path: Path) -> None:
    (tmp_path / ".starterdoc.yml").write_text("validation:\n  profile: lenient\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="validation.profile"):
        load_config(tmp_path)
