"""Configuration loading for starterdoc (.starterdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_AUTHOR,
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_CHAPTER,
    DEFAULT_CHAPTERS,
    DEFAULT_COMMON_TAGS,
    DEFAULT_CONCEPTS,
    DEFAULT_FHEVM_VERSION,
    DEFAULT_VERSION,
    DOCUMENT_FILENAME,
    METADATA_FILENAME,
)

VALIDATION_PROFILES = ("default", "strict")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class TaxonomyConfig:
    """Enumerations used to classify starters."""

    categories: List[str] = field(default_factory=lambda: list(DEFAULT_CATEGORIES))
    chapters: List[str] = field(default_factory=lambda: list(DEFAULT_CHAPTERS))
    concepts: Dict[str, List[str]] = field(
        default_factory=lambda: {name: list(ops) for name, ops in DEFAULT_CONCEPTS.items()}
    )
    common_tags: List[str] = field(default_factory=lambda: list(DEFAULT_COMMON_TAGS))

    @property
    def concept_names(self) -> List[str]:
        return list(self.concepts)


@dataclass
class DefaultsConfig:
    """Values used when neither CLI options nor doc tags provide one."""

    category: str = DEFAULT_CATEGORY
    chapter: str = DEFAULT_CHAPTER
    version: str = DEFAULT_VERSION
    fhevm_version: str = DEFAULT_FHEVM_VERSION
    author: str = DEFAULT_AUTHOR


@dataclass
class ValidationConfig:
    profile: str = "default"


@dataclass
class StarterdocConfig:
    """Represents the settings defined in .starterdoc.yml."""

    root: Path
    catalog_dir: Path
    working_dir: Path
    docs_dir: Optional[Path] = None
    template_path: Optional[Path] = None
    metadata_file: str = METADATA_FILENAME
    document_file: str = DOCUMENT_FILENAME
    contract_extension: str = ".sol"
    test_extensions: List[str] = field(default_factory=lambda: [".ts", ".js"])
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    taxonomy: TaxonomyConfig = field(default_factory=TaxonomyConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    @classmethod
    def for_root(cls, root: Path) -> "StarterdocConfig":
        """Built-in defaults anchored at ``root``."""
        root = root.resolve()
        return cls(
            root=root,
            catalog_dir=root / "starters",
            working_dir=root / "workspace",
            docs_dir=root / "docs" / "starters",
        )


def load_config(config_path: Path) -> StarterdocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = StarterdocConfig.for_root(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    catalog_dir = _as_str(data.get("catalog_dir"))
    if catalog_dir:
        config.catalog_dir = root / catalog_dir
    working_dir = _as_str(data.get("working_dir"))
    if working_dir:
        config.working_dir = root / working_dir
    if "docs_dir" in data:
        docs_dir = _as_str(data.get("docs_dir"))
        config.docs_dir = root / docs_dir if docs_dir else None
    template = _as_str(data.get("template"))
    if template:
        config.template_path = root / template

    config.metadata_file = _as_str(data.get("metadata_file")) or config.metadata_file
    config.document_file = _as_str(data.get("document_file")) or config.document_file
    config.contract_extension = _as_str(data.get("contract_extension")) or config.contract_extension
    test_extensions = _as_str_list(data.get("test_extensions"))
    if test_extensions:
        config.test_extensions = test_extensions

    defaults_data = _as_dict(data.get("defaults"))
    if defaults_data:
        defaults = config.defaults
        defaults.category = _as_str(defaults_data.get("category")) or defaults.category
        defaults.chapter = _as_str(defaults_data.get("chapter")) or defaults.chapter
        defaults.version = _as_str(defaults_data.get("version")) or defaults.version
        defaults.fhevm_version = _as_str(defaults_data.get("fhevm_version")) or defaults.fhevm_version
        defaults.author = _as_str(defaults_data.get("author")) or defaults.author

    taxonomy_data = _as_dict(data.get("taxonomy"))
    if taxonomy_data:
        taxonomy = config.taxonomy
        categories = _as_str_list(taxonomy_data.get("categories"))
        if categories:
            taxonomy.categories = categories
        chapters = _as_str_list(taxonomy_data.get("chapters"))
        if chapters:
            taxonomy.chapters = chapters
        common_tags = _as_str_list(taxonomy_data.get("common_tags"))
        if common_tags:
            taxonomy.common_tags = common_tags
        if "concepts" in taxonomy_data:
            concepts = _as_dict(taxonomy_data.get("concepts"))
            if not concepts:
                raise ConfigError("taxonomy.concepts must map concept names to operation lists")
            taxonomy.concepts = {str(name): _as_str_list(ops) for name, ops in concepts.items()}

    validation_data = _as_dict(data.get("validation"))
    if validation_data:
        profile = (_as_str(validation_data.get("profile")) or "default").lower()
        if profile not in VALIDATION_PROFILES:
            allowed = ", ".join(VALIDATION_PROFILES)
            raise ConfigError(f"validation.profile must be one of: {allowed}")
        config.validation.profile = profile

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "ConfigError",
    "DefaultsConfig",
    "StarterdocConfig",
    "TaxonomyConfig",
    "ValidationConfig",
    "VALIDATION_PROFILES",
    "load_config",
]
