"""Build a :class:`~starterdoc.models.Metadata` record from a contract source."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from ..config import StarterdocConfig
from ..extractors import detect_concepts, extract_entities
from ..logging import get_logger
from ..models import (
    Author,
    ConstructorEntity,
    ContractEntity,
    ContractTags,
    Metadata,
    SourceEntity,
)

logger = get_logger("metadata")

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_NAME_CHARS = re.compile(r"[^a-z0-9]+")
_TRUE_VALUES = {"true", "yes", "1"}
_FALSE_VALUES = {"false", "no", "0"}


class SynthesisError(RuntimeError):
    """Raised when a metadata record cannot be assembled at all."""


@dataclass
class SynthesisDefaults:
    """Externally supplied values that win over anything found in the source."""

    starter_name: Optional[str] = None
    category: Optional[str] = None
    chapter: Optional[str] = None
    has_ui: Optional[bool] = None
    version: Optional[str] = None
    fhevm_version: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SynthesisDefaults":
        """Pick the known keys out of ``data``; anything else is ignored."""
        known = {item.name for item in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


def to_starter_name(contract_name: str) -> str:
    """``FHECounter`` -> ``fhe-counter``."""
    spaced = _CAMEL_BOUNDARY.sub("-", contract_name.strip())
    return _NON_NAME_CHARS.sub("-", spaced.lower()).strip("-")


def primary_contract(entities: Sequence[SourceEntity]) -> Optional[ContractEntity]:
    """Pick the contract the starter is about.

    Documented, concrete ``contract`` declarations are preferred over
    libraries, interfaces and abstract bases; ties go to the first one.
    """
    contracts = [entity for entity in entities if isinstance(entity, ContractEntity)]
    if not contracts:
        return None

    def rank(entity: ContractEntity) -> tuple[int, int]:
        concrete = entity.contract_kind == "contract" and not entity.is_abstract
        documented = entity.docs != ContractTags()
        return (0 if concrete else 1, 0 if documented else 1)

    return min(contracts, key=rank)


def synthesize_metadata(
    source_text: str,
    contract_path: Path,
    config: StarterdocConfig,
    defaults: SynthesisDefaults | None = None,
    *,
    entities: Sequence[SourceEntity] | None = None,
) -> Metadata:
    """Merge doc tags, defaults and detected concepts into a metadata record.

    Precedence for overridable fields: ``defaults`` > ``@custom:`` tags on the
    contract > configuration defaults.
    """
    defaults = defaults or SynthesisDefaults()
    entities = list(entities) if entities is not None else extract_entities(source_text)
    contract = primary_contract(entities)
    tags = contract.docs if contract else ContractTags()
    contract_name = contract.name if contract else None
    if contract is None:
        logger.warning("No contract declaration found in %s", contract_path.name)
    elif tags == ContractTags():
        logger.warning("Contract %s has no NatSpec documentation", contract.name)

    name = defaults.starter_name or (to_starter_name(contract_name) if contract_name else "")
    if not name:
        raise SynthesisError(
            f"Unable to resolve a starter name for {contract_path.name}: "
            "no contract declaration found and no starter name supplied"
        )

    custom = tags.custom
    concepts = detect_concepts(source_text, config.taxonomy.concepts)
    authors: List[Author] = list(tags.authors) or [Author(name=defaults.author or config.defaults.author)]

    metadata = Metadata(
        name=name,
        contract_name=contract_name,
        contract_filename=contract_path.name,
        label=tags.title or f"{contract_name or name} Starter",
        description=tags.notice or _dev_description(tags),
        details=custom.get("details"),
        version=defaults.version or custom.get("version") or config.defaults.version,
        fhevm_version=defaults.fhevm_version or config.defaults.fhevm_version,
        category=defaults.category or custom.get("category") or config.defaults.category,
        chapter=defaults.chapter or custom.get("chapter") or config.defaults.chapter,
        concepts=concepts,
        tags=_split_list(custom.get("tags")),
        authors=authors,
        has_ui=_resolve_flag(defaults.has_ui, custom.get("has-ui") or custom.get("has_ui")),
        constructor_args=_constructor_args(entities),
    )
    logger.debug(
        "Synthesized metadata for %s (concepts: %s)",
        metadata.name,
        ", ".join(concepts) or "none",
    )
    return metadata


def _dev_description(tags: ContractTags) -> str:
    """First non-empty ``@dev`` group: notes, then usage items, then prerequisites."""
    for group in (tags.dev.notes, tags.dev.usage, tags.dev.prerequisites):
        if group:
            return " ".join(group)
    return ""


def _constructor_args(entities: Sequence[SourceEntity]) -> List[str]:
    for entity in entities:
        if isinstance(entity, ConstructorEntity):
            return [param.name for param in entity.params]
    return []


def _split_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _resolve_flag(explicit: Optional[bool], tagged: Optional[str]) -> bool:
    if explicit is not None:
        return bool(explicit)
    if tagged:
        lowered = tagged.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered not in _FALSE_VALUES:
            logger.warning("Ignoring unrecognised @custom:has-ui value '%s'", tagged)
    return False


__all__ = [
    "SynthesisDefaults",
    "SynthesisError",
    "primary_contract",
    "synthesize_metadata",
    "to_starter_name",
]
