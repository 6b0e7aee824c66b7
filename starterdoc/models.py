"""Core data models shared across starterdoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


class EntityKind(str, Enum):
    """Declaration kinds recognised in contract sources."""

    CONTRACT = "contract"
    FUNCTION = "function"
    STATE_VARIABLE = "stateVariable"
    STRUCT = "struct"
    ENUM = "enum"
    CONSTANT = "constant"
    CONSTRUCTOR = "constructor"


# ---------------------------------------------------------------------------
# Tag records


@dataclass(frozen=True)
class Author:
    """Author entry parsed from ``@author`` or loaded from metadata."""

    name: str
    email: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {"name": self.name}
        if self.email:
            data["email"] = self.email
        if self.url:
            data["url"] = self.url
        return data


@dataclass(frozen=True)
class DevSections:
    """Contract-level ``@dev`` content split by sub-marker."""

    usage: Tuple[str, ...] = ()
    prerequisites: Tuple[str, ...] = ()
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ContractTags:
    title: Optional[str] = None
    notice: Optional[str] = None
    authors: Tuple[Author, ...] = ()
    dev: DevSections = field(default_factory=DevSections)
    custom: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ParamDoc:
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class FunctionTags:
    """Tags for functions and constructors."""

    notice: Optional[str] = None
    dev: Tuple[str, ...] = ()
    params: Tuple[ParamDoc, ...] = ()
    returns: Optional[str] = None
    custom: Dict[str, str] = field(default_factory=dict)

    def param(self, name: str) -> Optional[ParamDoc]:
        for entry in self.params:
            if entry.name == name:
                return entry
        return None


@dataclass(frozen=True)
class VariableTags:
    """Tags for state variables and constants."""

    notice: Optional[str] = None
    dev: Tuple[str, ...] = ()
    name: Optional[str] = None
    type: Optional[str] = None
    custom: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FieldDoc:
    name: str
    type: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumValueDoc:
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class TypeTags:
    """Tags for structs and enums."""

    notice: Optional[str] = None
    dev: Tuple[str, ...] = ()
    fields: Tuple[FieldDoc, ...] = ()
    values: Tuple[EnumValueDoc, ...] = ()
    custom: Dict[str, str] = field(default_factory=dict)


TagRecord = Union[ContractTags, FunctionTags, VariableTags, TypeTags]


# ---------------------------------------------------------------------------
# Source entities


@dataclass(frozen=True)
class FunctionParam:
    """Parameter parsed from a function or constructor signature."""

    name: str
    type: str
    location: Optional[str] = None
    description: Optional[str] = None

    @property
    def signature_type(self) -> str:
        return f"{self.type} {self.location}" if self.location else self.type


@dataclass(frozen=True)
class StructMember:
    name: str
    type: str


@dataclass(frozen=True)
class ContractEntity:
    name: str
    offset: int
    docs: ContractTags = field(default_factory=ContractTags)
    contract_kind: str = "contract"
    is_abstract: bool = False
    bases: Tuple[str, ...] = ()
    kind: EntityKind = field(default=EntityKind.CONTRACT, init=False)


@dataclass(frozen=True)
class FunctionEntity:
    name: str
    offset: int
    docs: FunctionTags = field(default_factory=FunctionTags)
    params: Tuple[FunctionParam, ...] = ()
    visibility: Optional[str] = None
    mutability: Optional[str] = None
    modifiers: Tuple[str, ...] = ()
    returns: Tuple[str, ...] = ()
    kind: EntityKind = field(default=EntityKind.FUNCTION, init=False)


@dataclass(frozen=True)
class ConstructorEntity:
    offset: int
    docs: FunctionTags = field(default_factory=FunctionTags)
    params: Tuple[FunctionParam, ...] = ()
    modifiers: Tuple[str, ...] = ()
    name: str = "constructor"
    kind: EntityKind = field(default=EntityKind.CONSTRUCTOR, init=False)


@dataclass(frozen=True)
class StateVariableEntity:
    name: str
    offset: int
    type: str
    docs: VariableTags = field(default_factory=VariableTags)
    visibility: str = "internal"
    attributes: Tuple[str, ...] = ()
    value: Optional[str] = None
    kind: EntityKind = field(default=EntityKind.STATE_VARIABLE, init=False)


@dataclass(frozen=True)
class ConstantEntity:
    name: str
    offset: int
    type: str
    docs: VariableTags = field(default_factory=VariableTags)
    visibility: Optional[str] = None
    value: Optional[str] = None
    kind: EntityKind = field(default=EntityKind.CONSTANT, init=False)


@dataclass(frozen=True)
class StructEntity:
    name: str
    offset: int
    docs: TypeTags = field(default_factory=TypeTags)
    members: Tuple[StructMember, ...] = ()
    kind: EntityKind = field(default=EntityKind.STRUCT, init=False)


@dataclass(frozen=True)
class EnumEntity:
    name: str
    offset: int
    docs: TypeTags = field(default_factory=TypeTags)
    members: Tuple[str, ...] = ()
    kind: EntityKind = field(default=EntityKind.ENUM, init=False)


SourceEntity = Union[
    ContractEntity,
    FunctionEntity,
    ConstructorEntity,
    StateVariableEntity,
    ConstantEntity,
    StructEntity,
    EnumEntity,
]


# ---------------------------------------------------------------------------
# Metadata


_METADATA_FIELDS = (
    "name",
    "contract_name",
    "contract_filename",
    "label",
    "description",
    "details",
    "version",
    "fhevm_version",
    "category",
    "chapter",
    "concepts",
    "tags",
    "authors",
    "has_ui",
    "constructor_args",
)


@dataclass
class Metadata:
    """Canonical starter description persisted as ``metadata.json``.

    Values are stored as given; type checking is the validator's job so that
    a hand-edited file with e.g. ``"has_ui": "yes"`` is reported, not coerced.
    """

    name: str
    label: str
    description: str
    category: str
    chapter: str
    authors: List[Author] = field(default_factory=list)
    has_ui: bool = False
    details: Optional[str] = None
    version: Optional[str] = None
    concepts: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    contract_name: Optional[str] = None
    contract_filename: Optional[str] = None
    fhevm_version: Optional[str] = None
    constructor_args: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key in _METADATA_FIELDS:
            value = getattr(self, key)
            if value is None:
                continue
            if key == "authors":
                value = [
                    author.to_dict() if isinstance(author, Author) else author for author in value
                ]
            elif isinstance(value, list):
                value = list(value)
            data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Metadata":
        """Build a record from parsed JSON, ignoring unrecognised keys."""
        raw_authors = data.get("authors")
        authors: Any = raw_authors
        if isinstance(raw_authors, list):
            authors = [_author_from_value(item) for item in raw_authors]
        return cls(
            name=data.get("name", ""),
            label=data.get("label", ""),
            description=data.get("description", ""),
            category=data.get("category", ""),
            chapter=data.get("chapter", ""),
            authors=authors if authors is not None else [],
            has_ui=data.get("has_ui", False),
            details=data.get("details"),
            version=data.get("version"),
            concepts=data.get("concepts", []),
            tags=data.get("tags", []),
            contract_name=data.get("contract_name"),
            contract_filename=data.get("contract_filename"),
            fhevm_version=data.get("fhevm_version"),
            constructor_args=data.get("constructor_args"),
        )


def _author_from_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        name = value.get("name", "")
        return Author(
            name=name if isinstance(name, str) else "",
            email=value.get("email") or None,
            url=value.get("url") or None,
        )
    return value


__all__ = [
    "Author",
    "ConstantEntity",
    "ConstructorEntity",
    "ContractEntity",
    "ContractTags",
    "DevSections",
    "EntityKind",
    "EnumEntity",
    "EnumValueDoc",
    "FieldDoc",
    "FunctionEntity",
    "FunctionParam",
    "FunctionTags",
    "Metadata",
    "ParamDoc",
    "SourceEntity",
    "StateVariableEntity",
    "StructEntity",
    "StructMember",
    "TagRecord",
    "TypeTags",
    "VariableTags",
]
