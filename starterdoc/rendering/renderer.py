"""Render starter documentation from metadata and extracted entities."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, Undefined

from ..constants import DOCUMENT_SECTIONS, EMPTY_CELL, NO_DESCRIPTION, SECTION_TITLES
from ..logging import get_logger
from ..metadata import primary_contract
from ..models import (
    ConstantEntity,
    ConstructorEntity,
    ContractTags,
    EnumEntity,
    FunctionEntity,
    FunctionParam,
    Metadata,
    SourceEntity,
    StateVariableEntity,
    StructEntity,
)

DEFAULT_TEMPLATE = "contract_documentation.md.j2"
_TEMPLATES_DIR = Path(__file__).with_name("templates")
_BLANK_RUNS = re.compile(r"\n{3,}")

logger = get_logger("rendering")


class TemplateMissingError(FileNotFoundError):
    """Raised when the documentation template cannot be loaded."""


class _PlaceholderUndefined(Undefined):
    """Renders missing template variables as the empty-cell placeholder."""

    def __str__(self) -> str:
        return EMPTY_CELL


def _finalize(value: Any) -> Any:
    return EMPTY_CELL if value is None else value


def _table_cell(value: Any) -> str:
    text = EMPTY_CELL if value is None or value == "" else str(value)
    return text.replace("|", "\\|").replace("\n", " ")


def _utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class DocumentRenderer:
    """Fills a Jinja2 template with the documentation view of one contract.

    ``render`` is a pure function of (template, metadata, entities): the
    view is built in a fixed section order and empty sections are dropped
    before the template sees them.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        self.template_path = Path(template_path) if template_path else None
        if self.template_path:
            directory, self.template_name = self.template_path.parent, self.template_path.name
        else:
            directory, self.template_name = _TEMPLATES_DIR, DEFAULT_TEMPLATE
        self._env = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            finalize=_finalize,
            undefined=_PlaceholderUndefined,
        )
        self._env.filters["cell"] = _table_cell
        self._env.globals["now"] = _utc_now

    def render(self, metadata: Metadata, entities: Sequence[SourceEntity]) -> str:
        try:
            template = self._env.get_template(self.template_name)
        except TemplateNotFound as exc:
            location = self.template_path or _TEMPLATES_DIR / self.template_name
            raise TemplateMissingError(f"Template not found: {location}") from exc
        context = build_context(metadata, entities)
        logger.debug(
            "Rendering %s with sections: %s",
            self.template_name,
            ", ".join(section["key"] for section in context["sections"]),
        )
        text = template.render(**context)
        return _BLANK_RUNS.sub("\n\n", text).strip() + "\n"


def build_context(metadata: Metadata, entities: Sequence[SourceEntity]) -> Dict[str, Any]:
    """Build the template variables; absent sections are ``[]`` or ``None``."""
    contract = primary_contract(entities)
    tags = contract.docs if contract else ContractTags()
    context: Dict[str, Any] = {
        "metadata": metadata,
        "title": tags.title or metadata.label or metadata.name,
        "overview": tags.notice or metadata.description or NO_DESCRIPTION,
        "usage": list(tags.dev.usage),
        "prerequisites": list(tags.dev.prerequisites),
        "notes": list(tags.dev.notes),
        "custom": [{"key": key, "value": value} for key, value in tags.custom.items()],
        "enums": [_enum_view(item) for item in _of_type(entities, EnumEntity)],
        "constants": [_constant_view(item) for item in _of_type(entities, ConstantEntity)],
        "structs": [_struct_view(item) for item in _of_type(entities, StructEntity)],
        "state_variables": [_variable_view(item) for item in _of_type(entities, StateVariableEntity)],
        "constructor": None,
        "functions": [_function_view(item) for item in _of_type(entities, FunctionEntity)],
    }
    constructors = _of_type(entities, ConstructorEntity)
    if constructors:
        context["constructor"] = _constructor_view(constructors[0])
    context["sections"] = [
        {"key": key, "title": SECTION_TITLES[key]}
        for key in DOCUMENT_SECTIONS
        if key == "overview" or context[key]
    ]
    return context


def _of_type(entities: Iterable[SourceEntity], kind: type) -> List[Any]:
    return [entity for entity in entities if isinstance(entity, kind)]


def _param_views(params: Sequence[FunctionParam]) -> List[Dict[str, Any]]:
    return [
        {"name": param.name, "type": param.signature_type, "description": param.description or EMPTY_CELL}
        for param in params
    ]


def _enum_view(entity: EnumEntity) -> Dict[str, Any]:
    documented = {value.name: value.description for value in entity.docs.values}
    names = list(entity.members) or list(documented)
    return {
        "name": entity.name,
        "notice": entity.docs.notice or NO_DESCRIPTION,
        "dev": list(entity.docs.dev),
        "members": [{"name": name, "description": documented.get(name) or EMPTY_CELL} for name in names],
    }


def _struct_view(entity: StructEntity) -> Dict[str, Any]:
    documented = {field.name: field for field in entity.docs.fields}
    fields = []
    for member in entity.members:
        doc = documented.get(member.name)
        fields.append(
            {
                "name": member.name,
                "type": member.type,
                "description": (doc.description if doc else None) or EMPTY_CELL,
            }
        )
    if not fields:
        fields = [
            {"name": doc.name, "type": doc.type or EMPTY_CELL, "description": doc.description or EMPTY_CELL}
            for doc in entity.docs.fields
        ]
    return {
        "name": entity.name,
        "notice": entity.docs.notice or NO_DESCRIPTION,
        "dev": list(entity.docs.dev),
        "fields": fields,
    }


def _constant_view(entity: ConstantEntity) -> Dict[str, Any]:
    return {
        "name": entity.name,
        "type": entity.type,
        "value": entity.value or EMPTY_CELL,
        "notice": entity.docs.notice or NO_DESCRIPTION,
        "dev": list(entity.docs.dev),
    }


def _variable_view(entity: StateVariableEntity) -> Dict[str, Any]:
    return {
        "name": entity.name,
        "type": entity.type,
        "visibility": entity.visibility,
        "attributes": list(entity.attributes),
        "notice": entity.docs.notice or NO_DESCRIPTION,
        "dev": list(entity.docs.dev),
    }


def _constructor_view(entity: ConstructorEntity) -> Dict[str, Any]:
    return {
        "notice": entity.docs.notice or NO_DESCRIPTION,
        "dev": list(entity.docs.dev),
        "params": _param_views(entity.params),
        "modifiers": list(entity.modifiers),
    }


def _function_view(entity: FunctionEntity) -> Dict[str, Any]:
    params = ", ".join(f"{param.signature_type} {param.name}" for param in entity.params)
    qualifiers = [item for item in (entity.visibility, entity.mutability) if item]
    signature = f"function {entity.name}({params})"
    if qualifiers:
        signature += " " + " ".join(qualifiers)
    if entity.returns:
        signature += f" returns ({', '.join(entity.returns)})"
    return {
        "name": entity.name,
        "signature": signature,
        "notice": entity.docs.notice or NO_DESCRIPTION,
        "dev": list(entity.docs.dev),
        "params": _param_views(entity.params),
        "returns": entity.docs.returns,
        "custom": [{"key": key, "value": value} for key, value in entity.docs.custom.items()],
    }


__all__ = ["DEFAULT_TEMPLATE", "DocumentRenderer", "TemplateMissingError", "build_context"]
