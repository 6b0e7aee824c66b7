"""Rule-based validation of starter metadata records."""

from __future__ import annotations

import re
from typing import Any, Callable, List, Optional
from urllib.parse import urlparse

from .base import ValidationResult, Validator
from ..config import VALIDATION_PROFILES, TaxonomyConfig
from ..models import Author, Metadata

NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")
_EMAIL = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_SEMVER = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)

MAX_LABEL = 100
MAX_DESCRIPTION = 300
MIN_STRICT_DESCRIPTION = 20
MAX_DETAILS = 1000
MAX_AUTHOR_NAME = 100


class MetadataValidator(Validator):
    """Checks a record against the catalog rules without short-circuiting.

    Rules run in a fixed order and every violation is reported, so one
    pass is enough to fix a draft. The record is never modified.
    """

    name = "metadata"

    def __init__(self, taxonomy: Optional[TaxonomyConfig] = None, profile: str = "default") -> None:
        if profile not in VALIDATION_PROFILES:
            raise ValueError(f"Unknown validation profile '{profile}'")
        self.taxonomy = taxonomy or TaxonomyConfig()
        self.profile = profile

    def validate(self, metadata: Metadata) -> ValidationResult:
        rules: List[Callable[[Metadata], List[str]]] = [
            self._check_name,
            self._check_label,
            self._check_description,
            self._check_category,
            self._check_chapter,
            self._check_concepts,
            self._check_authors,
            self._check_has_ui,
            self._check_details,
            self._check_version,
            self._check_tags,
        ]
        errors: List[str] = []
        for rule in rules:
            errors.extend(rule(metadata))
        return ValidationResult(errors=errors)

    def _check_name(self, metadata: Metadata) -> List[str]:
        name = metadata.name
        if not _is_filled(name):
            return ["name: must not be empty"]
        if not NAME_PATTERN.match(name):
            return [f"name: '{name}' may only contain lowercase letters, digits and hyphens"]
        return []

    def _check_label(self, metadata: Metadata) -> List[str]:
        label = metadata.label
        if not _is_filled(label):
            return ["label: must not be empty"]
        if len(label) > MAX_LABEL:
            return [f"label: must be at most {MAX_LABEL} characters (got {len(label)})"]
        return []

    def _check_description(self, metadata: Metadata) -> List[str]:
        description = metadata.description
        if not _is_filled(description):
            return ["description: must not be empty"]
        if len(description) > MAX_DESCRIPTION:
            return [f"description: must be at most {MAX_DESCRIPTION} characters (got {len(description)})"]
        if self.profile == "strict" and len(description) < MIN_STRICT_DESCRIPTION:
            return [
                f"description: must be at least {MIN_STRICT_DESCRIPTION} characters "
                f"(got {len(description)})"
            ]
        return []

    def _check_category(self, metadata: Metadata) -> List[str]:
        if metadata.category not in self.taxonomy.categories:
            allowed = ", ".join(self.taxonomy.categories)
            return [f"category: '{metadata.category}' is not one of: {allowed}"]
        return []

    def _check_chapter(self, metadata: Metadata) -> List[str]:
        if metadata.chapter not in self.taxonomy.chapters:
            allowed = ", ".join(self.taxonomy.chapters)
            return [f"chapter: '{metadata.chapter}' is not one of: {allowed}"]
        return []

    def _check_concepts(self, metadata: Metadata) -> List[str]:
        concepts = metadata.concepts
        if concepts is None:
            return []
        if not isinstance(concepts, list):
            return ["concepts: must be a list"]
        if not all(isinstance(concept, str) for concept in concepts):
            return ["concepts: entries must be strings"]
        vocabulary = self.taxonomy.concepts
        return [f"concepts: unknown concept '{concept}'" for concept in concepts if concept not in vocabulary]

    def _check_authors(self, metadata: Metadata) -> List[str]:
        authors = metadata.authors
        if not isinstance(authors, list) or not authors:
            return ["authors: at least one author is required"]
        errors: List[str] = []
        for index, author in enumerate(authors):
            prefix = f"authors[{index}]"
            if not isinstance(author, Author):
                errors.append(f"{prefix}: must be an object with a name")
                continue
            if not _is_filled(author.name):
                errors.append(f"{prefix}.name: must not be empty")
            elif len(author.name) > MAX_AUTHOR_NAME:
                errors.append(f"{prefix}.name: must be at most {MAX_AUTHOR_NAME} characters")
            if author.email and not _EMAIL.match(author.email):
                errors.append(f"{prefix}.email: '{author.email}' is not a valid email address")
            if author.url and not _is_url(author.url):
                errors.append(f"{prefix}.url: '{author.url}' is not a valid URL")
        return errors

    def _check_has_ui(self, metadata: Metadata) -> List[str]:
        if not isinstance(metadata.has_ui, bool):
            return [f"has_ui: must be a boolean (got {type(metadata.has_ui).__name__})"]
        return []

    def _check_details(self, metadata: Metadata) -> List[str]:
        details = metadata.details
        if details is None:
            return []
        if not isinstance(details, str):
            return ["details: must be a string"]
        if len(details) > MAX_DETAILS:
            return [f"details: must be at most {MAX_DETAILS} characters (got {len(details)})"]
        return []

    def _check_version(self, metadata: Metadata) -> List[str]:
        version = metadata.version
        if version is None:
            return []
        if not isinstance(version, str) or not _SEMVER.match(version):
            return [f"version: '{version}' is not a semantic version (e.g. 1.0.0)"]
        return []

    def _check_tags(self, metadata: Metadata) -> List[str]:
        tags = metadata.tags
        if tags is None:
            return []
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            return ["tags: must be a list of strings"]
        return []


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


__all__ = ["MetadataValidator", "NAME_PATTERN"]
