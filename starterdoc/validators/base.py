"""Core validation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from ..models import Metadata


class ValidationError(RuntimeError):
    """Raised when a metadata record violates one or more rules."""

    def __init__(self, message: str, errors: Sequence[str]) -> None:
        super().__init__(message)
        self.errors = list(errors)


@dataclass
class ValidationResult:
    """Every rule violation found in one pass, in rule order."""

    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError(f"Metadata invalid ({len(self.errors)} error(s))", self.errors)


class Validator(Protocol):
    """Protocol implemented by metadata validators."""

    name: str

    def validate(self, metadata: Metadata) -> ValidationResult:
        """Run every rule and return the collected violations."""
