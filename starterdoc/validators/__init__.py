"""Validation package for starter metadata."""

from .base import ValidationError, ValidationResult, Validator
from .metadata import MetadataValidator

__all__ = [
    "MetadataValidator",
    "ValidationError",
    "ValidationResult",
    "Validator",
]
