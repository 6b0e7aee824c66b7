"""Metadata synthesis from contract sources."""

from .synthesizer import (
    SynthesisDefaults,
    SynthesisError,
    primary_contract,
    synthesize_metadata,
    to_starter_name,
)

__all__ = [
    "SynthesisDefaults",
    "SynthesisError",
    "primary_contract",
    "synthesize_metadata",
    "to_starter_name",
]
