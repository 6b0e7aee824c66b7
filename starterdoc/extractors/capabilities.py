"""Detect capability concepts from the library calls a contract makes."""

from __future__ import annotations

import re
from typing import List, Mapping, Sequence, Union

from .base import SourceText


def detect_concepts(
    source: Union[str, SourceText],
    vocabulary: Mapping[str, Sequence[str]],
) -> List[str]:
    """Return concept names whose operations appear in code, in vocabulary order.

    Comments and string literals are ignored, and an operation only matches
    as a whole identifier (``FHE.add`` does not match ``FHE.addMod``).
    """
    view = source if isinstance(source, SourceText) else SourceText(source)
    concepts: List[str] = []
    for concept, operations in vocabulary.items():
        for operation in operations:
            if re.search(r"(?<![\w.])" + re.escape(operation) + r"(?!\w)", view.masked):
                concepts.append(concept)
                break
    return concepts


__all__ = ["detect_concepts"]
