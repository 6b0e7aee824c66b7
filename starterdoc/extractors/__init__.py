"""Declaration extractors and discovery utilities.

``extract_entities`` is the single entry point downstream stages use; the
regex-based extractors behind it can be replaced per kind through the
``starterdoc.extractors`` entry-point group.
"""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from .base import Extractor, SourceText
from .capabilities import detect_concepts
from .contracts import ContractExtractor
from .definitions import EnumExtractor, StructExtractor
from .functions import ConstructorExtractor, FunctionExtractor
from .variables import ConstantExtractor, StateVariableExtractor
from ..logging import get_logger
from ..models import SourceEntity

_ENTRY_POINT_GROUP = "starterdoc.extractors"

_BUILTIN_FACTORIES: dict[str, Callable[[], Extractor]] = {
    "contract": ContractExtractor,
    "function": FunctionExtractor,
    "stateVariable": StateVariableExtractor,
    "struct": StructExtractor,
    "enum": EnumExtractor,
    "constant": ConstantExtractor,
    "constructor": ConstructorExtractor,
}

logger = get_logger("extractors")


def discover_extractors(enabled: Sequence[str] | None = None) -> List[Extractor]:
    """Return one extractor per kind; entry points override built-ins of the same name."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name for name in enabled}
        unknown = enabled_set - set(_BUILTIN_FACTORIES)
        if unknown:
            raise ValueError(f"Unknown extractors requested: {', '.join(sorted(unknown))}")

    factories: dict[str, Callable[[], Extractor]] = dict(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        if entry.name not in factories:
            logger.debug("Ignoring extractor entry point for unknown kind '%s'", entry.name)
            continue
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load extractor entry point '{entry.name}': {exc}") from exc

        def _factory(obj: object = loaded) -> Extractor:
            return _coerce_extractor(obj)

        factories[entry.name] = _factory

    extractors: List[Extractor] = []
    for name, factory in factories.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        instance = factory()
        if not isinstance(instance, Extractor):
            raise TypeError(f"Extractor factory for '{name}' did not return an Extractor instance")
        extractors.append(instance)
    return extractors


def extract_entities(
    source_text: str,
    extractors: Iterable[Extractor] | None = None,
) -> List[SourceEntity]:
    """Return every declaration found in ``source_text``, ordered by position.

    Never raises: an extractor that fails is logged and contributes nothing.
    """
    source = SourceText(source_text or "")
    selected = list(extractors) if extractors is not None else discover_extractors()
    entities: List[SourceEntity] = []
    for extractor in selected:
        if not extractor.supports(source):
            continue
        try:
            found = list(extractor.extract(source))
        except Exception as exc:  # pragma: no cover - defensive guard
            logger.warning("%s failed: %s", extractor.__class__.__name__, exc)
            continue
        entities.extend(found)
    entities.sort(key=lambda entity: entity.offset)
    return entities


def _coerce_extractor(obj: object) -> Extractor:
    if isinstance(obj, Extractor):
        return obj
    if isinstance(obj, type) and issubclass(obj, Extractor):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Extractor):
            return instance
    raise TypeError("Extractor entry point must be an Extractor subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    try:
        entry_points = metadata.entry_points()
    except Exception:  # pragma: no cover - defensive guard
        return []
    return entry_points.select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "Extractor",
    "SourceText",
    "detect_concepts",
    "discover_extractors",
    "extract_entities",
]
