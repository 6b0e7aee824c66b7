"""Documentation rendering."""

from .renderer import DEFAULT_TEMPLATE, DocumentRenderer, TemplateMissingError, build_context

__all__ = ["DEFAULT_TEMPLATE", "DocumentRenderer", "TemplateMissingError", "build_context"]
