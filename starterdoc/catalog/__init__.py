"""Starter catalog publishing."""

from .publisher import CatalogPublisher, Copier, PublishCollisionError

__all__ = ["CatalogPublisher", "Copier", "PublishCollisionError"]
