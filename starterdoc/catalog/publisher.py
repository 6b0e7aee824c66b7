"""Catalog publishing utilities."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Optional

from ..constants import CONTRACTS_DIRNAME, DOCUMENT_FILENAME, TESTS_DIRNAME
from ..logging import get_logger

Copier = Callable[[Path, Path], object]

logger = get_logger("catalog")


class PublishCollisionError(FileExistsError):
    """Raised when a catalog entry already exists and replacing it was not requested."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"Catalog entry already exists: {target} (use --force to replace it)")
        self.target = target


class CatalogPublisher:
    """Copies a packaged starter into the shared catalog.

    ``copier`` receives ``(source_dir, target_dir)`` and defaults to
    :func:`shutil.copytree`; tests swap it out to observe or fail copies.
    """

    def __init__(
        self,
        catalog_dir: Path,
        *,
        docs_dir: Optional[Path] = None,
        copier: Copier | None = None,
    ) -> None:
        self.catalog_dir = Path(catalog_dir)
        self.docs_dir = Path(docs_dir) if docs_dir else None
        self._copier = copier or self._default_copier

    def target_for(self, name: str) -> Path:
        return self.catalog_dir / name

    def check_available(self, name: str, *, force: bool = False) -> Path:
        """Return the entry path, raising when it is taken and ``force`` is off."""
        target = self.target_for(name)
        if target.exists() and not force:
            raise PublishCollisionError(target)
        return target

    def publish(
        self,
        dist_dir: Path,
        name: str,
        *,
        force: bool = False,
    ) -> Path:
        """Install ``dist_dir`` as ``<catalog>/<name>``; an existing entry is fully replaced under ``force``."""
        target = self.check_available(name, force=force)
        if target.exists():
            logger.info("Replacing existing catalog entry %s", target)
            shutil.rmtree(target)
        self.catalog_dir.mkdir(parents=True, exist_ok=True)
        self._copier(Path(dist_dir), target)
        for required in (CONTRACTS_DIRNAME, TESTS_DIRNAME):
            (target / required).mkdir(exist_ok=True)
        logger.debug("Copied %s -> %s", dist_dir, target)
        return target

    def mirror_document(self, entry_dir: Path, name: str, *, document_file: str = DOCUMENT_FILENAME) -> Optional[Path]:
        """Copy the entry's document to ``<docs_dir>/<name>.md`` when a docs directory is configured."""
        if self.docs_dir is None:
            return None
        document = Path(entry_dir) / document_file
        if not document.exists():
            logger.warning("No %s in %s; skipping docs mirror", document_file, entry_dir)
            return None
        self.docs_dir.mkdir(parents=True, exist_ok=True)
        mirror = self.docs_dir / f"{name}.md"
        shutil.copyfile(document, mirror)
        logger.debug("Mirrored %s -> %s", document, mirror)
        return mirror

    @staticmethod
    def _default_copier(source: Path, target: Path) -> object:
        return shutil.copytree(source, target)


__all__ = ["CatalogPublisher", "Copier", "PublishCollisionError"]
