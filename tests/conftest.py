from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.draft_builder import DraftBuilder


@pytest.fixture
def draft_builder(tmp_path: Path) -> DraftBuilder:
    """Provide a reusable draft builder rooted at the pytest tmp_path."""
    return DraftBuilder(tmp_path)
