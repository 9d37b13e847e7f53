from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.hub_builder import HubBuilder


@pytest.fixture
def hub(tmp_path: Path) -> HubBuilder:
    """Provide a hub root with a base template, rooted at the pytest tmp_path."""
    return HubBuilder(tmp_path).with_base_template()
