"""Shared pytest fixtures for playsketch tests."""

import pytest

from playsketch.config import FieldConfig, set_config
from playsketch.core.point import Point


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from the built-in field layout, not the environment."""
    monkeypatch.delenv("PLAYSKETCH_CENTER_X", raising=False)
    monkeypatch.delenv("PLAYSKETCH_LINE_OF_SCRIMMAGE", raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def config() -> FieldConfig:
    """Standard diagram: center at x=350, line of scrimmage at y=200."""
    return FieldConfig(center_x=350.0, line_of_scrimmage=200.0)


# =============================================================================
# Path Helpers
# =============================================================================


def make_path(*coords) -> list:
    """Build a path from (x, y) pairs."""
    return [Point(float(x), float(y)) for x, y in coords]


@pytest.fixture
def pts():
    """Expose make_path to tests as a fixture."""
    return make_path
