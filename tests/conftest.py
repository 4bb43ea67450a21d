"""Pytest configuration and shared fixtures for LoLdle bot tests.

Imports resolve through ``pythonpath = ["."]`` in pyproject.toml, so the
``src`` namespace package is importable without an editable install.
"""

import pytest

from src.config.settings import Settings
from tests.factories import make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()
