"""Pytest configuration and fixtures for artifact-layout tests."""
from __future__ import annotations

import pytest

from artifact_layout.layout import DefaultLayout, LegacyLayout


@pytest.fixture(autouse=True)
def clean_layout_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's ARTIFACT_LAYOUT* settings out of the tests."""
    for name in ("ARTIFACT_LAYOUT", "ARTIFACT_LAYOUT_EXTRA_TYPES", "ARTIFACT_LAYOUT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def default_layout() -> DefaultLayout:
    return DefaultLayout()


@pytest.fixture
def legacy_layout() -> LegacyLayout:
    return LegacyLayout()
