"""Shared pytest fixtures for signal-forge tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app
from services.graphic_history import GraphicHistory, graphic_history
from services.svg_templates import HudTemplateBuilder

# ============================================================================
# Rendering Fixtures
# ============================================================================


@pytest.fixture
def builder() -> HudTemplateBuilder:
    """Template builder with the default 48-character caption."""
    return HudTemplateBuilder(preview_chars=48)


@pytest.fixture
def accent() -> str:
    return "#6ef5c3"


# ============================================================================
# History Fixtures
# ============================================================================


@pytest.fixture
def history() -> GraphicHistory:
    """Fresh, small history store."""
    return GraphicHistory(ttl_seconds=60, max_entries=3)


@pytest.fixture(autouse=True)
def _reset_shared_history():
    """The app-level history is a singleton; keep tests isolated."""
    graphic_history._sessions.clear()
    yield
    graphic_history._sessions.clear()


# ============================================================================
# HTTP Fixtures
# ============================================================================


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
