"""Shared pytest fixtures for PageTree tests.

This module provides fixtures for:
- A clean settings cache per test
- Page object trees shaped like a typical form
- Test data factories

Usage:
    @pytest.mark.unit
    def test_something(form_tree):
        assert form_tree["button"].id_path == "form:panel:[0/selector1]"
"""

from collections.abc import Generator

import pytest

from pagetree.config.settings import get_settings
from pagetree.core.page_object import PageObject
from tests.factories.page_object import PageObjectFactory, create_chain

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and PAGETREE_* overrides around every test."""
    monkeypatch.delenv("PAGETREE_PATH_SEPARATOR", raising=False)
    monkeypatch.delenv("PAGETREE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PAGETREE_DEBUG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Tree Fixtures
# =============================================================================


@pytest.fixture
def form_tree() -> dict[str, PageObject]:
    """form -> panel -> button: leaves created first, then attached top-down."""
    button = PageObject.create_at(0, "selector1", name="MenuPanel")
    panel = PageObject.create("panel", name="Panel")
    form = PageObject.create("form", name="Form")
    form.add_child(panel)
    panel.add_child(button)
    return {"form": form, "panel": panel, "button": button}


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def page_object_factory() -> type[PageObjectFactory]:
    """Provide page object factory for creating test nodes."""
    return PageObjectFactory


@pytest.fixture
def chain_builder():
    """Provide the chain helper: chain_builder("a", "b") returns the leaf."""
    return create_chain
