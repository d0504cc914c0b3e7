"""Tests for the page handler and DI container."""

import json
import pytest

from page_renderer.core.config import Settings
from page_renderer.handlers import PageHandler, PageResponse
from page_renderer.renderer import ActionBridge, Renderer, StyleSheet, TypeRegistry


# ============================================================================
# PageHandler Tests
# ============================================================================

@pytest.mark.unit
def test_page_handler_initialization(renderer, settings):
    """Test page handler initialization."""
    handler = PageHandler(renderer, settings)
    assert handler.renderer is renderer
    assert handler.settings is settings


@pytest.mark.unit
def test_page_handler_render_success(page_handler, sample_descriptor_json):
    """Test successful render from JSON text."""
    response = page_handler.render(sample_descriptor_json)

    assert isinstance(response, PageResponse)
    assert response.success is True
    assert response.error == ""
    assert response.page_id == "profile"
    assert response.duration_ms >= 0

    tree = json.loads(response.tree_json)
    assert [c["key"] for c in tree["children"]] == ["text_0", "button_1"]


@pytest.mark.unit
def test_page_handler_render_null(page_handler):
    """JSON null renders the empty-configuration placeholder."""
    response = page_handler.render("null")

    assert response.success is True
    assert json.loads(response.tree_json)["placeholder"] == "configuration_missing"


@pytest.mark.unit
def test_page_handler_render_wrong_shape(page_handler):
    """Scalar descriptors fail with a validation error."""
    response = page_handler.render('"just a string"')

    assert response.success is False
    assert "Validation" in response.error
    assert response.tree_json == ""


@pytest.mark.unit
def test_page_handler_render_too_large(renderer):
    """Oversized descriptors fail with a validation error."""
    handler = PageHandler(renderer, Settings(max_descriptor_bytes=32))

    response = handler.render(json.dumps({"components": [{"type": "text", "content": "x" * 100}]}))

    assert response.success is False
    assert "exceeds" in response.error


@pytest.mark.unit
def test_page_handler_render_descriptor(page_handler, sample_descriptor):
    """Decoded descriptors render directly."""
    response = page_handler.render_descriptor(sample_descriptor)

    assert response.success is True
    assert response.page_id == "home"


@pytest.mark.unit
def test_page_handler_render_descriptor_wrong_shape(page_handler):
    """Wrong-shape decoded descriptors fail without raising."""
    response = page_handler.render_descriptor(3)

    assert response.success is False
    assert response.error.startswith("Validation error:")
    assert "int" in response.error
    assert response.tree_json == ""


@pytest.mark.unit
def test_page_handler_render_tree(page_handler, sample_descriptor, navigation):
    """Live trees keep bound actions."""
    tree = page_handler.render_tree(sample_descriptor)

    tree.find("button_1.1").press()

    assert navigation.calls == ["assessment"]


# ============================================================================
# Container Tests
# ============================================================================

@pytest.mark.unit
def test_container_provides_renderer(di_container):
    """Container wires the renderer graph."""
    renderer = di_container.get(Renderer)

    assert isinstance(renderer.registry, TypeRegistry)
    assert isinstance(renderer.bridge, ActionBridge)
    assert renderer.max_depth == 16
    assert renderer is di_container.get(Renderer)


@pytest.mark.unit
def test_container_navigation(di_container, navigation):
    """Injected navigation capability reaches rendered buttons."""
    handler = di_container.get(PageHandler)
    tree = handler.render_tree(
        {"components": [{"type": "button", "text": "Diary", "action": "navigate", "target": "diary"}]}
    )

    tree.children[0].press()

    assert navigation.calls == ["diary"]


@pytest.mark.unit
def test_container_theme_path(tmp_path):
    """A configured theme file is loaded into the style sheet."""
    from page_renderer.core import create_container

    theme = tmp_path / "theme.json"
    theme.write_text(json.dumps({"text": {"color": "#1C1B1F"}}), encoding="utf-8")

    container = create_container(settings=Settings(theme_path=str(theme)))
    sheet = container.get(StyleSheet)
    page = container.get(Renderer).render_page({"components": [{"type": "text", "content": "Hi"}]})

    assert sheet.base("text")["color"] == "#1C1B1F"
    assert page.children[0].style["color"] == "#1C1B1F"
    assert page.children[0].style["fontSize"] == 16
