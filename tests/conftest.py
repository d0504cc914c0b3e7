"""Pytest configuration and fixtures."""

import os
import pytest

from page_renderer.core import create_container, get_settings
from page_renderer.core.config import Settings
from page_renderer.renderer import ActionBridge, Renderer, StyleResolver, StyleSheet, TypeRegistry
from page_renderer.handlers import PageHandler


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['PAGE_LOG_LEVEL'] = 'DEBUG'
    os.environ['PAGE_MAX_DEPTH'] = '16'
    os.environ.pop('PAGE_THEME_PATH', None)


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def navigation():
    """Recording stub for the host navigation capability."""

    class Navigation:
        def __init__(self):
            self.calls = []

        def __call__(self, target):
            self.calls.append(target)

    return Navigation()


@pytest.fixture
def di_container(navigation):
    """Dependency injection container for testing."""
    return create_container(on_action=navigation, settings=Settings(max_depth=16))


# ============================================================================
# Renderer Fixtures
# ============================================================================

@pytest.fixture
def bridge(navigation):
    """Action bridge wired to the recording navigation stub."""
    return ActionBridge(navigation)


@pytest.fixture
def renderer(bridge, settings):
    """Renderer with the default theme and registry."""
    return Renderer(
        styles=StyleResolver(StyleSheet.default()),
        registry=TypeRegistry(),
        bridge=bridge,
        max_depth=settings.max_depth,
    )


@pytest.fixture
def page_handler(renderer, settings):
    """Page handler around the test renderer."""
    return PageHandler(renderer, settings)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_descriptor():
    """Sample page descriptor."""
    return {
        "id": "home",
        "components": [
            {"type": "text", "content": "Welcome", "style": {"fontSize": 24}},
            {
                "type": "container",
                "props": {"testID": "hero"},
                "children": [
                    {"type": "image", "source": "https://example.com/hero.png"},
                    {
                        "type": "button",
                        "text": "Start",
                        "action": "navigate",
                        "target": "assessment",
                    },
                ],
            },
            {
                "type": "scrollview",
                "children": [
                    {"type": "text", "content": "First"},
                    {"type": "text", "content": "Second"},
                ],
            },
        ],
    }


@pytest.fixture
def sample_descriptor_json():
    """Sample page descriptor as JSON text."""
    return """{
  "id": "profile",
  "components": [
    {"type": "text", "content": "Profile"},
    {"type": "button", "text": "Back", "action": "navigate", "target": "home"}
  ]
}"""
