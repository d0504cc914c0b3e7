"""Dependency Injection Container."""

from collections.abc import Callable, Mapping
from typing import Any

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from ..renderer.actions import ActionBridge
from ..renderer.registry import TypeRegistry
from ..renderer.styles import StyleResolver, StyleSheet, load_style_sheet
from ..renderer.walker import Renderer
from ..handlers.page import PageHandler


class RendererModule(Module):
    """Renderer dependencies."""

    def __init__(
        self,
        on_action: Callable[[str], Any] | None = None,
        handlers: Mapping[str, Callable[[str], Any]] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.on_action = on_action
        self.handlers = handlers
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide explicit settings or the environment ones."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_style_sheet(self, settings: Settings) -> StyleSheet:
        """Provide the theme: a JSON style sheet if configured, else the default."""
        if settings.theme_path:
            return load_style_sheet(settings.theme_path)
        return StyleSheet.default()

    @singleton
    @provider
    def provide_style_resolver(self, sheet: StyleSheet) -> StyleResolver:
        return StyleResolver(sheet)

    @singleton
    @provider
    def provide_type_registry(self) -> TypeRegistry:
        """Provide registry with the built-in component types."""
        return TypeRegistry()

    @singleton
    @provider
    def provide_action_bridge(self) -> ActionBridge:
        """Provide bridge wired to the host navigation capability."""
        return ActionBridge(self.on_action, self.handlers)

    @singleton
    @provider
    def provide_renderer(
        self, styles: StyleResolver, registry: TypeRegistry, bridge: ActionBridge, settings: Settings
    ) -> Renderer:
        """Provide renderer with all dependencies."""
        return Renderer(styles=styles, registry=registry, bridge=bridge, max_depth=settings.max_depth)

    @singleton
    @provider
    def provide_page_handler(self, renderer: Renderer, settings: Settings) -> PageHandler:
        return PageHandler(renderer, settings)


def create_container(
    on_action: Callable[[str], Any] | None = None,
    handlers: Mapping[str, Callable[[str], Any]] | None = None,
    settings: Settings | None = None,
) -> Injector:
    """Create configured injector."""
    return Injector([RendererModule(on_action, handlers, settings)])
