"""
Tree Walker
Renders a page descriptor into a tree of UI elements in a single pass.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ..core import get_logger
from ..core.validate import ErrorKind, MAX_DEPTH, check_descriptor
from .actions import ActionBridge
from .models import Element, Primitive
from .nodes import MalformedNode, normalize
from .registry import TypeRegistry
from .styles import StyleResolver, StyleSheet, merge_style

logger = get_logger(__name__)

PAGE_KEY = "page"
CONFIGURATION_MISSING_TEXT = "Page configuration is empty"
CONFIGURATION_EMPTY_TEXT = "Nothing to display"
DEPTH_EXCEEDED_TEXT = "Component nesting too deep"


def identity_key(component_type: str, path: Sequence[int]) -> str:
    """Identity of a rendered node: its type and position path from the root."""
    return f"{component_type}_{'.'.join(str(i) for i in path)}"


class RenderPass:
    """
    State of a single render call.

    Created per call and discarded afterwards, so concurrent calls on one
    Renderer share nothing mutable.
    """

    def __init__(self, renderer: "Renderer") -> None:
        self.renderer = renderer
        self.sheet: StyleSheet = renderer.styles.sheet
        self.bridge: ActionBridge = renderer.bridge
        self.nodes = 0
        self.placeholders: dict[ErrorKind, int] = {}

    def flag(self, kind: ErrorKind, key: str, **details: Any) -> ErrorKind:
        """Record a degraded render for this pass."""
        self.placeholders[kind] = self.placeholders.get(kind, 0) + 1
        logger.debug("degraded_render", kind=kind.value, key=key, **details)
        return kind

    def visit(self, raw: Any, path: tuple[int, ...]) -> Element:
        """Render one raw node at the given position path."""
        self.nodes += 1
        registry = self.renderer.registry
        node = normalize(raw, registry.is_container)
        key = identity_key(node.type, path)

        if isinstance(node, MalformedNode):
            return self._notice(
                key,
                f"Invalid component ({node.value_type})",
                self.flag(ErrorKind.MALFORMED_NODE, key, value_type=node.value_type),
            )

        if len(path) > self.renderer.max_depth:
            logger.warning("depth_exceeded", key=key, max_depth=self.renderer.max_depth)
            return self._notice(
                key, DEPTH_EXCEEDED_TEXT, self.flag(ErrorKind.DEPTH_EXCEEDED, key)
            )

        # Tags the registry does not know get no base style, even if the sheet names them
        if node.type in registry:
            style = self.renderer.styles.resolve(node.type, node.style)
        else:
            style = merge_style(None, node.style)
        strategy = registry.strategy_for(node.type)
        return strategy.render(node, key, style, path, self)

    def render_children(self, children: Sequence[Any], path: tuple[int, ...]) -> list[Element]:
        """Render children in their original order under the parent path."""
        return [self.visit(child, path + (index,)) for index, child in enumerate(children)]

    def _notice(self, key: str, message: str, kind: ErrorKind) -> Element:
        return Element(
            primitive=Primitive.VIEW,
            key=key,
            children=[
                Element(
                    primitive=Primitive.TEXT,
                    key=f"{key}/label",
                    style=self.sheet.base("fallbackText"),
                    text=message,
                )
            ],
            placeholder=kind,
        )


class Renderer:
    """
    Declarative page renderer.

    Holds only immutable collaborators (style resolver, type registry and
    action bridge); every render call is a fresh full rebuild.
    """

    def __init__(
        self,
        styles: StyleResolver | None = None,
        registry: TypeRegistry | None = None,
        bridge: ActionBridge | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        if max_depth <= 0:
            raise ValueError("max_depth must be positive")

        self.styles = styles or StyleResolver()
        self.registry = registry or TypeRegistry()
        self.bridge = bridge or ActionBridge()
        self.max_depth = max_depth

    def render_page(self, descriptor: Any) -> Element:
        """
        Render a page descriptor.

        Nesting is followed up to max_depth levels (top-level components are
        level 1); a deeper node is replaced by a depth placeholder.

        Args:
            descriptor: None, a mapping with a `components` list, or a bare
                list of components

        Returns:
            Root element of the rendered page

        Raises:
            DescriptorError: If the descriptor is not None, a mapping or a list
        """
        check_descriptor(descriptor)
        ctx = RenderPass(self)

        if descriptor is None:
            root = self._page_notice(
                ctx, "errorContainer", "errorText", CONFIGURATION_MISSING_TEXT,
                ErrorKind.CONFIGURATION_MISSING,
            )
            logger.info("render_placeholder", kind=ErrorKind.CONFIGURATION_MISSING.value)
            return root

        components = descriptor.get("components") if isinstance(descriptor, Mapping) else descriptor
        if components is not None and not isinstance(components, list):
            logger.warning("invalid_components", type=type(components).__name__)
            components = None

        if not components:
            root = self._page_notice(
                ctx, "emptyContainer", "emptyText", CONFIGURATION_EMPTY_TEXT,
                ErrorKind.CONFIGURATION_EMPTY,
            )
            logger.info("render_placeholder", kind=ErrorKind.CONFIGURATION_EMPTY.value)
            return root

        root = Element(
            primitive=Primitive.VIEW,
            key=PAGE_KEY,
            style=self.styles.sheet.base("page"),
            children=ctx.render_children(components, ()),
        )

        logger.info(
            "render_complete",
            nodes=ctx.nodes,
            placeholders=sum(ctx.placeholders.values()),
        )
        return root

    def render(self, node: Any, path: Sequence[int] = (0,)) -> Element:
        """Render a single component node at the given position path."""
        return RenderPass(self).visit(node, tuple(path))

    def _page_notice(
        self, ctx: RenderPass, container_style: str, text_style: str, message: str, kind: ErrorKind
    ) -> Element:
        return Element(
            primitive=Primitive.VIEW,
            key=PAGE_KEY,
            style=self.styles.sheet.base(container_style),
            children=[
                Element(
                    primitive=Primitive.TEXT,
                    key=f"{PAGE_KEY}/message",
                    style=self.styles.sheet.base(text_style),
                    text=message,
                )
            ],
            placeholder=ctx.flag(kind, PAGE_KEY),
        )


def render_page(descriptor: Any, on_action=None) -> Element:
    """
    Convenience function to render a descriptor with the default theme

    Args:
        descriptor: Page descriptor
        on_action: Navigation capability called with the target route

    Returns:
        Root element
    """
    return Renderer(bridge=ActionBridge(on_action)).render_page(descriptor)
