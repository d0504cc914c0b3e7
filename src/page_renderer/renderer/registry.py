"""
Type Registry
Maps component type tags to render strategies, with one fallback for unknown tags.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..core import get_logger
from ..core.validate import ErrorKind
from .models import Action, Element, Primitive
from .nodes import ContainerNode, LeafNode
from .styles import merge_style

if TYPE_CHECKING:
    from .walker import RenderPass

logger = get_logger(__name__)


class RenderStrategy(Protocol):
    """Renders one normalized node into an element."""

    container: bool

    def render(
        self, node: Any, key: str, style: dict[str, Any], path: tuple[int, ...], ctx: "RenderPass"
    ) -> Element:
        ...


class ContainerStrategy:
    """Container-like types: nest rendered children in order."""

    container = True

    def __init__(self, primitive: str) -> None:
        self.primitive = primitive

    def render(self, node: ContainerNode, key, style, path, ctx) -> Element:
        return Element(
            primitive=self.primitive,
            key=key,
            style=style,
            props=dict(node.props),
            children=ctx.render_children(node.children, path),
        )


class TextStrategy:
    """Text leaf: renders `content`."""

    container = False

    def render(self, node: LeafNode, key, style, path, ctx) -> Element:
        content = node.text_field("content")
        if content is None:
            return Element(
                primitive=Primitive.TEXT,
                key=key,
                style=style,
                props=dict(node.props),
                text="",
                placeholder=ctx.flag(ErrorKind.MALFORMED_LEAF_PAYLOAD, key, field="content"),
            )

        return Element(
            primitive=Primitive.TEXT, key=key, style=style, props=dict(node.props), text=content
        )


class ImageStrategy:
    """Image leaf: renders `source` as a URI."""

    container = False

    def render(self, node: LeafNode, key, style, path, ctx) -> Element:
        source = node.text_field("source")
        if not source:
            return Element(
                primitive=Primitive.VIEW,
                key=key,
                style=merge_style(style, ctx.sheet.base("imagePlaceholder")),
                props=dict(node.props),
                placeholder=ctx.flag(ErrorKind.MALFORMED_LEAF_PAYLOAD, key, field="source"),
            )

        return Element(
            primitive=Primitive.IMAGE, key=key, style=style, props=dict(node.props), source=source
        )


class ButtonStrategy:
    """Button leaf: labelled touchable bound to the action bridge."""

    container = False

    def render(self, node: LeafNode, key, style, path, ctx) -> Element:
        label = node.text_field("text")
        kind = node.get("action")
        target = node.get("target")
        kind = kind if isinstance(kind, str) else None
        target = target if isinstance(target, str) else None

        label_element = Element(
            primitive=Primitive.TEXT,
            key=f"{key}/label",
            style=ctx.sheet.base("buttonText"),
            text=label if label is not None else "",
            placeholder=(
                ctx.flag(ErrorKind.MALFORMED_LEAF_PAYLOAD, key, field="text") if label is None else None
            ),
        )

        action = None
        on_press = None
        if kind is not None or target is not None:
            action = Action(kind=kind, target=target)
            on_press = ctx.bridge.bind(kind, target)

        return Element(
            primitive=Primitive.TOUCHABLE,
            key=key,
            style=style,
            props=dict(node.props),
            children=[label_element],
            action=action,
            on_press=on_press,
        )


class FallbackStrategy:
    """Unknown types: neutral placeholder showing the raw tag; reads no payload."""

    container = False

    def render(self, node: Any, key, style, path, ctx) -> Element:
        return Element(
            primitive=Primitive.VIEW,
            key=key,
            style=style,
            children=[
                Element(
                    primitive=Primitive.TEXT,
                    key=f"{key}/label",
                    style=ctx.sheet.base("fallbackText"),
                    text=node.type,
                )
            ],
            placeholder=ctx.flag(ErrorKind.UNKNOWN_COMPONENT_TYPE, key, type=node.type),
        )


def builtin_strategies() -> dict[str, RenderStrategy]:
    """Strategies for the built-in component types."""
    return {
        "container": ContainerStrategy(Primitive.VIEW),
        "scrollview": ContainerStrategy(Primitive.SCROLL_VIEW),
        "text": TextStrategy(),
        "image": ImageStrategy(),
        "button": ButtonStrategy(),
    }


class TypeRegistry:
    """
    Registry of render strategies by type tag.

    Lookup is total: any tag without a registered strategy resolves to the
    fallback strategy.
    """

    def __init__(
        self,
        strategies: Mapping[str, RenderStrategy] | None = None,
        fallback: RenderStrategy | None = None,
    ) -> None:
        self._strategies: dict[str, RenderStrategy] = dict(
            builtin_strategies() if strategies is None else strategies
        )
        self.fallback = fallback or FallbackStrategy()

    def register(self, tag: str, strategy: RenderStrategy, replace: bool = False) -> None:
        """
        Register a strategy for a type tag.

        Raises:
            ValueError: If the tag is already registered and replace is False
        """
        if tag in self._strategies and not replace:
            raise ValueError(f"Component type already registered: {tag}")

        self._strategies[tag] = strategy
        logger.info("strategy_registered", tag=tag, container=strategy.container)

    def strategy_for(self, tag: str) -> RenderStrategy:
        return self._strategies.get(tag, self.fallback)

    def is_container(self, tag: str) -> bool:
        return self.strategy_for(tag).container

    def tags(self) -> list[str]:
        return list(self._strategies)

    def __contains__(self, tag: object) -> bool:
        return tag in self._strategies
