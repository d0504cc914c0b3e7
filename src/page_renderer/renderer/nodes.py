"""
Component Node Normalization
Turns raw descriptor nodes into tagged variants, once, on first visit.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

UNKNOWN_TYPE = "unknown"
MALFORMED_TYPE = "malformed"


@dataclass(frozen=True)
class LeafNode:
    """Node rendered from its own payload fields."""

    type: str
    props: Mapping[str, Any] = field(default_factory=dict)
    style: Mapping[str, Any] = field(default_factory=dict)
    payload: Mapping[str, Any] = field(default_factory=dict)

    def get(self, name: str) -> Any:
        return self.payload.get(name)

    def text_field(self, name: str) -> str | None:
        """Payload field as text; numbers are stringified, anything else is None."""
        value = self.payload.get(name)
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None


@dataclass(frozen=True)
class ContainerNode:
    """Node whose output nests its rendered children."""

    type: str
    props: Mapping[str, Any] = field(default_factory=dict)
    style: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Any, ...] = ()


@dataclass(frozen=True)
class MalformedNode:
    """Node that is neither an object nor a string."""

    value_type: str
    type: str = MALFORMED_TYPE


Node = LeafNode | ContainerNode | MalformedNode


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def normalize(raw: Any, is_container: Callable[[str], bool]) -> Node:
    """
    Validate a raw descriptor node into a tagged variant.

    Args:
        raw: Raw node (mapping, string or anything else)
        is_container: Whether a type tag renders children

    Returns:
        LeafNode, ContainerNode or MalformedNode

    Rules:
    - Bare strings become text nodes: "Hello" -> {type: "text", content: "Hello"}
    - Missing or non-string type -> "unknown"
    - Non-mapping style/props and non-list children are treated as empty
    """
    if isinstance(raw, str):
        return LeafNode(type="text", payload={"content": raw})

    if not isinstance(raw, Mapping):
        return MalformedNode(value_type=type(raw).__name__)

    node_type = raw.get("type")
    if not isinstance(node_type, str) or not node_type:
        node_type = UNKNOWN_TYPE

    props = _mapping(raw.get("props"))
    style = _mapping(raw.get("style"))

    if is_container(node_type):
        children = raw.get("children")
        return ContainerNode(
            type=node_type,
            props=props,
            style=style,
            children=tuple(children) if isinstance(children, list) else (),
        )

    return LeafNode(type=node_type, props=props, style=style, payload=raw)
