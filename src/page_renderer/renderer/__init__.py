"""
Declarative page renderer
Converts JSON page descriptors into trees of UI primitives
"""

from .actions import ActionBridge, Trigger, NAVIGATE
from .loader import load_descriptor, dump_tree, tree_to_dict
from .models import Action, Element, Primitive
from .nodes import ContainerNode, LeafNode, MalformedNode, normalize
from .registry import (
    RenderStrategy,
    ContainerStrategy,
    TextStrategy,
    ImageStrategy,
    ButtonStrategy,
    FallbackStrategy,
    TypeRegistry,
)
from .styles import DEFAULT_STYLES, StyleResolver, StyleSheet, load_style_sheet, merge_style
from .walker import Renderer, RenderPass, identity_key, render_page

__all__ = [
    # Actions
    "ActionBridge",
    "Trigger",
    "NAVIGATE",
    # I/O
    "load_descriptor",
    "dump_tree",
    "tree_to_dict",
    # Models
    "Action",
    "Element",
    "Primitive",
    # Nodes
    "ContainerNode",
    "LeafNode",
    "MalformedNode",
    "normalize",
    # Registry
    "RenderStrategy",
    "ContainerStrategy",
    "TextStrategy",
    "ImageStrategy",
    "ButtonStrategy",
    "FallbackStrategy",
    "TypeRegistry",
    # Styles
    "DEFAULT_STYLES",
    "StyleResolver",
    "StyleSheet",
    "load_style_sheet",
    "merge_style",
    # Walker
    "Renderer",
    "RenderPass",
    "identity_key",
    "render_page",
]
