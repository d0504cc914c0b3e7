"""
page_renderer — declarative page descriptors rendered into UI element trees.

Usage:
    >>> from page_renderer import render_page
    >>> page = render_page({"components": [{"type": "text", "content": "Hello"}]})
    >>> page.children[0].text
    'Hello'

With navigation:
    >>> visited = []
    >>> page = render_page(
    ...     {"components": [{"type": "button", "text": "Go", "action": "navigate", "target": "home"}]},
    ...     on_action=visited.append,
    ... )
    >>> page.children[0].press()
    >>> visited
    ['home']
"""

from .core import (
    Settings,
    get_settings,
    configure_logging,
    ValidationError,
    DescriptorError,
    ErrorKind,
    create_container,
)
from .renderer import (
    ActionBridge,
    Element,
    Primitive,
    Renderer,
    StyleResolver,
    StyleSheet,
    TypeRegistry,
    dump_tree,
    load_descriptor,
    load_style_sheet,
    render_page,
)
from .handlers import PageHandler, PageResponse

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "ValidationError",
    "DescriptorError",
    "ErrorKind",
    "create_container",
    "ActionBridge",
    "Element",
    "Primitive",
    "Renderer",
    "StyleResolver",
    "StyleSheet",
    "TypeRegistry",
    "dump_tree",
    "load_descriptor",
    "load_style_sheet",
    "render_page",
    "PageHandler",
    "PageResponse",
]
