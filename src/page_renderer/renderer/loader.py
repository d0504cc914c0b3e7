"""Descriptor loading and rendered tree serialization."""

from typing import Any

from ..core import get_logger, get_settings, Settings
from ..core.json import JSONParseError, decode_json, safe_json_dumps, validate_json_size
from ..core.validate import DescriptorError, check_descriptor
from .models import Element

logger = get_logger(__name__)


def load_descriptor(text: str, settings: Settings | None = None) -> Any:
    """
    Decode page descriptor JSON text.

    Args:
        text: Descriptor JSON; the literal `null` yields None
        settings: Size and repair limits (defaults to environment settings)

    Returns:
        Decoded descriptor (None, dict or list)

    Raises:
        DescriptorError: If the text is too large, undecodable or of the wrong shape
    """
    settings = settings or get_settings()

    try:
        validate_json_size(text, settings.max_descriptor_bytes, "Page descriptor")
        descriptor = decode_json(text, repair=settings.repair_json)
    except JSONParseError as e:
        logger.error("descriptor_decode_failed", error=str(e))
        raise DescriptorError(f"Invalid page descriptor: {e}") from e

    check_descriptor(descriptor)
    return descriptor


def tree_to_dict(element: Element) -> dict[str, Any]:
    """Plain-data form of a rendered tree (bound triggers are dropped)."""
    return element.model_dump(mode="json", exclude_none=True)


def dump_tree(element: Element, indent: int = 0) -> str:
    """
    Serialize a rendered tree to JSON.

    Args:
        element: Root element
        indent: Pretty-print indentation (0 = compact)

    Returns:
        JSON string
    """
    return safe_json_dumps(tree_to_dict(element), indent=indent)
