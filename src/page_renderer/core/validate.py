"""Descriptor validation with strong typing and Result-returning variants."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any
from returns.result import Result, Success, Failure


# Validation limits
MAX_DESCRIPTOR_SIZE = 512 * 1024  # 512KB
MAX_DEPTH = 128


class ValidationError(Exception):
    """Validation failed."""

    pass


class DescriptorError(ValidationError):
    """Page descriptor has the wrong shape or could not be decoded."""

    pass


class ErrorKind(str, Enum):
    """Render-time problems, each surfaced as a placeholder rather than raised."""

    CONFIGURATION_MISSING = "configuration_missing"
    CONFIGURATION_EMPTY = "configuration_empty"
    UNKNOWN_COMPONENT_TYPE = "unknown_component_type"
    MALFORMED_LEAF_PAYLOAD = "malformed_leaf_payload"
    MALFORMED_NODE = "malformed_node"
    DEPTH_EXCEEDED = "depth_exceeded"


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


def check_descriptor(descriptor: Any) -> None:
    """
    Reject descriptors the walker cannot start from.

    None, mappings and lists are accepted; everything inside them is
    normalized node by node during the walk.

    Raises:
        DescriptorError: If the descriptor is neither None, a mapping nor a list
    """
    if descriptor is None or isinstance(descriptor, (Mapping, list)):
        return
    raise DescriptorError(
        f"Page descriptor must be an object or a list of components, got {type(descriptor).__name__}"
    )


def validate_descriptor(descriptor: Any) -> Result[None, ValidationResult]:
    """
    Validate page descriptor shape (Result pattern version).

    Args:
        descriptor: Decoded page descriptor

    Returns:
        Result indicating success or validation error
    """
    try:
        check_descriptor(descriptor)
        return Success(None)
    except DescriptorError as e:
        return Failure(ValidationResult(str(e), field="descriptor", value=type(descriptor).__name__))
