"""Core utilities and infrastructure."""

from .validate import (
    ValidationError,
    DescriptorError,
    ErrorKind,
    ValidationResult,
    check_descriptor,
    validate_descriptor,
)
from .config import Settings, get_settings
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import (
    decode_json,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
)


def create_container(on_action=None, handlers=None, settings=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(on_action, handlers, settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "DescriptorError",
    "ErrorKind",
    "ValidationResult",
    "check_descriptor",
    "validate_descriptor",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "decode_json",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    # DI
    "create_container",
]
