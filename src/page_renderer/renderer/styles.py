"""
Style Resolution
Per-type base styles and shallow override merging.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ..core import get_logger, ValidationError
from ..core.json import decode_json, JSONParseError

logger = get_logger(__name__)


# Base styles keyed by component type, plus the page chrome listed in
# CHROME_STYLES.
DEFAULT_STYLES: dict[str, dict[str, Any]] = {
    "page": {"flex": 1, "backgroundColor": "#ffffff"},
    "errorContainer": {"flex": 1, "justifyContent": "center", "alignItems": "center"},
    "errorText": {"fontSize": 16, "color": "#ff0000"},
    "emptyContainer": {"flex": 1, "justifyContent": "center", "alignItems": "center"},
    "emptyText": {"fontSize": 16, "color": "#999999"},
    "container": {"padding": 16},
    "text": {"fontSize": 16, "color": "#333333", "marginBottom": 8},
    "image": {"width": "100%", "height": 200, "marginBottom": 16, "borderRadius": 8},
    "imagePlaceholder": {"backgroundColor": "#eeeeee"},
    "button": {
        "backgroundColor": "#007AFF",
        "padding": 16,
        "borderRadius": 8,
        "alignItems": "center",
        "marginBottom": 16,
    },
    "buttonText": {"color": "#ffffff", "fontSize": 16, "fontWeight": "600"},
    "scrollview": {"flex": 1},
    "fallbackText": {"fontSize": 14, "color": "#999999"},
}

# Named records used by the renderer itself; never a component type base.
CHROME_STYLES = frozenset(
    {
        "page",
        "errorContainer",
        "errorText",
        "emptyContainer",
        "emptyText",
        "imagePlaceholder",
        "buttonText",
        "fallbackText",
    }
)


def merge_style(base: Mapping[str, Any] | None, override: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Shallow-merge an override over a base style.

    Keys in the override replace keys in the base; nested values are
    replaced whole, never merged. Neither argument is modified.
    """
    merged = dict(base or {})
    if override:
        merged.update(override)
    return merged


class StyleSheet:
    """Immutable table of named style records."""

    def __init__(self, styles: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        source = DEFAULT_STYLES if styles is None else styles
        self._styles = MappingProxyType(
            {name: MappingProxyType(dict(record)) for name, record in source.items()}
        )

    @classmethod
    def default(cls) -> "StyleSheet":
        """Sheet with the built-in theme."""
        return cls(DEFAULT_STYLES)

    @classmethod
    def from_mapping(cls, styles: Any) -> "StyleSheet":
        """
        Build a sheet from untrusted data (e.g. a theme file).

        Raises:
            ValidationError: If styles is not a mapping of mappings
        """
        if not isinstance(styles, Mapping):
            raise ValidationError(f"Style sheet must be an object, got {type(styles).__name__}")

        for name, record in styles.items():
            if not isinstance(name, str) or not isinstance(record, Mapping):
                raise ValidationError(f"Style sheet entry {name!r} must map a name to an object")

        return cls(styles)

    def extend(self, overrides: Mapping[str, Mapping[str, Any]]) -> "StyleSheet":
        """New sheet with each named record shallow-merged with overrides."""
        combined = {name: dict(record) for name, record in self._styles.items()}
        for name, record in overrides.items():
            combined[name] = merge_style(combined.get(name), record)
        return StyleSheet(combined)

    def base(self, name: str) -> dict[str, Any]:
        """Copy of the named record (empty if unknown)."""
        record = self._styles.get(name)
        return dict(record) if record is not None else {}

    def names(self) -> list[str]:
        return list(self._styles)

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __len__(self) -> int:
        return len(self._styles)


def load_style_sheet(path: str | Path, extend_default: bool = True) -> StyleSheet:
    """
    Load a style sheet from a JSON file.

    Args:
        path: JSON file mapping style names to style records
        extend_default: Merge over the built-in theme instead of replacing it

    Returns:
        StyleSheet

    Raises:
        ValidationError: If the file is unreadable or has the wrong shape
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
        data = decode_json(text, repair=False)
    except (OSError, JSONParseError) as e:
        logger.error("theme_load_failed", path=str(path), error=str(e))
        raise ValidationError(f"Cannot load style sheet {path}: {e}") from e

    sheet = StyleSheet.from_mapping(data)
    logger.info("theme_loaded", path=str(path), styles=len(sheet))

    if extend_default:
        return StyleSheet.default().extend(data)
    return sheet


class StyleResolver:
    """Resolves the effective style of a component from its type and override."""

    def __init__(self, sheet: StyleSheet | None = None) -> None:
        self.sheet = sheet if sheet is not None else StyleSheet.default()

    def resolve(self, component_type: str, override: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """
        Effective style for a component.

        Args:
            component_type: Component type tag (unknown tags and page chrome
                names have an empty base)
            override: Per-node style override; None is treated as empty

        Returns:
            New dict with the base style shallow-merged with the override
        """
        if component_type in CHROME_STYLES:
            return merge_style(None, override)
        return merge_style(self.sheet.base(component_type), override)
