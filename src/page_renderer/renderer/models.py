"""Rendered UI Tree Models."""

from collections.abc import Callable
from typing import Any
from pydantic import BaseModel, ConfigDict, Field

from ..core.validate import ErrorKind


class Primitive:
    """Host UI primitive names."""

    VIEW = "View"
    TEXT = "Text"
    IMAGE = "Image"
    TOUCHABLE = "Touchable"
    SCROLL_VIEW = "ScrollView"


class Action(BaseModel):
    """Declared user action carried by an interactive element."""

    model_config = ConfigDict(frozen=True)

    kind: str | None = None
    target: str | None = None


class Element(BaseModel):
    """One realized UI primitive and its rendered children."""

    primitive: str = Field(..., description="Host primitive name")
    key: str = Field(..., description="Identity derived from (type, position path)")
    style: dict[str, Any] = Field(default_factory=dict)
    props: dict[str, Any] = Field(default_factory=dict)
    text: str | None = Field(default=None)
    source: str | None = Field(default=None)
    children: list["Element"] = Field(default_factory=list)
    placeholder: ErrorKind | None = Field(default=None)
    action: Action | None = Field(default=None)
    on_press: Callable[[], Any] | None = Field(default=None, exclude=True, repr=False)

    def press(self) -> None:
        """Trigger the bound action, if any."""
        if self.on_press is not None:
            self.on_press()

    def walk(self):
        """Yield this element and all descendants, depth-first in order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, key: str) -> "Element | None":
        """Find a descendant (or self) by identity key."""
        for element in self.walk():
            if element.key == key:
                return element
        return None


Element.model_rebuild()
