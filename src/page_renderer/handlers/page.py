"""Page Handler."""

import time
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field
from returns.pipeline import is_successful

from ..core import get_logger, LogContext, Settings, ValidationError, validate_descriptor
from ..renderer.loader import dump_tree, load_descriptor
from ..renderer.models import Element
from ..renderer.walker import Renderer


logger = get_logger(__name__)


class PageResponse(BaseModel):
    """Result of a page render request."""

    success: bool
    tree_json: str = ""
    error: str = ""
    duration_ms: float = Field(default=0.0, ge=0.0)
    page_id: str | None = None


class PageHandler:
    """Handles page render requests from the host."""

    def __init__(self, renderer: Renderer, settings: Settings) -> None:
        self.renderer = renderer
        self.settings = settings

    def render(self, descriptor_json: str) -> PageResponse:
        """Decode, render and serialize a descriptor given as JSON text."""
        start_time = time.time()

        try:
            descriptor = load_descriptor(descriptor_json, self.settings)
        except ValidationError as e:
            duration = time.time() - start_time
            logger.error("validation", error=str(e))
            return PageResponse(success=False, error=f"Validation error: {e}", duration_ms=duration * 1000)

        return self._render(descriptor, start_time)

    def render_descriptor(self, descriptor: Any) -> PageResponse:
        """Render an already-decoded descriptor."""
        start_time = time.time()

        result = validate_descriptor(descriptor)
        if not is_successful(result):
            error = result.failure()
            duration = time.time() - start_time
            logger.error("validation", error=error.message, field=error.field, value=error.value)
            return PageResponse(
                success=False, error=f"Validation error: {error.message}", duration_ms=duration * 1000
            )

        return self._render(descriptor, start_time)

    def render_tree(self, descriptor: Any) -> Element:
        """Render a decoded descriptor and return the live tree (actions bound)."""
        with LogContext(page_id=_page_id(descriptor)):
            return self.renderer.render_page(descriptor)

    def _render(self, descriptor: Any, start_time: float) -> PageResponse:
        page_id = _page_id(descriptor)

        with LogContext(page_id=page_id):
            try:
                tree = self.renderer.render_page(descriptor)
            except ValidationError as e:
                duration = time.time() - start_time
                logger.error("validation", error=str(e))
                return PageResponse(
                    success=False, error=f"Validation error: {e}", duration_ms=duration * 1000, page_id=page_id
                )

            tree_json = dump_tree(tree)
            duration = time.time() - start_time
            logger.info("complete", duration_ms=duration * 1000, size=len(tree_json))

            return PageResponse(success=True, tree_json=tree_json, duration_ms=duration * 1000, page_id=page_id)


def _page_id(descriptor: Any) -> str | None:
    if isinstance(descriptor, Mapping):
        page_id = descriptor.get("id")
        if isinstance(page_id, str):
            return page_id
    return None
