"""Handlers for host page requests."""

from .page import PageHandler, PageResponse

__all__ = ["PageHandler", "PageResponse"]
