"""
Action Bridge
Connects declared user actions to host-supplied side effects.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..core import get_logger

logger = get_logger(__name__)

NAVIGATE = "navigate"

ActionHandler = Callable[[str], Any]


class ActionBridge:
    """
    Routes triggered actions to injected capabilities.

    Only "navigate" is understood by the core; it calls on_action(target).
    Hosts may register handlers for further action kinds; any kind without
    a handler, or a trigger without a target, is a no-op.
    """

    def __init__(
        self,
        on_action: ActionHandler | None = None,
        handlers: Mapping[str, ActionHandler] | None = None,
    ) -> None:
        extra = dict(handlers or {})
        if on_action is not None and NAVIGATE in extra:
            raise ValueError("navigate handler given both as on_action and in handlers")

        self._handlers: dict[str, ActionHandler] = extra
        if on_action is not None:
            self._handlers[NAVIGATE] = on_action

    @property
    def kinds(self) -> list[str]:
        """Action kinds with a handler attached."""
        return sorted(self._handlers)

    def trigger(self, kind: str | None, target: str | None) -> bool:
        """
        Run the handler for an action.

        Args:
            kind: Declared action kind (e.g. "navigate")
            target: Route or other target identifier

        Returns:
            True if a handler was invoked
        """
        if not kind or not target:
            logger.debug("action_ignored", kind=kind, target=target, reason="incomplete")
            return False

        handler = self._handlers.get(kind)
        if handler is None:
            logger.debug("action_ignored", kind=kind, target=target, reason="unhandled")
            return False

        logger.info("action_triggered", kind=kind, target=target)
        handler(target)
        return True

    def bind(self, kind: str | None, target: str | None) -> "Trigger":
        """Bind an action to this bridge for later triggering."""
        return Trigger(self, kind, target)


@dataclass(frozen=True)
class Trigger:
    """Deferred action: calling it routes the action through the bridge."""

    bridge: ActionBridge
    kind: str | None
    target: str | None

    def __call__(self) -> bool:
        return self.bridge.trigger(self.kind, self.target)
