"""In-process event bus for plugin wiring."""

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class EventBus:
    """Maps event names to handlers registered by plugins."""

    def __init__(self) -> None:
        self.handlers: dict[str, list[Handler]] = {}

    def on(self, event_name: str, handler: Handler) -> None:
        """Register a handler for an event name."""
        self.handlers.setdefault(event_name, []).append(handler)
        logger.debug("Registered handler for %s", event_name)

    def off(self, event_name: str, handler: Handler | None = None) -> None:
        """Remove one handler, or every handler when none is given."""
        if handler is None:
            self.handlers.pop(event_name, None)
            return
        registered = self.handlers.get(event_name, [])
        if handler in registered:
            registered.remove(handler)
        if not registered:
            self.handlers.pop(event_name, None)

    def trigger(self, event_name: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke the first handler for the event and return its result."""
        registered = self.handlers.get(event_name)
        if not registered:
            return None
        return registered[0](*args, **kwargs)

    def trigger_all(self, event_name: str, *args: Any, **kwargs: Any) -> list[Any]:
        """Invoke every handler for the event and collect the results."""
        return [h(*args, **kwargs) for h in self.handlers.get(event_name, [])]
