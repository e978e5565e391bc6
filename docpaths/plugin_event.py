"""Data model for the event passed to a plugin when it is loaded."""

from dataclasses import dataclass

from docpaths.event_bus import EventBus


@dataclass(frozen=True)
class PluginEvent:
    """Carries the event bus a plugin registers its handlers on."""

    eventbus: EventBus
    plugin_name: str = ""
