"""Logic for discovering plugins through package entry points."""

import logging
from collections.abc import Iterable
from importlib.metadata import EntryPoint, entry_points

from docpaths.event_bus import EventBus
from docpaths.plugin_event import PluginEvent

logger = logging.getLogger(__name__)

PLUGIN_GROUP = "docpaths.plugins"


def _plugin_entry_points() -> list[EntryPoint]:
    return list(entry_points(group=PLUGIN_GROUP))


def load_plugins(eventbus: EventBus, names: Iterable[str] | None = None) -> list[str]:
    """Load plugins and let each register its handlers on the event bus.

    Returns the names of the loaded plugins in load order.
    """
    available = {ep.name: ep for ep in _plugin_entry_points()}
    if names is None:
        selected = sorted(available)
    else:
        selected = list(names)
        missing = sorted(set(selected) - set(available))
        if missing:
            msg = f"Plugins not found: {', '.join(missing)}"
            raise LookupError(msg)

    loaded: list[str] = []
    for name in selected:
        module = available[name].load()
        module.on_plugin_load(PluginEvent(eventbus=eventbus, plugin_name=name))
        logger.info("Loaded plugin: %s", name)
        loaded.append(name)
    return loaded
