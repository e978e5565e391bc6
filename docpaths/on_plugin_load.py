"""Plugin wiring that exposes PathResolver on the event bus."""

from docpaths.path_resolver import PathResolver
from docpaths.plugin_event import PluginEvent

CREATE_PATH_RESOLVER_EVENT = "tjsdoc:create:path:resolver"


def on_plugin_load(ev: PluginEvent) -> None:
    """Register a factory that creates a PathResolver from path data."""

    def create_path_resolver(
        root_path: str,
        file_path: str,
        package_name: str | None = None,
        main_file_path: str | None = None,
    ) -> PathResolver:
        return PathResolver(root_path, file_path, package_name, main_file_path)

    ev.eventbus.on(CREATE_PATH_RESOLVER_EVENT, create_path_resolver)
