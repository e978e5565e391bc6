"""Print the normalized path views of source files.

For every file given on the command line this prints its absolute path, its
path relative to the project root and its import path, as a YAML mapping.
Package metadata comes from flags, the configuration file or a package.json
manifest, in that order of precedence.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, Any

import yaml

from docpaths.event_bus import EventBus
from docpaths.load_config import load_config
from docpaths.load_plugins import load_plugins
from docpaths.on_plugin_load import CREATE_PATH_RESOLVER_EVENT, on_plugin_load
from docpaths.plugin_event import PluginEvent
from docpaths.read_package_info import read_package_info

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docpaths.path_resolver import PathResolver


def describe_paths(
    resolver: PathResolver,
    root_path: str,
    files: Sequence[str],
    package_name: str | None = None,
    main_file_path: str | None = None,
    relative: str | None = None,
) -> dict[str, dict[str, str]]:
    """Describe each file with the given resolver, keyed by root-relative path.

    Arguments naming the same file (``a.js``, ``./a.js``) share one entry; a
    warning is logged for each repeat.
    """
    described: dict[str, dict[str, str]] = {}
    for f in files:
        resolver.set_path_data(root_path, f, package_name, main_file_path)
        entry = {
            "absolute_path": resolver.absolute_path,
            "file_path": resolver.file_path,
            "import_path": resolver.import_path,
        }
        if relative is not None:
            entry["resolved"] = resolver.resolve(relative)
            entry["resolved_absolute"] = resolver.resolve_absolute_path(relative)
        key = resolver.file_path
        if key in described:
            logger.warning(
                "Duplicate file %s (given as %s); keeping last entry", key, f
            )
        described[key] = entry
    return described


def _package_settings(
    args: argparse.Namespace, config: dict[str, Any]
) -> tuple[str | None, str | None]:
    """Determine the package name and main file from flags, config and manifest."""
    package_name = args.package_name or config.get("package_name")
    main_file_path = args.main_file or config.get("main_file_path")
    package_json = args.package_json or config.get("package_json")
    if package_json:
        info = read_package_info(package_json)
        package_name = package_name or info.name
        main_file_path = main_file_path or info.main
    return package_name, main_file_path


def main() -> int:
    """Run the path description CLI."""
    ap = argparse.ArgumentParser(
        description="Print root-relative, package-aware paths of source files.",
    )
    ap.add_argument("files", nargs="+", help="Source files to describe")
    ap.add_argument(
        "--root",
        help="Project root directory (default: root_path from config, or '.')",
    )
    ap.add_argument("--package-name", help="Package name covering the files")
    ap.add_argument("--main-file", help="Main entry file of the package")
    ap.add_argument(
        "--package-json",
        help="package.json manifest to read the package name and main file from",
    )
    ap.add_argument(
        "--resolve",
        metavar="REL",
        help="Also resolve this path relative to each file",
    )
    ap.add_argument(
        "--plugin",
        action="append",
        help="Additional entry-point plugin to load (repeatable)",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument("--verbose", action="store_true", help="Enable info logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, TypeError, yaml.YAMLError) as e:
        msg = f"Cannot read config file: {e}"
        raise SystemExit(msg) from e
    root_path = args.root or config.get("root_path") or "."
    try:
        package_name, main_file_path = _package_settings(args, config)
    except (OSError, ValueError, TypeError) as e:
        msg = f"Cannot read package manifest: {e}"
        raise SystemExit(msg) from e

    eventbus = EventBus()
    on_plugin_load(PluginEvent(eventbus=eventbus, plugin_name="path_resolver"))
    if args.plugin:
        load_plugins(eventbus, args.plugin)
    resolver = eventbus.trigger(
        CREATE_PATH_RESOLVER_EVENT, root_path, root_path, package_name, main_file_path
    )

    described = describe_paths(
        resolver,
        root_path,
        args.files,
        package_name=package_name,
        main_file_path=main_file_path,
        relative=args.resolve,
    )
    yaml.safe_dump(described, sys.stdout, sort_keys=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
