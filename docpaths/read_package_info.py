"""Logic for reading package metadata from a package.json manifest."""

import json
import os
from pathlib import Path

from docpaths.package_info import PackageInfo


def read_package_info(path: str | Path) -> PackageInfo:
    """Read the package name and main entry file from a manifest.

    The ``main`` entry is resolved against the manifest's directory.
    """
    manifest = Path(path)
    data = json.loads(manifest.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        msg = f"'{manifest}' is not a JSON object."
        raise TypeError(msg)

    name = data.get("name")
    main = data.get("main")
    if name is not None and not isinstance(name, str):
        msg = f"'name' in {manifest} is not a 'str'."
        raise TypeError(msg)
    if main is not None and not isinstance(main, str):
        msg = f"'main' in {manifest} is not a 'str'."
        raise TypeError(msg)

    main_path = None
    if main:
        main_path = os.path.abspath(os.path.join(manifest.parent, main))
    return PackageInfo(name=name or None, main=main_path)
