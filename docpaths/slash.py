"""Utility for forcing forward-slash separators in path strings."""

import sys

WINDOWS_PLATFORM = "win32"


def slash(path: str, platform: str | None = None) -> str:
    """Convert back slashes to forward slashes on Windows hosts.

    Other platforms get the path back unchanged.
    """
    if (platform or sys.platform) == WINDOWS_PLATFORM:
        path = path.replace("\\", "/")
    return path
