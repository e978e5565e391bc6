"""Data model for the package metadata read from a manifest."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageInfo:
    """Represents the name and entry file declared by a package manifest."""

    name: str | None
    main: str | None  # absolute path to the entry file
