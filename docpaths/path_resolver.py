"""Resolver for root-relative, package-aware file paths.

Example:
    >>> resolver = PathResolver(".", "foo/bar.js", "foo-bar", "foo/bar.js")
    >>> resolver.import_path
    'foo-bar'
    >>> resolver.file_path
    'foo/bar.js'
    >>> resolver.resolve("./baz.js")
    'foo/baz.js'

"""

import logging
import os
from collections.abc import Callable
from types import ModuleType

from docpaths.slash import slash

logger = logging.getLogger(__name__)


def _require_str(name: str, value: object, *, optional: bool = False) -> None:
    """Raise a TypeError unless the value is a string (or None when optional)."""
    if optional and value is None:
        return
    if not isinstance(value, str):
        msg = f"'{name}' is not a 'str'."
        raise TypeError(msg)


class PathResolver:
    """Derives forward-slash path views of a file relative to a project root.

    The resolver knows the project root, the file it describes and optionally
    the package covering that file (its name and main entry file). Every path
    it returns goes through ``normalize`` so callers always see ``/``.
    """

    def __init__(
        self,
        root_path: str,
        file_path: str,
        package_name: str | None = None,
        main_file_path: str | None = None,
        *,
        path_module: ModuleType = os.path,
        normalize: Callable[[str], str] = slash,
    ):
        self._path = path_module
        self._normalize = normalize
        self.set_path_data(root_path, file_path, package_name, main_file_path)

    @property
    def absolute_path(self) -> str:
        """Absolute path of the file."""
        return self._normalize(self._file_path)

    @property
    def file_path(self) -> str:
        """Path of the file relative to the root directory.

        The root itself is the empty string.
        """
        return self._normalize(self._relative(self._file_path))

    @property
    def import_path(self) -> str:
        """Import specifier for the file.

        - The package name when the file is the package's main file.
        - The relative path as is when the file lives outside the root.
        - ``<package_name>/<relative path>`` when a package name is known.
        - ``./<relative path>`` otherwise.

        The main file check resolves the relative path against the root
        directory, not the working directory.
        """
        relative_file_path = self._relative(self._file_path)

        if (
            self._main_file_path is not None
            and self._package_name is not None
            and self._path.abspath(self._path.join(self._root_path, relative_file_path))
            == self._main_file_path
        ):
            return self._package_name

        if self._is_outside_root(relative_file_path):
            import_path = relative_file_path
        elif self._package_name:
            import_path = self._path.normpath(
                f"{self._package_name}{self._path.sep}{relative_file_path}"
            )
        else:
            # Local source
            import_path = f"./{relative_file_path}"

        return self._normalize(import_path)

    def resolve(self, relative_path: str) -> str:
        """Resolve a path relative to this file into a root-relative path."""
        resolved_path = self._resolve_from_file(relative_path)
        return self._normalize(self._relative(resolved_path))

    def resolve_absolute_path(self, relative_path: str) -> str:
        """Resolve a path relative to this file into an absolute path."""
        return self._normalize(self._resolve_from_file(relative_path))

    def set_path_data(
        self,
        root_path: str,
        file_path: str,
        package_name: str | None = None,
        main_file_path: str | None = None,
    ) -> None:
        """Replace all path data held by this resolver.

        Every field is replaced together: leaving out the package name or the
        main file path clears any previously stored value.
        """
        _require_str("root_path", root_path)
        _require_str("file_path", file_path)
        _require_str("package_name", package_name, optional=True)
        _require_str("main_file_path", main_file_path, optional=True)

        self._root_path = self._path.abspath(root_path)
        self._file_path = self._path.abspath(file_path)
        self._package_name = package_name
        self._main_file_path = (
            self._path.abspath(main_file_path) if main_file_path else None
        )

        logger.debug(
            "Path data set: root=%s file=%s package=%s main=%s",
            self._root_path,
            self._file_path,
            self._package_name,
            self._main_file_path,
        )

    def _resolve_from_file(self, relative_path: str) -> str:
        _require_str("relative_path", relative_path)
        self_dir_path = self._path.dirname(self._file_path)
        return self._path.abspath(self._path.join(self_dir_path, relative_path))

    def _relative(self, path: str) -> str:
        """Relative path from the root, or the absolute path across drives."""
        try:
            relative = self._path.relpath(path, self._root_path)
        except ValueError:
            # No relative path between different drives
            return path
        return "" if relative == self._path.curdir else relative

    def _is_outside_root(self, relative_file_path: str) -> bool:
        if self._path.isabs(relative_file_path):
            return True
        first_segment = relative_file_path.split(self._path.sep, 1)[0]
        return first_segment == self._path.pardir
