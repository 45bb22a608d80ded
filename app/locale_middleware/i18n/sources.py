"""Catalog sources.

A source is anything that can open a catalog file by name. The loader only
depends on the ``CatalogSource`` interface, so the primary catalogs may come
from a local directory, from package data shipped inside a distribution, or
from an in-memory mapping.
"""

import io
from abc import ABC, abstractmethod
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO, Mapping, Union


class CatalogSource(ABC):
    """Abstract base for catalog sources."""

    @abstractmethod
    def open(self, name: str) -> BinaryIO:
        """Open a catalog file for binary reading.

        Args:
            name: File name relative to the source root (e.g. "locale_en-US.ini").

        Returns:
            A readable binary file object. Callers are responsible for closing it.

        Raises:
            FileNotFoundError: If the source has no such file.
            OSError: If the file exists but cannot be read.
        """

    @abstractmethod
    def describe(self) -> str:
        """Return a short label for error messages and logs."""

    def read(self, name: str) -> bytes:
        """Read a whole catalog file."""
        with self.open(name) as fh:
            return fh.read()


class DirectorySource(CatalogSource):
    """Catalog files in a local directory."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def open(self, name: str) -> BinaryIO:
        return open(self.directory / name, "rb")

    def describe(self) -> str:
        return f"local directory {self.directory}"

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.directory)!r})"


class ResourceSource(CatalogSource):
    """Catalog files embedded as package data.

    Accepts either an ``importlib.resources`` traversable or the dotted name
    of a package whose data files hold the catalogs. An optional
    ``subdirectory`` is joined onto the package root.
    """

    def __init__(self, root: Union[str, Traversable], subdirectory: str = ""):
        if isinstance(root, str):
            self._label = root
            root = resources.files(root)
        else:
            self._label = str(root)
        if subdirectory:
            root = root.joinpath(subdirectory)
            self._label = f"{self._label}/{subdirectory}"
        self.root = root

    def open(self, name: str) -> BinaryIO:
        entry = self.root.joinpath(name)
        if not entry.is_file():
            raise FileNotFoundError(f"open {name}: file does not exist")
        return entry.open("rb")

    def describe(self) -> str:
        return f"package resources {self._label}"

    def __repr__(self) -> str:
        return f"ResourceSource({self._label!r})"


class MemorySource(CatalogSource):
    """Catalog files held in memory, keyed by file name."""

    def __init__(self, files: Mapping[str, Union[str, bytes]]):
        self._files = {
            name: data.encode("utf-8") if isinstance(data, str) else bytes(data)
            for name, data in files.items()
        }

    def open(self, name: str) -> BinaryIO:
        try:
            return io.BytesIO(self._files[name])
        except KeyError:
            raise FileNotFoundError(f"open {name}: file does not exist") from None

    def describe(self) -> str:
        return f"memory ({len(self._files)} files)"

    def __repr__(self) -> str:
        return f"MemorySource({sorted(self._files)!r})"


def is_file(path: Union[str, Path]) -> bool:
    """Return True if the path exists and is not a directory."""
    return Path(path).is_file()
