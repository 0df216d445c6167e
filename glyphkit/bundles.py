"""Backing bundles that supply asset identifiers and bytes.

A bundle is the read-only source behind an asset collection. It knows every
identifier it can serve and how to open one. Identifiers are flat strings:
the collection prefix followed by the relative path with ``/`` replaced by
``.``, e.g. ``glyphkit.fonts.Cairo.Cairo-Bold.ttf``.

The resolution engine never inspects bundle contents beyond these two calls.
"""

from __future__ import annotations

import importlib.resources
import io
import logging
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING
from typing import BinaryIO
from typing import Protocol
from typing import runtime_checkable

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = logging.getLogger(__name__)


@runtime_checkable
class AssetBundle(Protocol):
    """Read-only source of assets for one collection."""

    def names(self) -> Iterable[str]:
        """Return every identifier the bundle can open, in discovery order."""
        ...

    def open(self, identifier: str) -> BinaryIO:
        """Open an identifier for binary reading.

        Raises:
            FileNotFoundError: If the bundle does not hold the identifier.
        """
        ...


def make_identifier(prefix: str, relative_parts: Iterable[str]) -> str:
    """Join a prefix and relative path parts into a canonical identifier."""
    return ".".join([prefix, *relative_parts])


def _is_hidden(name: str) -> bool:
    return name.startswith(".") or name.startswith("__")


class _TreeBundle:
    """Bundle over a directory-like tree (``Path`` or ``Traversable``)."""

    def __init__(self, prefix: str):
        self.prefix = prefix
        self._entries: dict[str, Traversable] | None = None

    def _root(self) -> Traversable | None:
        raise NotImplementedError

    def _walk(self, node: Traversable, parts: tuple[str, ...]) -> Iterator[tuple[tuple[str, ...], Traversable]]:
        # Sorted so that discovery order (and therefore alias precedence) is stable
        for child in sorted(node.iterdir(), key=lambda c: c.name):
            if _is_hidden(child.name):
                continue
            if child.is_dir():
                yield from self._walk(child, (*parts, child.name))
            elif child.is_file():
                yield (*parts, child.name), child

    def _scan(self) -> dict[str, Traversable]:
        entries = self._entries
        if entries is None:
            entries = {}
            root = self._root()
            if root is not None and root.is_dir():
                for parts, node in self._walk(root, ()):
                    entries.setdefault(make_identifier(self.prefix, parts), node)
            else:
                logger.debug(f"Bundle root missing for prefix '{self.prefix}'")
            self._entries = entries
        return entries

    def names(self) -> list[str]:
        return list(self._scan())

    def open(self, identifier: str) -> BinaryIO:
        node = self._scan().get(identifier)
        if node is None:
            raise FileNotFoundError(f"Bundle has no asset {identifier!r}")
        return node.open("rb")


class DirectoryBundle(_TreeBundle):
    """Assets stored under a filesystem directory."""

    def __init__(self, root: Path | str, prefix: str):
        super().__init__(prefix)
        self.root = Path(root)

    def _root(self) -> Path:
        return self.root

    def __repr__(self) -> str:
        return f"DirectoryBundle(root={str(self.root)!r}, prefix={self.prefix!r})"


class PackageBundle(_TreeBundle):
    """Assets shipped as package data, read through ``importlib.resources``.

    Works for regular installs, editable installs and zip imports alike.

    Args:
        anchor: Package that owns the data (e.g. ``"glyphkit"``)
        subdir: Slash-separated path of the data directory inside the package
        prefix: Identifier prefix for the collection
    """

    def __init__(self, anchor: str, subdir: str, prefix: str):
        super().__init__(prefix)
        self.anchor = anchor
        self.subdir = subdir

    def _root(self) -> Traversable | None:
        try:
            root = importlib.resources.files(self.anchor)
        except ModuleNotFoundError:
            logger.warning(f"Package '{self.anchor}' not importable; bundle '{self.prefix}' is empty")
            return None
        for part in self.subdir.strip("/").split("/"):
            if part:
                root = root.joinpath(part)
        return root

    def __repr__(self) -> str:
        return f"PackageBundle(anchor={self.anchor!r}, subdir={self.subdir!r}, prefix={self.prefix!r})"


class MemoryBundle:
    """In-memory bundle mapping identifiers to bytes."""

    def __init__(self, entries: Mapping[str, bytes] | None = None):
        self._entries: dict[str, bytes] = dict(entries or {})

    @classmethod
    def from_files(cls, prefix: str, files: Mapping[str, bytes]) -> MemoryBundle:
        """Build a bundle from slash-separated relative paths.

        Example:
            >>> bundle = MemoryBundle.from_files("acme.fonts", {"Cairo/Cairo-Bold.ttf": b"..."})
            >>> list(bundle.names())
            ['acme.fonts.Cairo.Cairo-Bold.ttf']
        """
        entries = {}
        for relative, data in files.items():
            parts = [p for p in relative.replace("\\", "/").split("/") if p]
            entries[make_identifier(prefix, parts)] = data
        return cls(entries)

    def names(self) -> list[str]:
        return list(self._entries)

    def open(self, identifier: str) -> BinaryIO:
        try:
            return io.BytesIO(self._entries[identifier])
        except KeyError:
            raise FileNotFoundError(f"Bundle has no asset {identifier!r}") from None

    def __repr__(self) -> str:
        return f"MemoryBundle({len(self._entries)} assets)"
