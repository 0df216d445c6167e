"""Name resolution and stream access for an asset collection.

Callers name assets in whatever shape they have at hand: a copied filename,
a folder-qualified path, a dot-qualified path, or an identifier obtained
from a previous listing. :class:`AssetCollection` turns all of them into the
canonical identifier and opens the bytes behind it.

Resolution order:

1. Blank input is a miss.
2. Input starting with the collection prefix must be an exact identifier.
3. The name is normalized (trimmed, ``\\`` becomes ``/``, a leading folder
   alias such as ``uiicons/`` is dropped) and, when it has no recognized extension, expanded into one candidate per extension in
   preference order (``.ttf`` before ``.otf`` for fonts).
4. Each candidate is looked up in the alias map.
5. Each candidate is turned into an identifier by shape: ``folder/file.ext``
   becomes ``prefix.folder.file.ext``, ``folder.file.ext`` becomes
   ``prefix.folder.file.ext``, anything else is matched by suffix.
6. Collections with a folder alias also accept deeper folder paths: the
   file name is looked up, then the path is tried as a dot path.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from .bundles import AssetBundle
from .errors import AssetNotFoundError
from .errors import BundleInconsistencyError
from .index import ResourceIndex
from .index import file_key
from .schema import CollectionSpec

logger = logging.getLogger(__name__)


class AssetCollection:
    """Resolver and stream opener for one collection.

    Args:
        spec: Collection identity (prefix and extensions)
        bundle: Backing bundle providing identifiers and bytes
        index: Pre-built index to share; created lazily from ``bundle`` if omitted
    """

    def __init__(self, spec: CollectionSpec, bundle: AssetBundle, index: ResourceIndex | None = None):
        self.spec = spec
        self.bundle = bundle
        self.index = index if index is not None else ResourceIndex(spec, bundle)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def prefix(self) -> str:
        return self.spec.prefix

    # ----- Resolution -----

    def candidates(self, name: str) -> list[str]:
        """Normalized lookup keys for ``name``, most preferred first."""
        key = self._strip_folder_alias(name.strip().replace("\\", "/"))
        if self.spec.has_extension(key):
            return [key]
        return [key + ext for ext in self.spec.extensions]

    def _strip_folder_alias(self, key: str) -> str:
        alias = self.spec.folder_alias
        if alias and key.casefold().startswith(alias.casefold() + "/"):
            return key[len(alias) + 1 :]
        return key

    def resolve(self, name: str | None) -> str | None:
        """Resolve a caller-supplied name to a canonical identifier.

        Args:
            name: Filename, folder/file path, dot-qualified path or identifier

        Returns:
            The canonical identifier, or None if nothing matches
        """
        if name is None or not name.strip():
            return None

        if name.startswith(self.spec.prefix):
            return name if self.index.contains(name) else None

        keys = self.candidates(name)

        for key in keys:
            identifier = self.index.lookup(key)
            if identifier is not None:
                return identifier

        for key in keys:
            identifier = self._from_shape(key)
            if identifier is not None:
                return identifier

        if self.spec.folder_alias:
            for key in keys:
                identifier = self._from_folder_path(key)
                if identifier is not None:
                    return identifier

        logger.debug(f"No {self.spec.name} asset matches {name!r}")
        return None

    def _from_shape(self, key: str) -> str | None:
        """Build an identifier from the shape of a normalized key."""
        if "/" in key:
            parts = key.split("/")
            if len(parts) == 2:
                return self.index.lookup_identifier(f"{self.spec.prefix}.{parts[0]}.{parts[1]}")
        elif "." in key:
            return self.index.lookup_identifier(f"{self.spec.prefix}.{key}")
        return self.index.find_suffix(f".{key}")

    def _from_folder_path(self, key: str) -> str | None:
        """Resolve a folder path of any depth by file name, then as a dot path."""
        if "/" not in key:
            return None
        identifier = self.index.lookup(key.rsplit("/", 1)[1])
        if identifier is not None:
            return identifier
        return self.index.lookup_identifier(f"{self.spec.prefix}.{key.replace('/', '.')}")

    def try_resolve(self, name: str | None) -> tuple[bool, str]:
        """Boolean-returning lookup; the identifier is empty on a miss."""
        identifier = self.resolve(name)
        if identifier is None:
            return False, ""
        return True, identifier

    def exists(self, name: str | None) -> bool:
        return self.resolve(name) is not None

    def require(self, name: str | None) -> str:
        """Resolve ``name`` or raise.

        Raises:
            AssetNotFoundError: If the name does not resolve
        """
        identifier = self.resolve(name)
        if identifier is None:
            raise AssetNotFoundError(self.spec.name, name)
        return identifier

    # ----- Listing -----

    def resource_names(self) -> tuple[str, ...]:
        return self.index.names

    def file_names(self) -> tuple[str, ...]:
        return self.index.file_names()

    def file_name_of(self, identifier: str) -> str:
        """Filename with extension of a canonical identifier."""
        if identifier.startswith(self.spec.prefix + "."):
            identifier = identifier[len(self.spec.prefix) + 1 :]
        return file_key(identifier)

    def __len__(self) -> int:
        return len(self.index)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    # ----- Streams -----

    def open(self, name: str | None) -> BinaryIO | None:
        """Open an asset for binary reading.

        Returns:
            A stream positioned at the start of the asset, or None if the name
            does not resolve. The caller owns the stream.

        Raises:
            BundleInconsistencyError: If the name resolves but the bundle
                cannot open it
        """
        identifier = self.resolve(name)
        if identifier is None:
            return None
        return self._open_identifier(identifier)

    def open_required(self, name: str | None) -> BinaryIO:
        """Like :meth:`open` but raise :class:`AssetNotFoundError` on a miss."""
        return self._open_identifier(self.require(name))

    def read_bytes(self, name: str | None) -> bytes:
        """Read a whole asset, raising if the name does not resolve."""
        with self.open_required(name) as stream:
            return stream.read()

    def _open_identifier(self, identifier: str) -> BinaryIO:
        try:
            return self.bundle.open(identifier)
        except (FileNotFoundError, KeyError) as e:
            logger.error(f"Bundle for '{self.spec.name}' cannot open indexed asset {identifier}: {e}")
            raise BundleInconsistencyError(self.spec.name, identifier) from e

    def __repr__(self) -> str:
        return f"AssetCollection({self.spec.name!r}, prefix={self.spec.prefix!r})"
