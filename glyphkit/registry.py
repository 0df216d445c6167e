"""Registry of asset collections owned by the host application.

There is no module-level registry: the application builds one (see
:func:`glyphkit.paths.create_asset_registry`) and passes it to whatever
needs assets. Tests build their own with in-memory bundles.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import BinaryIO

from .bundles import AssetBundle
from .errors import UnknownCollectionError
from .resolver import AssetCollection
from .schema import CollectionSpec

logger = logging.getLogger(__name__)


class AssetRegistry:
    """Named asset collections, each with its own lazily built index."""

    def __init__(self) -> None:
        self._collections: dict[str, AssetCollection] = {}

    def register(self, spec: CollectionSpec, bundle: AssetBundle, *, replace: bool = False) -> AssetCollection:
        """Register a collection.

        Args:
            spec: Collection identity
            bundle: Backing bundle
            replace: Allow replacing an existing collection of the same name

        Returns:
            The new collection

        Raises:
            ValueError: If the name is taken and ``replace`` is False
        """
        if spec.name in self._collections and not replace:
            raise ValueError(f"Asset collection '{spec.name}' is already registered")
        collection = AssetCollection(spec, bundle)
        self._collections[spec.name] = collection
        logger.debug(f"Registered asset collection '{spec.name}' ({bundle!r})")
        return collection

    def unregister(self, name: str) -> bool:
        """Remove a collection. Returns True if it was registered."""
        return self._collections.pop(name, None) is not None

    def get(self, name: str) -> AssetCollection:
        """Get a collection by name.

        Raises:
            UnknownCollectionError: If no collection has that name
        """
        try:
            return self._collections[name]
        except KeyError:
            raise UnknownCollectionError(name, self.names()) from None

    def names(self) -> list[str]:
        return list(self._collections)

    def resolve(self, collection: str, name: str | None) -> str | None:
        """Resolve ``name`` within ``collection``."""
        return self.get(collection).resolve(name)

    def open(self, collection: str, name: str | None) -> BinaryIO | None:
        """Open ``name`` within ``collection``."""
        return self.get(collection).open(name)

    def __contains__(self, name: object) -> bool:
        return name in self._collections

    def __iter__(self) -> Iterator[AssetCollection]:
        return iter(list(self._collections.values()))

    def __len__(self) -> int:
        return len(self._collections)
