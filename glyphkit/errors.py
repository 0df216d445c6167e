"""Exception types for asset lookup.

Tolerant lookups (``resolve``, ``exists``, ``open``) report a miss by returning
``None``/``False``. The exceptions below are reserved for the fail-fast paths
and for conditions that indicate a broken installation.
"""

from __future__ import annotations


class AssetError(Exception):
    """Base class for all glyphkit errors."""


class AssetNotFoundError(AssetError, LookupError):
    """A name could not be resolved by a fail-fast accessor."""

    def __init__(self, collection: str, name: str | None):
        self.collection = collection
        self.name = name
        super().__init__(f"{collection} asset not found: {name!r}")


class BundleInconsistencyError(AssetError):
    """A resolved identifier could not be opened from its backing bundle.

    Resolution only returns identifiers that were enumerated from the bundle,
    so this means the bundle changed after the index was built.
    """

    def __init__(self, collection: str, identifier: str):
        self.collection = collection
        self.identifier = identifier
        super().__init__(f"{collection} bundle no longer provides {identifier!r}")


class UnknownCollectionError(AssetError, KeyError):
    """The registry has no collection with the requested name."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        super().__init__(name)

    def __str__(self) -> str:
        if self.available:
            return f"Unknown asset collection '{self.name}' (available: {', '.join(self.available)})"
        return f"Unknown asset collection '{self.name}'"


class CollectionConfigError(AssetError, ValueError):
    """A collection declared in settings is invalid."""
