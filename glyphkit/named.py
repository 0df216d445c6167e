"""Curated, attribute-style access to well-known assets.

Declare a family once and read identifiers as attributes::

    class Cairo(AssetFamily):
        Bold = NamedAsset("Cairo/Cairo-Bold.ttf")
        Regular = NamedAsset("Cairo/Cairo-Regular.ttf")

    cairo = Cairo(registry.get("fonts"))
    cairo.Bold  # "glyphkit.fonts.Cairo.Cairo-Bold.ttf"

Curated names are promises made by the package, so a name that does not
resolve raises :class:`~glyphkit.errors.AssetNotFoundError` on access
instead of yielding an empty value.
"""

from __future__ import annotations

from typing import Any
from typing import BinaryIO

from .resolver import AssetCollection


class NamedAsset:
    """Descriptor that resolves a fixed asset name through its family's collection."""

    def __init__(self, name: str):
        self.name = name
        self.attr = name

    def __set_name__(self, owner: type, attr: str) -> None:
        self.attr = attr

    def __get__(self, instance: AssetFamily | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.collection.require(self.name)

    def __repr__(self) -> str:
        return f"NamedAsset({self.attr}={self.name!r})"


class AssetFamily:
    """Group of curated assets bound to one collection."""

    def __init__(self, collection: AssetCollection):
        self.collection = collection

    @classmethod
    def declared(cls) -> dict[str, str]:
        """Map attribute names to the asset names they declare."""
        result: dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, NamedAsset):
                    result[attr] = value.name
        return result

    def missing(self) -> list[str]:
        """Attributes whose declared name does not resolve in the collection."""
        return [attr for attr, name in self.declared().items() if not self.collection.exists(name)]

    def open(self, attr: str) -> BinaryIO:
        """Open the asset declared under ``attr``."""
        declared = self.declared()
        if attr not in declared:
            raise AttributeError(f"{type(self).__name__} declares no asset '{attr}'")
        return self.collection.open_required(declared[attr])
