"""
glyphkit - Bundled fonts and SVG icons with forgiving name lookup.

Public API:
- AssetRegistry: Named collections owned by the application
- AssetCollection: Resolve names to identifiers and open asset streams
- ResourceIndex: Lazily built alias index for one collection
- CollectionSpec: Prefix and extensions of a collection
- AssetBundle, PackageBundle, DirectoryBundle, MemoryBundle: Backing sources
- AssetFamily, NamedAsset: Curated attribute-style accessors
- create_asset_registry: Registry with built-ins and settings-declared collections
"""

from .bundles import AssetBundle
from .bundles import DirectoryBundle
from .bundles import MemoryBundle
from .bundles import PackageBundle
from .errors import AssetError
from .errors import AssetNotFoundError
from .errors import BundleInconsistencyError
from .errors import CollectionConfigError
from .errors import UnknownCollectionError
from .index import ResourceIndex
from .named import AssetFamily
from .named import NamedAsset
from .paths import create_asset_registry
from .registry import AssetRegistry
from .resolver import AssetCollection
from .schema import BUILTIN_COLLECTIONS
from .schema import FONTS
from .schema import SVG_ICONS
from .schema import UI_ICONS
from .schema import CollectionConfig
from .schema import CollectionSpec

__all__ = [
    "AssetBundle",
    "AssetCollection",
    "AssetError",
    "AssetFamily",
    "AssetNotFoundError",
    "AssetRegistry",
    "BUILTIN_COLLECTIONS",
    "BundleInconsistencyError",
    "CollectionConfig",
    "CollectionConfigError",
    "CollectionSpec",
    "DirectoryBundle",
    "FONTS",
    "MemoryBundle",
    "NamedAsset",
    "PackageBundle",
    "ResourceIndex",
    "SVG_ICONS",
    "UI_ICONS",
    "UnknownCollectionError",
    "create_asset_registry",
]
