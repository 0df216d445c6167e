"""Path policy and dependency injection helpers.

This module centralizes where assets come from. Library classes receive
bundles and specs via injection; this module provides the application's
choices: packaged data for the built-in collections plus any directories
declared in settings.
"""

from __future__ import annotations

import logging

from .bundles import DirectoryBundle
from .bundles import PackageBundle
from .registry import AssetRegistry
from .schema import BUILTIN_COLLECTIONS
from .schema import CollectionSpec
from .settings import AppSettings

logger = logging.getLogger(__name__)

PACKAGE_ANCHOR = "glyphkit"

# Data directory (inside the package) for each built-in collection
BUILTIN_DATA_DIRS: dict[str, str] = {
    "fonts": "data/fonts",
    "svg": "data/svg",
    "uiicons": "data/uiicons",
}


def create_builtin_bundle(spec: CollectionSpec) -> PackageBundle:
    """Create the packaged-data bundle for a built-in collection."""
    return PackageBundle(PACKAGE_ANCHOR, BUILTIN_DATA_DIRS[spec.name], spec.prefix)


def create_asset_registry(settings: AppSettings | None = None, *, include_builtins: bool = True) -> AssetRegistry:
    """Create the application's asset registry.

    Built-in collections come first. Collections declared in settings are
    registered after them and replace a built-in of the same name.

    Args:
        settings: Settings to read declared collections from (default: standard paths)
        include_builtins: Register the packaged fonts and icon sets

    Returns:
        A registry whose indexes are not built yet
    """
    settings = settings or AppSettings()
    registry = AssetRegistry()

    if include_builtins:
        disabled = settings.get_disabled_builtins()
        for spec in BUILTIN_COLLECTIONS:
            if spec.name in disabled:
                logger.debug(f"Built-in collection '{spec.name}' disabled by settings")
                continue
            registry.register(spec, create_builtin_bundle(spec))

    for name, (config, directory) in settings.get_collections().items():
        if name in registry:
            logger.info(f"Settings collection '{name}' replaces the built-in collection")
        if not directory.is_dir():
            logger.warning(f"Directory for collection '{name}' does not exist: {directory}")
        spec = config.to_spec(name)
        registry.register(spec, DirectoryBundle(directory, spec.prefix), replace=True)

    return registry
