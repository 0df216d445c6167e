"""Settings management for glyphkit.

Scope-aware YAML settings, most specific scope wins:

1. local (.glyphkit/settings.local.yaml) - gitignored, machine-specific
2. project (.glyphkit/settings.yaml) - committed, team-shared
3. global (~/.glyphkit/settings.yaml) - user defaults

Example settings.yaml::

    collections:
      brand-icons:
        prefix: acme.icons
        path: assets/icons          # relative to the folder holding .glyphkit/
        extensions: [".svg"]
    disabled_builtins: [uiicons]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import yaml
from pydantic import ValidationError

from .errors import CollectionConfigError
from .schema import CollectionConfig

logger = logging.getLogger(__name__)

Scope = Literal["local", "project", "global"]

# Lowest precedence first
SCOPE_ORDER: tuple[Scope, ...] = ("global", "project", "local")


@dataclass
class SettingsPaths:
    """Standard paths for settings files."""

    global_settings: Path
    project_settings: Path
    local_settings: Path

    @classmethod
    def default(cls) -> SettingsPaths:
        """Create default paths for the standard glyphkit layout."""
        return cls(
            global_settings=Path.home() / ".glyphkit" / "settings.yaml",
            project_settings=Path.cwd() / ".glyphkit" / "settings.yaml",
            local_settings=Path.cwd() / ".glyphkit" / "settings.local.yaml",
        )


class AppSettings:
    """Simple settings manager with scope-aware merging.

    Usage:
        settings = AppSettings()
        collections = settings.get_collections()
        settings.add_collection("brand", CollectionConfig(prefix="acme", path="icons"), scope="project")
    """

    def __init__(self, paths: SettingsPaths | None = None) -> None:
        self.paths = paths or SettingsPaths.default()

    def get_merged_settings(self) -> dict[str, Any]:
        """Load and merge settings from all scopes."""
        result: dict[str, Any] = {}
        for scope in SCOPE_ORDER:
            result = self._deep_merge(result, self._read_scope(scope))
        return result

    # ----- Collection settings -----

    def get_collections(self) -> dict[str, tuple[CollectionConfig, Path]]:
        """Get declared collections with their resolved directories.

        Relative ``path`` values are resolved against the directory that holds
        the scope's ``.glyphkit`` folder, so a project setting of
        ``assets/icons`` means ``<project>/assets/icons``.

        Returns:
            Mapping of collection name to (config, absolute directory)

        Raises:
            CollectionConfigError: If an entry fails validation
        """
        result: dict[str, tuple[CollectionConfig, Path]] = {}
        for scope in SCOPE_ORDER:
            entries = self._read_scope(scope).get("collections") or {}
            if not isinstance(entries, dict):
                raise CollectionConfigError(f"'collections' in {self._get_scope_path(scope)} must be a mapping")
            base = self._get_scope_path(scope).parent.parent
            for name, raw in entries.items():
                if raw is None:
                    # An explicit null in a more specific scope removes the entry
                    result.pop(str(name), None)
                    continue
                try:
                    config = CollectionConfig.model_validate(raw)
                    config.to_spec(str(name))
                except ValidationError as e:
                    raise CollectionConfigError(
                        f"Invalid collection '{name}' in {self._get_scope_path(scope)}: {e}"
                    ) from e
                directory = Path(config.path).expanduser()
                if not directory.is_absolute():
                    directory = base / directory
                result[str(name)] = (config, directory)
        return result

    def add_collection(self, name: str, config: CollectionConfig, scope: Scope = "project") -> None:
        """Declare a collection at the specified scope."""
        settings = self._read_scope(scope)
        collections = settings.get("collections") or {}
        collections[name] = config.model_dump(exclude_defaults=False)
        settings["collections"] = collections
        self._write_scope(scope, settings)
        logger.info(f"Added collection '{name}' to {scope} settings")

    def remove_collection(self, name: str, scope: Scope = "project") -> bool:
        """Remove a declared collection. Returns True if it was present."""
        settings = self._read_scope(scope)
        collections = settings.get("collections") or {}
        if name not in collections:
            return False
        del collections[name]
        if collections:
            settings["collections"] = collections
        else:
            settings.pop("collections", None)
        self._write_scope(scope, settings)
        logger.info(f"Removed collection '{name}' from {scope} settings")
        return True

    def get_disabled_builtins(self) -> set[str]:
        """Built-in collections the user has switched off."""
        value = self.get_merged_settings().get("disabled_builtins") or []
        if isinstance(value, str):
            value = [value]
        return {str(v) for v in value}

    # ----- Scope utilities -----

    def _get_scope_path(self, scope: Scope) -> Path:
        """Get settings file path for scope."""
        return {
            "local": self.paths.local_settings,
            "project": self.paths.project_settings,
            "global": self.paths.global_settings,
        }[scope]

    def _read_scope(self, scope: Scope) -> dict[str, Any]:
        """Read settings from a specific scope. Malformed files read as empty."""
        path = self._get_scope_path(scope)
        if not path.exists():
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Skipping unreadable settings file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Skipping settings file {path}: top level is not a mapping")
            return {}
        return data

    def _write_scope(self, scope: Scope, settings: dict[str, Any]) -> None:
        """Write settings to a specific scope."""
        path = self._get_scope_path(scope)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(settings, f, default_flow_style=False)

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dicts, overlay wins."""
        result = base.copy()
        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


def get_settings() -> AppSettings:
    """Get a settings instance with default paths."""
    return AppSettings()
