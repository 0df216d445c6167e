"""Tests for AssetRegistry and the default registry factory."""

import pytest
import yaml

from glyphkit.bundles import MemoryBundle
from glyphkit.errors import CollectionConfigError
from glyphkit.errors import UnknownCollectionError
from glyphkit.paths import create_asset_registry
from glyphkit.registry import AssetRegistry
from glyphkit.schema import FONTS
from glyphkit.schema import UI_ICONS
from glyphkit.settings import AppSettings
from glyphkit.settings import SettingsPaths


@pytest.fixture
def registry(font_bundle):
    registry = AssetRegistry()
    registry.register(FONTS, font_bundle)
    registry.register(UI_ICONS, MemoryBundle.from_files(UI_ICONS.prefix, {"fi-tr-user.svg": b"<svg/>"}))
    return registry


class TestAssetRegistry:
    def test_get_and_membership(self, registry):
        assert registry.names() == ["fonts", "uiicons"]
        assert "fonts" in registry
        assert "svg" not in registry
        assert len(registry) == 2
        assert [c.name for c in registry] == ["fonts", "uiicons"]
        assert registry.get("fonts").prefix == "glyphkit.fonts"

    def test_unknown_collection(self, registry):
        with pytest.raises(UnknownCollectionError) as exc_info:
            registry.get("emoji")

        assert isinstance(exc_info.value, KeyError)
        assert "emoji" in str(exc_info.value)
        assert "fonts, uiicons" in str(exc_info.value)

    def test_duplicate_registration(self, registry):
        with pytest.raises(ValueError, match="already registered"):
            registry.register(FONTS, MemoryBundle())

        replacement = registry.register(FONTS, MemoryBundle(), replace=True)
        assert registry.get("fonts") is replacement
        assert len(replacement) == 0

    def test_unregister(self, registry):
        assert registry.unregister("uiicons")
        assert not registry.unregister("uiicons")
        assert registry.names() == ["fonts"]

    def test_resolve_and_open(self, registry):
        assert registry.resolve("fonts", "Cairo-Bold") == "glyphkit.fonts.Cairo.Cairo-Bold.ttf"
        assert registry.resolve("uiicons", "fi-tr-user") == "glyphkit.icons.uiicons.fi-tr-user.svg"
        assert registry.resolve("fonts", "Missing") is None
        assert registry.open("fonts", "Missing") is None

        stream = registry.open("uiicons", "FI-TR-USER.SVG")
        assert stream is not None
        with stream:
            assert stream.read() == b"<svg/>"

    def test_collections_have_independent_indexes(self, registry):
        registry.resolve("fonts", "Cairo-Bold")

        assert registry.get("fonts").index.is_built
        assert not registry.get("uiicons").index.is_built


def _settings(root) -> AppSettings:
    return AppSettings(
        SettingsPaths(
            global_settings=root / "home" / ".glyphkit" / "settings.yaml",
            project_settings=root / "project" / ".glyphkit" / "settings.yaml",
            local_settings=root / "project" / ".glyphkit" / "settings.local.yaml",
        )
    )


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data))


class TestCreateAssetRegistry:
    def test_builtins_registered(self, tmp_path):
        registry = create_asset_registry(_settings(tmp_path))

        assert registry.names() == ["fonts", "svg", "uiicons"]
        assert registry.resolve("uiicons", "fi-tr-search-alt") == "glyphkit.icons.uiicons.fi-tr-search-alt.svg"
        assert registry.resolve("svg", "arrows/001-arrow-up") == "glyphkit.icons.svg.arrows.001-arrow-up.svg"
        assert registry.resolve("svg", "svg/arrows/001-arrow-up.svg") == "glyphkit.icons.svg.arrows.001-arrow-up.svg"
        assert registry.resolve("uiicons", "uiicons/fi-tr-user.svg") == "glyphkit.icons.uiicons.fi-tr-user.svg"
        assert registry.resolve("fonts", "Cairo-Bold") is None

    def test_indexes_are_not_built_eagerly(self, tmp_path):
        registry = create_asset_registry(_settings(tmp_path))

        assert not any(c.index.is_built for c in registry)

    def test_without_builtins(self, tmp_path):
        assert len(create_asset_registry(_settings(tmp_path), include_builtins=False)) == 0

    def test_disabled_builtins(self, tmp_path):
        settings = _settings(tmp_path)
        _write(settings.paths.project_settings, {"disabled_builtins": ["svg", "fonts"]})

        assert create_asset_registry(settings).names() == ["uiicons"]

    def test_settings_collection(self, tmp_path):
        icons = tmp_path / "project" / "assets" / "brand"
        icons.mkdir(parents=True)
        (icons / "logo.svg").write_bytes(b"<svg>logo</svg>")
        settings = _settings(tmp_path)
        _write(
            settings.paths.project_settings,
            {"collections": {"brand": {"prefix": "acme.brand", "path": "assets/brand", "folder_alias": "brand"}}},
        )

        registry = create_asset_registry(settings)

        assert registry.names() == ["fonts", "svg", "uiicons", "brand"]
        assert registry.resolve("brand", "brand/logo.svg") == "acme.brand.logo.svg"
        assert registry.resolve("brand", "LOGO") == "acme.brand.logo.svg"
        assert registry.get("brand").read_bytes("logo") == b"<svg>logo</svg>"

    def test_settings_collection_replaces_builtin(self, tmp_path):
        fonts_dir = tmp_path / "fonts"
        (fonts_dir / "Cairo").mkdir(parents=True)
        (fonts_dir / "Cairo" / "Cairo-Bold.ttf").write_bytes(b"font")
        settings = _settings(tmp_path)
        _write(
            settings.paths.global_settings,
            {
                "collections": {
                    "fonts": {
                        "prefix": "glyphkit.fonts",
                        "path": str(fonts_dir),
                        "extensions": [".ttf", ".otf"],
                    }
                }
            },
        )

        registry = create_asset_registry(settings)

        assert registry.names() == ["fonts", "svg", "uiicons"]
        assert registry.resolve("fonts", "Cairo/Cairo-Bold") == "glyphkit.fonts.Cairo.Cairo-Bold.ttf"

    def test_invalid_settings_collection(self, tmp_path):
        settings = _settings(tmp_path)
        _write(settings.paths.project_settings, {"collections": {"broken": {"path": "x"}}})

        with pytest.raises(CollectionConfigError):
            create_asset_registry(settings)

    def test_default_settings_use_home_and_cwd(self, isolated_home):
        brand = isolated_home["project"] / "icons"
        brand.mkdir()
        (brand / "mark.svg").write_bytes(b"<svg/>")
        _write(
            isolated_home["project"] / ".glyphkit" / "settings.yaml",
            {"collections": {"brand": {"prefix": "acme.brand", "path": "icons"}}},
        )

        registry = create_asset_registry()

        assert registry.resolve("brand", "mark") == "acme.brand.mark.svg"
