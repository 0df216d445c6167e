"""Tests for scoped YAML settings and collection declarations."""

import logging

import pytest
import yaml

from glyphkit.errors import CollectionConfigError
from glyphkit.schema import CollectionConfig
from glyphkit.settings import AppSettings
from glyphkit.settings import SettingsPaths


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(
        SettingsPaths(
            global_settings=tmp_path / "home" / ".glyphkit" / "settings.yaml",
            project_settings=tmp_path / "project" / ".glyphkit" / "settings.yaml",
            local_settings=tmp_path / "project" / ".glyphkit" / "settings.local.yaml",
        )
    )


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data) if not isinstance(data, str) else data)


def test_no_files_means_empty_settings(settings):
    assert settings.get_merged_settings() == {}
    assert settings.get_collections() == {}
    assert settings.get_disabled_builtins() == set()


def test_more_specific_scope_wins(settings):
    """Local overrides project overrides global, merging nested mappings."""
    _write(settings.paths.global_settings, {"collections": {"a": {"prefix": "g.a", "path": "a"}}, "x": 1})
    _write(settings.paths.project_settings, {"collections": {"b": {"prefix": "p.b", "path": "b"}}, "x": 2})
    _write(settings.paths.local_settings, {"x": 3})

    merged = settings.get_merged_settings()

    assert merged["x"] == 3
    assert set(merged["collections"]) == {"a", "b"}


def test_collection_paths_resolve_against_scope_root(settings, tmp_path):
    _write(settings.paths.global_settings, {"collections": {"mine": {"prefix": "me.icons", "path": "icons"}}})
    _write(settings.paths.project_settings, {"collections": {"team": {"prefix": "team.icons", "path": "art/icons"}}})

    collections = settings.get_collections()

    config, directory = collections["mine"]
    assert config.prefix == "me.icons"
    assert config.extensions == [".svg"]
    assert directory == tmp_path / "home" / "icons"
    assert collections["team"][1] == tmp_path / "project" / "art" / "icons"


def test_absolute_collection_path_kept(settings, tmp_path):
    target = tmp_path / "elsewhere"
    _write(settings.paths.project_settings, {"collections": {"x": {"prefix": "x", "path": str(target)}}})

    assert settings.get_collections()["x"][1] == target


def test_null_entry_removes_collection(settings):
    _write(settings.paths.global_settings, {"collections": {"brand": {"prefix": "acme", "path": "icons"}}})
    _write(settings.paths.local_settings, {"collections": {"brand": None}})

    assert settings.get_collections() == {}


@pytest.mark.parametrize(
    "entry",
    [
        {"path": "icons"},
        {"prefix": "acme", "path": "icons", "extensions": []},
        {"prefix": "   ", "path": "icons"},
        "just-a-string",
    ],
)
def test_invalid_collection_raises(settings, entry):
    _write(settings.paths.project_settings, {"collections": {"bad": entry}})

    with pytest.raises(CollectionConfigError, match="bad"):
        settings.get_collections()


def test_collections_must_be_mapping(settings):
    _write(settings.paths.project_settings, {"collections": ["a", "b"]})

    with pytest.raises(CollectionConfigError):
        settings.get_collections()


def test_malformed_file_is_skipped(settings, caplog):
    _write(settings.paths.project_settings, "collections: [unclosed\n")
    _write(settings.paths.global_settings, {"disabled_builtins": ["svg"]})

    with caplog.at_level(logging.WARNING, logger="glyphkit.settings"):
        assert settings.get_disabled_builtins() == {"svg"}

    assert "Skipping unreadable settings file" in caplog.text


def test_non_mapping_file_is_skipped(settings):
    _write(settings.paths.project_settings, "- just\n- a list\n")

    assert settings.get_merged_settings() == {}


def test_disabled_builtins_accepts_single_string(settings):
    _write(settings.paths.project_settings, {"disabled_builtins": "fonts"})

    assert settings.get_disabled_builtins() == {"fonts"}


def test_add_and_remove_collection(settings, tmp_path):
    config = CollectionConfig(prefix="acme.brand", path="assets/brand", extensions=[".svg", ".png"])

    settings.add_collection("brand", config, scope="project")

    written = yaml.safe_load(settings.paths.project_settings.read_text())
    assert written["collections"]["brand"]["prefix"] == "acme.brand"
    assert written["collections"]["brand"]["extensions"] == [".svg", ".png"]

    loaded, directory = settings.get_collections()["brand"]
    assert loaded == config
    assert directory == tmp_path / "project" / "assets" / "brand"

    assert settings.remove_collection("brand", scope="project")
    assert not settings.remove_collection("brand", scope="project")
    assert "collections" not in yaml.safe_load(settings.paths.project_settings.read_text())


def test_add_collection_preserves_other_keys(settings):
    _write(settings.paths.local_settings, {"disabled_builtins": ["uiicons"]})

    settings.add_collection("brand", CollectionConfig(prefix="acme", path="icons"), scope="local")

    written = yaml.safe_load(settings.paths.local_settings.read_text())
    assert written["disabled_builtins"] == ["uiicons"]
    assert "brand" in written["collections"]


def test_default_paths(isolated_home):
    paths = SettingsPaths.default()

    assert paths.global_settings == isolated_home["home"] / ".glyphkit" / "settings.yaml"
    assert paths.project_settings.parent.parent.resolve() == isolated_home["project"].resolve()
    assert paths.local_settings.name == "settings.local.yaml"
