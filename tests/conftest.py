"""Pytest configuration and shared fixtures for glyphkit tests."""

from pathlib import Path

import pytest

from glyphkit.bundles import MemoryBundle
from glyphkit.resolver import AssetCollection
from glyphkit.schema import FONTS
from glyphkit.schema import UI_ICONS

FONT_FILES = {
    "Cairo/Cairo-Bold.ttf": b"cairo-bold",
    "Cairo/Cairo-Regular.ttf": b"cairo-regular",
    "Roboto/Roboto-Regular.ttf": b"roboto-regular",
    "Roboto/Roboto_Condensed-Black.ttf": b"roboto-condensed-black",
    "Inter/Inter-Display.otf": b"inter-display-otf",
    "Dual/Dual-Regular.ttf": b"dual-ttf",
    "Dual/Dual-Regular.otf": b"dual-otf",
    "JetBrains_Mono/static/JetBrainsMono-Thin.ttf": b"jetbrains-thin",
    "consolas.ttf": b"consolas",
    "Cairo/OFL.txt": b"license text",
}


@pytest.fixture
def font_bundle() -> MemoryBundle:
    """In-memory font bundle with one- and two-level folders and a root file."""
    return MemoryBundle.from_files(FONTS.prefix, FONT_FILES)


@pytest.fixture
def fonts(font_bundle) -> AssetCollection:
    return AssetCollection(FONTS, font_bundle)


@pytest.fixture
def icons() -> AssetCollection:
    bundle = MemoryBundle.from_files(
        UI_ICONS.prefix,
        {
            "fi-tr-user.svg": b"<svg>user</svg>",
            "fi-tr-add.svg": b"<svg>add</svg>",
        },
    )
    return AssetCollection(UI_ICONS, bundle)


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> dict[str, Path]:
    """Point home and cwd at temporary directories so no real settings are read."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(project)
    return {"home": home, "project": project}
