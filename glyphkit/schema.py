"""Pydantic schemas for asset collections."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if not ext:
        raise ValueError("extension must not be empty")
    return ext if ext.startswith(".") else f".{ext}"


class CollectionSpec(BaseModel):
    """Identity of one asset collection.

    ``extensions`` is ordered by preference: the first entry is the default
    extension appended to names given without one, the rest are tried in
    order when the default does not match.

    When ``folder_alias`` is set, names may start with that folder
    (``uiicons/fi-tr-user.svg``) and folder paths of any depth are accepted:
    they are reduced to their file name or turned into a dot path.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Collection name used by the registry and CLI")
    prefix: str = Field(..., description="Prefix shared by every canonical identifier")
    extensions: tuple[str, ...] = Field(..., description="Recognized extensions, preferred first")
    description: str = Field(default="", description="Human-readable description")
    folder_alias: str = Field(default="", description="Leading folder name accepted in asset paths")

    @field_validator("folder_alias")
    @classmethod
    def _check_folder_alias(cls, value: str) -> str:
        return value.strip().strip("/\\")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("collection name must not be empty")
        return value

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        value = value.strip().rstrip(".")
        if not value:
            raise ValueError("collection prefix must not be empty")
        return value

    @field_validator("extensions", mode="before")
    @classmethod
    def _check_extensions(cls, value):
        if isinstance(value, str):
            value = [value]
        normalized: list[str] = []
        for ext in value or []:
            ext = _normalize_extension(str(ext))
            if ext not in normalized:
                normalized.append(ext)
        if not normalized:
            raise ValueError("at least one extension is required")
        return tuple(normalized)

    @property
    def default_extension(self) -> str:
        return self.extensions[0]

    def has_extension(self, name: str) -> bool:
        """Check whether ``name`` ends with one of the recognized extensions."""
        lowered = name.lower()
        return any(lowered.endswith(ext) for ext in self.extensions)


class CollectionConfig(BaseModel):
    """A collection declared in settings.yaml under ``collections:``."""

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(..., description="Identifier prefix for the collection")
    path: str = Field(..., description="Directory holding the asset files")
    extensions: list[str] = Field(default_factory=lambda: [".svg"], description="Recognized extensions")
    description: str = Field(default="", description="Human-readable description")
    folder_alias: str = Field(default="", description="Leading folder name accepted in asset paths")

    def to_spec(self, name: str) -> CollectionSpec:
        """Build the collection spec for this entry."""
        return CollectionSpec(
            name=name,
            prefix=self.prefix,
            extensions=self.extensions,
            description=self.description,
            folder_alias=self.folder_alias,
        )


FONTS = CollectionSpec(
    name="fonts",
    prefix="glyphkit.fonts",
    extensions=(".ttf", ".otf"),
    description="Bundled TrueType/OpenType font families",
)

SVG_ICONS = CollectionSpec(
    name="svg",
    prefix="glyphkit.icons.svg",
    extensions=(".svg",),
    description="General purpose SVG icons",
    folder_alias="svg",
)

UI_ICONS = CollectionSpec(
    name="uiicons",
    prefix="glyphkit.icons.uiicons",
    extensions=(".svg",),
    description="UI icon set (fi-tr-*)",
    folder_alias="uiicons",
)

BUILTIN_COLLECTIONS: tuple[CollectionSpec, ...] = (FONTS, SVG_ICONS, UI_ICONS)
