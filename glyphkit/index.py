"""Resource index for one asset collection.

The index enumerates the canonical identifiers a bundle offers for a
collection and maps every accepted alias key to its identifier:

- the identifier itself
- filename with extension (``Cairo-Bold.ttf``)
- dot-qualified remainder (``Cairo.Cairo-Bold.ttf``)
- slash-qualified remainder (``Cairo/Cairo-Bold.ttf``) and its backslash form,
  for files inside a folder

Keys are matched case-insensitively and the first identifier to claim a key
keeps it. The slash form only replaces the first dot of the remainder, so
exactly one folder level is representable. ``JetBrains_Mono/static/X.ttf``
is indexed as ``JetBrains_Mono/static.X.ttf``; nested folders must be looked
up by filename or dot-qualified name instead.

The index is built lazily, once, under a lock. The published structures are
immutable so readers never need the lock after the first build.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .bundles import AssetBundle
from .schema import CollectionSpec

logger = logging.getLogger(__name__)


def file_key(remainder: str) -> str:
    """Return the filename-with-extension part of a dot-separated remainder."""
    parts = remainder.split(".")
    if len(parts) >= 2:
        return f"{parts[-2]}.{parts[-1]}"
    return remainder


def slash_key(remainder: str) -> str:
    """Replace the first dot of a remainder with a slash (one folder level)."""
    first_dot = remainder.find(".")
    if first_dot > 0:
        return remainder[:first_dot] + "/" + remainder[first_dot + 1 :]
    return remainder


@dataclass(frozen=True)
class _Snapshot:
    names: tuple[str, ...]
    name_set: frozenset[str]
    by_casefold: Mapping[str, str]
    aliases: Mapping[str, str]
    file_names: tuple[str, ...]


class ResourceIndex:
    """Lazily built, immutable lookup tables for one collection."""

    def __init__(self, spec: CollectionSpec, bundle: AssetBundle):
        self.spec = spec
        self.bundle = bundle
        self.build_count = 0
        self._lock = threading.Lock()
        self._snapshot: _Snapshot | None = None

    @property
    def is_built(self) -> bool:
        return self._snapshot is not None

    def _get(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._build()
                self.build_count += 1
            return self._snapshot

    def _belongs(self, identifier: str) -> bool:
        return identifier.startswith(self.spec.prefix + ".") and self.spec.has_extension(identifier)

    def _build(self) -> _Snapshot:
        names = tuple(n for n in self.bundle.names() if self._belongs(n))
        strip = len(self.spec.prefix) + 1

        aliases: dict[str, str] = {}
        by_casefold: dict[str, str] = {}
        files: dict[str, str] = {}

        def add(key: str, identifier: str) -> None:
            if key and key.strip():
                aliases.setdefault(key.casefold(), identifier)

        for identifier in names:
            by_casefold.setdefault(identifier.casefold(), identifier)
            remainder = identifier[strip:]

            add(identifier, identifier)
            filename = file_key(remainder)
            add(filename, identifier)
            files.setdefault(filename.casefold(), filename)

            add(remainder, identifier)
            # Root-level files have no folder to put a slash after
            if remainder.count(".") >= 2:
                slashed = slash_key(remainder)
                add(slashed, identifier)
                add(slashed.replace("/", "\\"), identifier)

        logger.debug(f"Indexed {len(names)} assets ({len(aliases)} keys) for collection '{self.spec.name}'")
        return _Snapshot(
            names=names,
            name_set=frozenset(names),
            by_casefold=MappingProxyType(by_casefold),
            aliases=MappingProxyType(aliases),
            file_names=tuple(files.values()),
        )

    # ----- Read API -----

    @property
    def names(self) -> tuple[str, ...]:
        """All canonical identifiers, in bundle discovery order."""
        return self._get().names

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only map of casefolded alias key to canonical identifier."""
        return self._get().aliases

    def file_names(self) -> tuple[str, ...]:
        """Distinct filenames (case-insensitive), in discovery order."""
        return self._get().file_names

    def contains(self, identifier: str) -> bool:
        """Exact (case-sensitive) membership test."""
        return identifier in self._get().name_set

    def lookup(self, key: str) -> str | None:
        """Look up an alias key, ignoring case."""
        return self._get().aliases.get(key.casefold())

    def lookup_identifier(self, identifier: str) -> str | None:
        """Case-insensitive membership test returning the stored identifier."""
        return self._get().by_casefold.get(identifier.casefold())

    def find_suffix(self, suffix: str) -> str | None:
        """First identifier ending with ``suffix``, ignoring case."""
        folded = suffix.casefold()
        for identifier in self._get().names:
            if identifier.casefold().endswith(folded):
                return identifier
        return None

    def __len__(self) -> int:
        return len(self._get().names)

    def __repr__(self) -> str:
        state = f"{len(self._snapshot.names)} assets" if self._snapshot else "not built"
        return f"ResourceIndex({self.spec.name!r}, {state})"
