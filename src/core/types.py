"""Shared typed models.

This module defines immutable data models used by the manifest reader,
descriptor builder, and build pipeline to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ModReference:
    """One core mod pinned for a game version.

    Attributes:
        id: Mod identifier.
        version: Mod version without range prefix.
        download_link: URL the mod can be fetched from.
    """

    id: str
    version: str
    download_link: str


@dataclass(frozen=True)
class ManifestEntry:
    """Core mods record for a single game version.

    Attributes:
        game_version: Game version key from the manifest.
        last_updated: Raw ISO-8601 UTC timestamp string.
        mods: Ordered core mod references.
    """

    game_version: str
    last_updated: str
    mods: tuple[ModReference, ...]


@dataclass(frozen=True)
class CoreModsManifest:
    """Parsed manifest with entries in file key order."""

    entries: tuple[ManifestEntry, ...]

    def find_entry(self, game_version: str) -> ManifestEntry | None:
        """Return the entry for a game version, if present."""
        for entry in self.entries:
            if entry.game_version == game_version:
                return entry
        return None


@dataclass(frozen=True)
class DependencySpec:
    """Descriptor dependency derived from a mod reference."""

    id: str
    version: str
    download_if_missing: str


@dataclass(frozen=True)
class PackageDescriptor:
    """Generated mod.json contents for one game version.

    Attributes:
        qp_version: Descriptor schema version tag.
        name: Display name.
        id: Package identifier.
        author: Package author.
        description: Human readable description.
        version: Semver-like version derived from the last-updated date.
        package_id: Target game package id.
        package_version: Target game version.
        mod_loader: Resolved loader name.
        dependencies: Dependencies in manifest order.
        mod_files: Always empty for core mod bundles.
        library_files: Always empty for core mod bundles.
        file_copies: Always empty for core mod bundles.
        copy_extensions: Always empty for core mod bundles.
    """

    qp_version: str
    name: str
    id: str
    author: str
    description: str
    version: str
    package_id: str
    package_version: str
    mod_loader: str
    dependencies: tuple[DependencySpec, ...]
    mod_files: tuple[str, ...] = ()
    library_files: tuple[str, ...] = ()
    file_copies: tuple[str, ...] = ()
    copy_extensions: tuple[str, ...] = ()


@dataclass(frozen=True)
class BuildResult:
    """Outputs of one core-mods build run.

    Attributes:
        index_path: Generated index.html path.
        archive_paths: Generated qmod archives in manifest order.
    """

    index_path: Path
    archive_paths: tuple[Path, ...]
