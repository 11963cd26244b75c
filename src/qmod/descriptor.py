"""Package descriptor construction for core mod bundles.

This module maps a manifest entry onto the mod.json schema.
Loader selection uses a plain string comparison on the game version.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.constants import (
    DEPENDENCY_VERSION_PREFIX,
    DESCRIPTOR_AUTHOR,
    DESCRIPTOR_JSON_INDENT,
    LEGACY_MOD_LOADER,
    LOADER_SWITCH_VERSION,
    MODERN_MOD_LOADER,
    QP_SCHEMA_VERSION,
    TARGET_PACKAGE_ID,
)
from core.dates import parse_utc_date, semver_date
from core.types import DependencySpec, ManifestEntry, ModReference, PackageDescriptor


def resolve_mod_loader(game_version: str) -> str:
    """Pick the mod loader for a game version.

    Versions sorting lexicographically after the switch version use
    Scotland2. ``"1.9.0"`` vs ``"1.10.0"`` compares as text, not numbers.

    Args:
        game_version: Game version key from the manifest.

    Returns:
        Loader name.
    """
    if game_version > LOADER_SWITCH_VERSION:
        return MODERN_MOD_LOADER
    return LEGACY_MOD_LOADER


def build_package_descriptor(entry: ManifestEntry) -> PackageDescriptor:
    """Build the descriptor for one manifest entry.

    Args:
        entry: Parsed manifest entry.

    Returns:
        Descriptor ready for serialization.

    Raises:
        CoreModsDateError: If ``last_updated`` cannot be parsed.
    """
    game_version = entry.game_version
    last_updated = parse_utc_date(entry.last_updated)
    return PackageDescriptor(
        qp_version=QP_SCHEMA_VERSION,
        name=f"Core mods for {game_version}",
        id=f"CoreMods_{game_version}",
        author=DESCRIPTOR_AUTHOR,
        description=f"Downloads all Core mods for Beat Saber version {game_version}",
        version=semver_date(last_updated),
        package_id=TARGET_PACKAGE_ID,
        package_version=game_version,
        mod_loader=resolve_mod_loader(game_version),
        dependencies=tuple(_build_dependency(mod) for mod in entry.mods),
    )


def _build_dependency(mod: ModReference) -> DependencySpec:
    return DependencySpec(
        id=mod.id,
        version=f"{DEPENDENCY_VERSION_PREFIX}{mod.version}",
        download_if_missing=mod.download_link,
    )


def descriptor_to_payload(descriptor: PackageDescriptor) -> dict[str, Any]:
    """Convert a descriptor into its mod.json field layout."""
    return {
        "_QPVersion": descriptor.qp_version,
        "name": descriptor.name,
        "id": descriptor.id,
        "author": descriptor.author,
        "description": descriptor.description,
        "version": descriptor.version,
        "packageId": descriptor.package_id,
        "packageVersion": descriptor.package_version,
        "modloader": descriptor.mod_loader,
        "modFiles": list(descriptor.mod_files),
        "libraryFiles": list(descriptor.library_files),
        "fileCopies": list(descriptor.file_copies),
        "copyExtensions": list(descriptor.copy_extensions),
        "dependencies": [
            {
                "id": dependency.id,
                "version": dependency.version,
                "downloadIfMissing": dependency.download_if_missing,
            }
            for dependency in descriptor.dependencies
        ],
    }


def render_descriptor_json(descriptor: PackageDescriptor) -> str:
    """Serialize a descriptor as 2-space indented JSON."""
    payload = descriptor_to_payload(descriptor)
    return json.dumps(payload, indent=DESCRIPTOR_JSON_INDENT, ensure_ascii=False)


def write_descriptor_file(descriptor: PackageDescriptor, descriptor_path: Path) -> Path:
    """Write descriptor JSON to disk.

    Args:
        descriptor: Descriptor to serialize.
        descriptor_path: Destination mod.json path.

    Returns:
        The written path.
    """
    descriptor_path.parent.mkdir(parents=True, exist_ok=True)
    descriptor_path.write_text(render_descriptor_json(descriptor), encoding="utf-8")
    return descriptor_path
