"""Core mods manifest reader.

This module parses ``core_mods.json`` into typed manifest entries.
Key order of the JSON object is preserved as build order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.errors import CoreModsManifestError
from core.types import CoreModsManifest, ManifestEntry, ModReference

_MOD_FIELDS = ("id", "version", "downloadLink")


def read_core_mods_manifest(manifest_path: Path) -> CoreModsManifest:
    """Load and validate the core mods manifest.

    Args:
        manifest_path: Path to the manifest JSON file.

    Returns:
        Typed manifest with entries in file key order.

    Raises:
        CoreModsManifestError: If the file is missing or malformed.
    """
    if not manifest_path.is_file():
        raise CoreModsManifestError(
            f"Core mods manifest not found at {manifest_path}. "
            "Provide core_mods.json or set COREMODS_MANIFEST_PATH."
        )
    try:
        payload = json.loads(manifest_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise CoreModsManifestError(
            f"Failed to parse core mods manifest at {manifest_path}: "
            f"{error.msg} (line {error.lineno}, column {error.colno})."
        ) from error
    if not isinstance(payload, dict):
        raise CoreModsManifestError(
            f"Failed to parse core mods manifest at {manifest_path}: "
            "expected JSON object keyed by game version."
        )
    entries = tuple(
        _parse_entry(manifest_path, str(game_version), raw_entry)
        for game_version, raw_entry in payload.items()
    )
    return CoreModsManifest(entries=entries)


def _parse_entry(manifest_path: Path, game_version: str, raw_entry: Any) -> ManifestEntry:
    """Parse one game version record."""
    if not isinstance(raw_entry, dict):
        raise CoreModsManifestError(
            f"Invalid entry '{game_version}' in {manifest_path}: expected JSON object."
        )
    last_updated = raw_entry.get("lastUpdated")
    if not isinstance(last_updated, str):
        raise CoreModsManifestError(
            f"Invalid entry '{game_version}' in {manifest_path}: "
            "lastUpdated must be an ISO-8601 timestamp string."
        )
    raw_mods = raw_entry.get("mods")
    if not isinstance(raw_mods, list):
        raise CoreModsManifestError(
            f"Invalid entry '{game_version}' in {manifest_path}: mods must be a list."
        )
    mods = tuple(
        _parse_mod(manifest_path, game_version, index, raw_mod)
        for index, raw_mod in enumerate(raw_mods)
    )
    return ManifestEntry(game_version=game_version, last_updated=last_updated, mods=mods)


def _parse_mod(
    manifest_path: Path,
    game_version: str,
    index: int,
    raw_mod: Any,
) -> ModReference:
    """Parse one mod reference."""
    location = f"'{game_version}'.mods[{index}] in {manifest_path}"
    if not isinstance(raw_mod, dict):
        raise CoreModsManifestError(f"Invalid mod {location}: expected JSON object.")
    missing = [name for name in _MOD_FIELDS if not isinstance(raw_mod.get(name), str)]
    if missing:
        raise CoreModsManifestError(
            f"Invalid mod {location}: missing string fields {', '.join(missing)}."
        )
    return ModReference(
        id=raw_mod["id"],
        version=raw_mod["version"],
        download_link=raw_mod["downloadLink"],
    )
