"""Unit tests for package descriptor construction."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.errors import CoreModsDateError
from core.types import ManifestEntry, ModReference
from qmod.descriptor import (
    build_package_descriptor,
    descriptor_to_payload,
    render_descriptor_json,
    resolve_mod_loader,
    write_descriptor_file,
)


def _sample_entry(game_version: str = "1.0.0") -> ManifestEntry:
    return ManifestEntry(
        game_version=game_version,
        last_updated="2022-06-01T00:00:00Z",
        mods=(ModReference(id="m1", version="1.0", download_link="http://x/m1.zip"),),
    )


@pytest.mark.parametrize(
    ("game_version", "expected_loader"),
    [
        ("1.0.0", "QuestLoader"),
        ("1.28.0_4124311467", "QuestLoader"),
        ("1.28.0_4124311468", "Scotland2"),
        ("2.0.0", "Scotland2"),
        ("1.9.0", "Scotland2"),
        ("1.100.0", "QuestLoader"),
    ],
)
def test_resolve_mod_loader_compares_as_text(game_version: str, expected_loader: str) -> None:
    """Loader choice should follow plain string ordering against the switch version."""
    assert resolve_mod_loader(game_version) == expected_loader


def test_build_package_descriptor_maps_entry_fields() -> None:
    """Descriptor should derive identity, version, and dependencies from the entry."""
    descriptor = build_package_descriptor(_sample_entry())

    payload = descriptor_to_payload(descriptor)

    assert payload["id"] == "CoreMods_1.0.0"
    assert payload["name"] == "Core mods for 1.0.0"
    assert payload["version"] == "2022.06.01-000000000Z"
    assert payload["modloader"] == "QuestLoader"
    assert payload["packageVersion"] == "1.0.0"
    assert payload["dependencies"] == [
        {"id": "m1", "version": "^1.0", "downloadIfMissing": "http://x/m1.zip"}
    ]


def test_descriptor_payload_uses_schema_field_order() -> None:
    """Payload keys should follow the mod.json layout."""
    payload = descriptor_to_payload(build_package_descriptor(_sample_entry("2.0.0")))

    assert list(payload) == [
        "_QPVersion",
        "name",
        "id",
        "author",
        "description",
        "version",
        "packageId",
        "packageVersion",
        "modloader",
        "modFiles",
        "libraryFiles",
        "fileCopies",
        "copyExtensions",
        "dependencies",
    ]
    assert payload["modloader"] == "Scotland2"
    assert payload["modFiles"] == payload["libraryFiles"] == payload["fileCopies"] == []
    assert payload["copyExtensions"] == []


def test_build_package_descriptor_raises_for_bad_date() -> None:
    """Descriptor construction should fail on an unparseable timestamp."""
    entry = ManifestEntry(game_version="1.0.0", last_updated="soon", mods=())

    with pytest.raises(CoreModsDateError):
        build_package_descriptor(entry)

    assert True


def test_write_descriptor_file_uses_two_space_indent(tmp_path: Path) -> None:
    """Descriptor file should be 2-space indented JSON."""
    descriptor = build_package_descriptor(_sample_entry())

    written = write_descriptor_file(descriptor, tmp_path / "mod.json")
    text = written.read_text(encoding="utf-8")

    assert text == render_descriptor_json(descriptor)
    assert '\n  "_QPVersion": "0.1.1",' in text
    assert json.loads(text)["author"] == "QuestPackageManager"
