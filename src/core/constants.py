"""Core constants used across core-mods build modules.

This module centralizes file names, descriptor literals, and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_MANIFEST_PATH = Path("core_mods.json")
DEFAULT_DEPLOY_ROOT = Path(".")
DEFAULT_STAGING_DIR = Path(".")
DEFAULT_INDEX_TITLE = "Beat Saber Core Mods"
INDEX_FILE_NAME = "index.html"
DESCRIPTOR_FILE_NAME = "mod.json"
ARCHIVE_EXTENSION = ".qmod"
QP_SCHEMA_VERSION = "0.1.1"
DESCRIPTOR_AUTHOR = "QuestPackageManager"
TARGET_PACKAGE_ID = "com.beatgames.beatsaber"
LOADER_SWITCH_VERSION = "1.28.0_4124311467"
MODERN_MOD_LOADER = "Scotland2"
LEGACY_MOD_LOADER = "QuestLoader"
DEPENDENCY_VERSION_PREFIX = "^"
DESCRIPTOR_JSON_INDENT = 2
