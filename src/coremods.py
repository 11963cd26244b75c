"""Public surface for core-mods builds.

This module provides a stable import path for build scripts.
It re-exports the build entry point and typed models.
"""

from __future__ import annotations

from core.config import BuildConfig
from core.dates import parse_utc_date, semver_date
from core.types import (
    BuildResult,
    CoreModsManifest,
    DependencySpec,
    ManifestEntry,
    ModReference,
    PackageDescriptor,
)
from manifest.manifest_reader import read_core_mods_manifest
from qmod.archiver import ArchiveCallable, zip_archive
from qmod.build_pipeline import run_core_mods_build
from qmod.descriptor import build_package_descriptor, resolve_mod_loader

__all__ = [
    "ArchiveCallable",
    "BuildConfig",
    "BuildResult",
    "CoreModsManifest",
    "DependencySpec",
    "ManifestEntry",
    "ModReference",
    "PackageDescriptor",
    "build_package_descriptor",
    "parse_utc_date",
    "read_core_mods_manifest",
    "resolve_mod_loader",
    "run_core_mods_build",
    "semver_date",
    "zip_archive",
]
