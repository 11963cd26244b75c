"""Core-mods build orchestration.

This module runs the sequential build: one descriptor, one archive,
and one index link per manifest entry, in manifest order.
"""

from __future__ import annotations

from pathlib import Path

from core.config import BuildConfig
from core.constants import ARCHIVE_EXTENSION, DESCRIPTOR_FILE_NAME, INDEX_FILE_NAME
from core.dates import parse_utc_date
from core.logging_config import get_logger
from core.types import BuildResult, ManifestEntry
from manifest.manifest_reader import read_core_mods_manifest
from qmod.archiver import ArchiveCallable, remove_stale_archive, stamp_file_times, zip_archive
from qmod.descriptor import build_package_descriptor, write_descriptor_file
from qmod.index_page import IndexPageWriter

_LOGGER = get_logger(__name__)


class CoreModsBuildRunner:
    """Runner that turns a manifest into qmod archives and an index page."""

    def __init__(self, config: BuildConfig, archiver: ArchiveCallable = zip_archive) -> None:
        self._config = config
        self._archiver = archiver
        self._descriptor_path = config.staging_dir / DESCRIPTOR_FILE_NAME

    def run(self) -> BuildResult:
        """Execute the build and return generated output paths.

        Raises:
            CoreModsError: On the first manifest, date, or archive failure.
        """
        manifest = read_core_mods_manifest(self._config.manifest_path)
        _LOGGER.info(
            "manifest_loaded",
            manifest_path=str(self._config.manifest_path),
            entry_count=len(manifest.entries),
        )
        self._config.deploy_root.mkdir(parents=True, exist_ok=True)
        index_page = IndexPageWriter(
            self._config.deploy_root / INDEX_FILE_NAME, self._config.index_title
        )
        index_page.open()
        archive_paths: list[Path] = []
        for entry in manifest.entries:
            archive_path = self._build_entry(entry)
            index_page.append_archive_link(archive_path.name)
            archive_paths.append(archive_path)
        index_page.close()
        _LOGGER.info(
            "core_mods_build_completed",
            index_path=str(index_page.index_path),
            archive_count=len(archive_paths),
        )
        return BuildResult(index_path=index_page.index_path, archive_paths=tuple(archive_paths))

    def _build_entry(self, entry: ManifestEntry) -> Path:
        last_updated = parse_utc_date(entry.last_updated)
        descriptor = build_package_descriptor(entry)
        descriptor_path = write_descriptor_file(descriptor, self._descriptor_path)
        stamp_file_times(descriptor_path, last_updated)
        archive_path = self._config.deploy_root / f"{entry.game_version}{ARCHIVE_EXTENSION}"
        remove_stale_archive(archive_path)
        self._archiver([descriptor_path], archive_path)
        stamp_file_times(archive_path, last_updated)
        descriptor_path.unlink()
        _LOGGER.info(
            "archive_written",
            game_version=entry.game_version,
            archive_path=str(archive_path),
            mod_loader=descriptor.mod_loader,
            dependency_count=len(descriptor.dependencies),
        )
        return archive_path


def run_core_mods_build(
    config: BuildConfig,
    archiver: ArchiveCallable = zip_archive,
) -> BuildResult:
    """Run a full core-mods build.

    Args:
        config: Build configuration, read-only for the whole run.
        archiver: Callable writing ``files`` into an archive at a path.

    Returns:
        Index and archive paths.
    """
    return CoreModsBuildRunner(config, archiver).run()
