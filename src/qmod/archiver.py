"""Archive and file timestamp helpers for qmod outputs.

This module holds the default zip archiver and the filesystem steps
around it. The build pipeline accepts any callable with the same shape.
"""

from __future__ import annotations

from datetime import datetime
import os
from pathlib import Path
from typing import Callable, Sequence
import zipfile

from core.dates import to_epoch_nanoseconds
from core.errors import CoreModsArchiveError
from core.logging_config import get_logger

ArchiveCallable = Callable[[Sequence[Path], Path], None]

_LOGGER = get_logger(__name__)


def zip_archive(files: Sequence[Path], output_path: Path) -> None:
    """Compress files into a zip archive, each stored under its base name.

    Args:
        files: Files to include.
        output_path: Destination archive path.

    Raises:
        CoreModsArchiveError: If any file cannot be read or the archive
            cannot be written.
    """
    try:
        with zipfile.ZipFile(
            output_path,
            "w",
            compression=zipfile.ZIP_DEFLATED,
            strict_timestamps=False,
        ) as archive:
            for file_path in files:
                archive.write(file_path, arcname=file_path.name)
    except (OSError, zipfile.BadZipFile) as error:
        raise CoreModsArchiveError(
            f"Failed to write archive {output_path}: {error}. "
            "Check that the deploy root is writable."
        ) from error


def stamp_file_times(file_path: Path, moment: datetime) -> None:
    """Set access and modification time of a file to an exact moment."""
    timestamp_ns = to_epoch_nanoseconds(moment)
    os.utime(file_path, ns=(timestamp_ns, timestamp_ns))


def remove_stale_archive(archive_path: Path) -> None:
    """Delete a previously built archive, ignoring removal failures."""
    try:
        archive_path.unlink()
    except OSError as error:
        _LOGGER.debug("stale_archive_skipped", path=str(archive_path), reason=str(error))
