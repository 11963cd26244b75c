"""Runtime configuration model for core-mods builds.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DEPLOY_ROOT,
    DEFAULT_INDEX_TITLE,
    DEFAULT_MANIFEST_PATH,
    DEFAULT_STAGING_DIR,
)
from core.errors import CoreModsConfigError


@dataclass(frozen=True)
class BuildConfig:
    """Validated runtime configuration.

    Attributes:
        manifest_path: Location of the core mods JSON manifest.
        deploy_root: Directory receiving qmod archives and index.html.
        staging_dir: Directory holding the transient mod.json descriptor.
        index_title: Title rendered into the generated index page.
    """

    manifest_path: Path
    deploy_root: Path
    staging_dir: Path
    index_title: str

    @classmethod
    def from_env(cls) -> "BuildConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CoreModsConfigError: If environment values are invalid.
        """
        manifest_value = _read_setting("COREMODS_MANIFEST_PATH", str(DEFAULT_MANIFEST_PATH))
        deploy_value = _read_setting("COREMODS_DEPLOY_ROOT", str(DEFAULT_DEPLOY_ROOT))
        staging_value = _read_setting("COREMODS_STAGING_DIR", str(DEFAULT_STAGING_DIR))
        index_title = _read_setting("COREMODS_INDEX_TITLE", DEFAULT_INDEX_TITLE)
        return cls(
            manifest_path=Path(manifest_value).expanduser(),
            deploy_root=Path(deploy_value).expanduser(),
            staging_dir=Path(staging_value).expanduser(),
            index_title=index_title,
        )


def _read_setting(name: str, default: str) -> str:
    """Read one environment setting, rejecting blank overrides.

    Args:
        name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        Raw setting value.

    Raises:
        CoreModsConfigError: If the variable is set but blank.
    """
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    if not raw_value.strip():
        raise CoreModsConfigError(
            f"Invalid {name} value: expected a non-empty string. "
            f"Unset {name} to use the default '{default}'."
        )
    return raw_value
