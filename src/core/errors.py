"""Core-mods build exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each build stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class CoreModsError(Exception):
    """Base exception for all core-mods build failures."""


class CoreModsConfigError(CoreModsError):
    """Raised for invalid runtime configuration."""


class CoreModsManifestError(CoreModsError):
    """Raised for unreadable or malformed core mods manifests."""


class CoreModsDateError(CoreModsError):
    """Raised when a timestamp string cannot be parsed."""


class CoreModsArchiveError(CoreModsError):
    """Raised when a qmod archive cannot be written."""
