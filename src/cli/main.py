"""Core-mods CLI entry points.

This module exposes the build and describe commands.
It maps argparse commands onto build pipeline calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import BuildConfig
from core.errors import CoreModsManifestError
from manifest.manifest_reader import read_core_mods_manifest
from qmod.build_pipeline import run_core_mods_build
from qmod.descriptor import build_package_descriptor, render_descriptor_json


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="coremods",
        description="Build core mods qmod archives and index page",
    )
    parser.add_argument("--manifest", help="Override COREMODS_MANIFEST_PATH for this command")
    parser.add_argument("--deploy-root", help="Override COREMODS_DEPLOY_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command")
    _add_build_command(subparsers)
    _add_describe_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the core-mods CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.manifest, args.deploy_root)
    if args.command in (None, "build"):
        return _run_build_command(config)
    if args.command == "describe":
        return _run_describe_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(manifest: str | None, deploy_root: str | None) -> BuildConfig:
    """Build config with optional per-invocation overrides."""
    config = BuildConfig.from_env()
    if manifest:
        config = replace(config, manifest_path=Path(manifest).expanduser())
    if deploy_root:
        config = replace(config, deploy_root=Path(deploy_root).expanduser())
    return config


def _run_build_command(config: BuildConfig) -> int:
    """Handle build command.

    Args:
        config: Build configuration.

    Returns:
        Exit code.
    """
    result = run_core_mods_build(config)
    print(result.index_path)
    for archive_path in result.archive_paths:
        print(archive_path)
    return 0


def _run_describe_command(config: BuildConfig, args: argparse.Namespace) -> int:
    """Handle describe command.

    Args:
        config: Build configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    manifest = read_core_mods_manifest(config.manifest_path)
    entry = manifest.find_entry(args.game_version)
    if entry is None:
        raise CoreModsManifestError(
            f"Game version '{args.game_version}' not found in {config.manifest_path}. "
            "Use one of the manifest keys."
        )
    print(render_descriptor_json(build_package_descriptor(entry)))
    return 0


def _add_build_command(subparsers: Any) -> None:
    """Register build subcommand."""
    subparsers.add_parser("build", help="Build every qmod archive and index.html (default)")


def _add_describe_command(subparsers: Any) -> None:
    """Register describe subcommand."""
    parser = subparsers.add_parser(
        "describe",
        help="Print the mod.json descriptor for one game version",
    )
    parser.add_argument("game_version", help="Game version key from the manifest")
