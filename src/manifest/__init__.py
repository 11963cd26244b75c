"""Core mods manifest loading.

This module reads the per-game-version manifest into typed entries.
It validates structure before any build output is written.
"""
