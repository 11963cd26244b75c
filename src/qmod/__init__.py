"""Qmod packaging layer.

This module builds package descriptors, writes qmod archives,
and renders the static index that links them.
"""
