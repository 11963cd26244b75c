"""Static index page writer.

The page is built incrementally: header before the first archive,
one list item per archive, footer once all entries are done.
"""

from __future__ import annotations

from pathlib import Path


class IndexPageWriter:
    """Append-only writer for the archive index page."""

    def __init__(self, index_path: Path, title: str) -> None:
        self._index_path = index_path
        self._title = title

    @property
    def index_path(self) -> Path:
        return self._index_path

    def open(self) -> None:
        """Write the page header, replacing any previous page."""
        header = f"<html><head><title>{self._title}</title></head><body><ul>"
        self._index_path.write_text(header, encoding="utf-8")

    def append_archive_link(self, archive_name: str) -> None:
        """Append one list item linking an archive file name."""
        self._append(f'<li><a href="{archive_name}">{archive_name}</a></li>')

    def close(self) -> None:
        """Write the closing tags."""
        self._append("</ul></body></html>")

    def _append(self, fragment: str) -> None:
        with self._index_path.open("a", encoding="utf-8") as handle:
            handle.write(fragment)
