"""Flat directory scanner for tracked C/C++ sources."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TRACKED_EXTENSIONS = (".c", ".h", ".cpp", ".cc", ".hh")


@dataclass(frozen=True)
class SourceFile:
    """A tracked file and its full text content."""

    filename: str
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"filename": self.filename, "content": self.content}


# Directory-listing order, no duplicate filenames
Snapshot = tuple[SourceFile, ...]


def is_tracked(name: str) -> bool:
    """Return True when *name* carries one of the tracked extensions."""
    return os.path.splitext(name)[1] in TRACKED_EXTENSIONS


def decode_name(name: str | bytes) -> str:
    """Return *name* as valid text, undecodable bytes replaced with U+FFFD."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF line endings byte-for-byte
    with open(path, encoding="utf-8", errors="replace", newline="") as fh:
        return fh.read()


def scan_sources(directory: str | Path) -> Snapshot:
    """
    Read every tracked regular file directly inside *directory*.

    Subdirectories and files with other extensions are skipped.  Listing
    and read errors are not handled here; a file that vanishes between the
    listing and the read raises ``FileNotFoundError``.
    """
    directory = Path(directory)
    with os.scandir(directory) as entries:
        paths = [
            entry.path
            for entry in entries
            if entry.is_file(follow_symlinks=False) and is_tracked(entry.name)
        ]

    # names are decoded for the wire; reads go through the on-disk path
    sources = tuple(
        SourceFile(decode_name(os.path.basename(path)), _read_text(Path(path)))
        for path in paths
    )
    logger.debug("Scanned %s: %d tracked file(s)", directory, len(sources))
    return sources


def find_source(snapshot: Snapshot, filename: str) -> SourceFile | None:
    """Return the entry named *filename*, or None."""
    for source in snapshot:
        if source.filename == filename:
            return source
    return None
