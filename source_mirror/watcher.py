"""Filesystem change notifications for the mirrored folder.

Uses the watchdog library to monitor the folder (non-recursively) and
queues the name of every changed entry.  A single consumer drains the
queue, so change cycles never run concurrently.
"""

from __future__ import annotations

import logging
import os
import queue
from collections.abc import Iterator
from typing import Any

from watchdog.events import (
    FileSystemEvent,
    FileSystemEventHandler,
    FileSystemMovedEvent,
)
from watchdog.observers import Observer

from source_mirror.scanner import decode_name

logger = logging.getLogger(__name__)

# Pushed by stop() to end events()
_STOP = None


class ChangeQueueHandler(FileSystemEventHandler):
    """Watchdog handler that enqueues the base name of each changed file."""

    def __init__(self, changes: queue.Queue):
        super().__init__()
        self._changes = changes

    def _put(self, path: str | bytes) -> None:
        name = decode_name(os.path.basename(os.fsdecode(path)))
        logger.debug("Queued change: %s", name)
        self._changes.put(name)

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._put(event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._put(event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._put(event.src_path)

    def on_moved(self, event: FileSystemMovedEvent) -> None:  # type: ignore[override]
        if event.is_directory:
            return
        self._put(event.src_path)
        self._put(event.dest_path)


class DirectoryWatcher:
    """
    Watch one folder and hand out changed-entry names one at a time.

    Usage:
        watcher = DirectoryWatcher(folder)
        watcher.start()
        for name in watcher.events():
            ...
        watcher.stop()
    """

    def __init__(self, directory: str):
        self.directory = directory
        self._changes: queue.Queue = queue.Queue()
        self._handler = ChangeQueueHandler(self._changes)
        self._observer: Any | None = None

    # ---- lifecycle ----

    def start(self) -> None:
        """Start watching the folder."""
        if not os.path.isdir(self.directory):
            logger.error("Watched folder does not exist: %s", self.directory)
            raise FileNotFoundError(f"Watched folder does not exist: {self.directory}")

        observer = Observer()
        self._observer = observer
        observer.schedule(self._handler, self.directory, recursive=False)
        observer.start()
        logger.info("Watching '%s'", self.directory)

    def stop(self) -> None:
        """Stop watching and wake up any consumer blocked in events()."""
        if self._observer:
            self._observer.stop()
            self._observer.join(timeout=5)
            self._observer = None
            logger.info("Watcher stopped.")
        self._changes.put(_STOP)

    @property
    def is_running(self) -> bool:
        """Return whether the watcher is currently active."""
        return self._observer is not None and self._observer.is_alive()

    # ---- consumption ----

    def events(self) -> Iterator[str]:
        """Yield changed-entry names in arrival order until stop() is called."""
        while True:
            name = self._changes.get()
            if name is _STOP:
                return
            yield name
