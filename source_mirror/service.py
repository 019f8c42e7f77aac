"""
Sync loop for Source Mirror.

Sends the full initial snapshot once, then turns every change
notification into a re-scan and the DELETE/PUT messages that bring the
remote mirror up to date.  Notifications are processed strictly one at a
time; a cycle (including every HTTP call it triggers) finishes before the
next notification is taken from the watcher.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import Protocol

from source_mirror.diffing import diff_snapshots
from source_mirror.messages import OutboundMessage, StartMessage
from source_mirror.scanner import Snapshot, scan_sources
from source_mirror.sender import MessageSender
from source_mirror.watcher import DirectoryWatcher

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.1


class SyncState(Enum):
    PRIMING = "priming"
    WATCHING = "watching"


class ChangeSource(Protocol):
    """What the loop needs from a watcher."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def events(self) -> Iterator[str]: ...


class SyncLoop:
    """
    Mirror one folder to one endpoint.

    Parameters
    ----------
    directory : str or Path
        The folder to scan and watch.
    sender : MessageSender
        Delivers each outbound message.
    debounce_seconds : float
        Fixed delay before each re-scan so bursts of writes settle.  Every
        notification still runs its own cycle after the delay.
    watcher : ChangeSource, optional
        Notification source; a DirectoryWatcher on *directory* by default.
    """

    def __init__(
        self,
        directory: str | Path,
        sender: MessageSender,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        watcher: ChangeSource | None = None,
    ):
        self.directory = Path(directory)
        self.sender = sender
        self.debounce_seconds = max(0.0, debounce_seconds)
        self.watcher = watcher or DirectoryWatcher(str(self.directory))
        self.state = SyncState.PRIMING
        self.cycles = 0
        self._previous: Snapshot = ()

    @property
    def previous_snapshot(self) -> Snapshot:
        """The snapshot the remote mirror currently reflects."""
        return self._previous

    # ---- lifecycle ----

    def prime(self) -> StartMessage:
        """Scan once and send the START message.  Failures propagate."""
        sources = scan_sources(self.directory)
        message = StartMessage(sources)
        self.sender.send(message)
        self._previous = sources
        self.state = SyncState.WATCHING
        logger.info("Sent %d file(s) in START.", len(sources))
        logger.info("Start change detection...")
        return message

    def run(self) -> None:
        """Prime, then process notifications until the watcher stops."""
        self.prime()
        self.watcher.start()
        try:
            for filename in self.watcher.events():
                self.handle_change(filename)
        finally:
            self.watcher.stop()

    def stop(self) -> None:
        """Stop the watcher; run() returns once the current cycle ends."""
        self.watcher.stop()

    # ---- change cycle ----

    def handle_change(self, filename: str | None) -> list[OutboundMessage]:
        """
        Run one change cycle for the notified *filename*.

        Returns the messages sent, in send order.
        """
        if self.state is not SyncState.WATCHING:
            raise RuntimeError("handle_change() called before prime()")

        if self.debounce_seconds:
            time.sleep(self.debounce_seconds)

        logger.info("Change detected: filename = %s", filename)

        current = scan_sources(self.directory)
        messages = diff_snapshots(self._previous, current, filename)
        for message in messages:
            logger.info(
                "Sending %s %s",
                message.type.value,
                getattr(message, "filename", ""),
            )
            self.sender.send(message)

        self._previous = current
        self.cycles += 1
        return messages
