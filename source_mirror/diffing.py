"""Snapshot transition: which messages a directory change produces."""

from __future__ import annotations

from source_mirror.messages import DeleteMessage, OutboundMessage, PutMessage
from source_mirror.scanner import Snapshot, find_source


def diff_snapshots(
    previous: Snapshot,
    current: Snapshot,
    changed_name: str | None,
) -> list[OutboundMessage]:
    """
    Compute the messages that move a mirror of *previous* to *current*.

    Order: deletions (previous order), then additions (current order),
    then one PUT for *changed_name* if it exists in both snapshots with
    different content.  Content changes to files other than the notified
    one are not detected.
    """
    previous_names = {source.filename for source in previous}
    current_names = {source.filename for source in current}

    messages: list[OutboundMessage] = [
        DeleteMessage(source.filename)
        for source in previous
        if source.filename not in current_names
    ]
    messages.extend(
        PutMessage(source.filename, source.content)
        for source in current
        if source.filename not in previous_names
    )

    if changed_name:
        before = find_source(previous, changed_name)
        after = find_source(current, changed_name)
        if before and after and before.content != after.content:
            messages.append(PutMessage(after.filename, after.content))

    return messages
