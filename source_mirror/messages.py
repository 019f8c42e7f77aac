"""Outbound messages and their JSON wire encoding.

Every message is wrapped as ``{"message": {"type": ..., "<kind>Message": ...}}``
with exactly one body key populated, matching ``type``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from source_mirror.scanner import Snapshot


class MessageType(str, Enum):
    START = "START"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class StartMessage:
    """Full initial snapshot, sent once at startup."""

    files: Snapshot

    type = MessageType.START

    def to_payload(self) -> dict[str, Any]:
        return {
            "message": {
                "type": self.type.value,
                "startMessage": {"files": [f.as_dict() for f in self.files]},
            }
        }


@dataclass(frozen=True)
class PutMessage:
    """A file was created or its content changed."""

    filename: str
    content: str

    type = MessageType.PUT

    def to_payload(self) -> dict[str, Any]:
        return {
            "message": {
                "type": self.type.value,
                "putMessage": {"filename": self.filename, "content": self.content},
            }
        }


@dataclass(frozen=True)
class DeleteMessage:
    """A previously mirrored file is gone."""

    filename: str

    type = MessageType.DELETE

    def to_payload(self) -> dict[str, Any]:
        return {
            "message": {
                "type": self.type.value,
                "deleteMessage": {"filename": self.filename},
            }
        }


OutboundMessage = Union[StartMessage, PutMessage, DeleteMessage]


def encode_message(message: OutboundMessage) -> bytes:
    """Serialise *message* to a UTF-8 JSON request body."""
    return json.dumps(message.to_payload(), ensure_ascii=False).encode("utf-8")
