"""Tests for the wire shape of outbound messages."""

import json

from source_mirror.messages import (
    DeleteMessage,
    MessageType,
    PutMessage,
    StartMessage,
    encode_message,
)
from source_mirror.scanner import SourceFile


def test_start_payload():
    message = StartMessage((SourceFile("a.c", "int main(){}"), SourceFile("b.h", "")))

    assert message.to_payload() == {
        "message": {
            "type": "START",
            "startMessage": {
                "files": [
                    {"filename": "a.c", "content": "int main(){}"},
                    {"filename": "b.h", "content": ""},
                ]
            },
        }
    }


def test_start_payload_empty_snapshot():
    payload = StartMessage(()).to_payload()
    assert payload["message"]["startMessage"] == {"files": []}


def test_put_payload():
    assert PutMessage("a.c", "x").to_payload() == {
        "message": {"type": "PUT", "putMessage": {"filename": "a.c", "content": "x"}}
    }


def test_delete_payload():
    assert DeleteMessage("a.c").to_payload() == {
        "message": {"type": "DELETE", "deleteMessage": {"filename": "a.c"}}
    }


def test_only_matching_body_key_populated():
    for message in (StartMessage(()), PutMessage("a.c", ""), DeleteMessage("a.c")):
        body = message.to_payload()["message"]
        keys = set(body) - {"type"}
        assert keys == {f"{message.type.value.lower()}Message"}


def test_message_types():
    assert StartMessage(()).type is MessageType.START
    assert PutMessage("a", "").type is MessageType.PUT
    assert DeleteMessage("a").type is MessageType.DELETE


def test_encode_keeps_unicode():
    raw = encode_message(PutMessage("a.c", "// über"))
    assert "über".encode("utf-8") in raw
    assert json.loads(raw)["message"]["putMessage"]["content"] == "// über"
