"""HTTP delivery of outbound messages."""

from __future__ import annotations

import logging

import requests

from source_mirror.messages import OutboundMessage, encode_message

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json; charset=UTF-8"
EXPECTED_STATUS = 201


class MessageSender:
    """
    POSTs each message to a single endpoint and waits for the reply.

    Parameters
    ----------
    api_url : str
        The endpoint every message is posted to.
    session : requests.Session, optional
        Session to reuse; one is created when omitted.
    """

    def __init__(self, api_url: str, session: requests.Session | None = None):
        self.api_url = api_url
        self._session = session or requests.Session()
        self.sent_count = 0

    def send(self, message: OutboundMessage) -> int:
        """
        Deliver *message* and return the response status code.

        Anything other than 201 is logged as a warning and otherwise ignored.
        Transport failures (``requests.RequestException``) propagate.
        """
        response = self._session.post(
            self.api_url,
            data=encode_message(message),
            headers={"Content-Type": CONTENT_TYPE},
        )
        self.sent_count += 1
        if response.status_code != EXPECTED_STATUS:
            logger.warning("Invalid response status: %d", response.status_code)
        else:
            logger.debug("%s delivered", message.type.value)
        return response.status_code

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> MessageSender:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
