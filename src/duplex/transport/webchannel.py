"""Web channel transport.

Messages travel as custom events dispatched on a shared host object (see
:mod:`duplex.host`). Outbound messages are ``WebChannelMessageToChrome``
events, inbound ones ``WebChannelMessageToContent``; both carry a detail of
the form ``{"id": <channel id>, "message": {...}}``. The channel id is what
lets several logical channels share one event bus without cross-talk.
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from ..host import CustomEvent
from ..protocol import fields
from ..protocol.message import Envelope
from .base import Receiver, Sender, TransportClosed


class WebChannelSender(Sender):

    def __init__(self) -> None:
        self.window = None
        self.channel_id: Optional[str] = None

    def init(self, window=None, channel_id: Optional[str] = None, **config: Any) -> None:
        if window is None:
            raise ValueError("a web channel sender requires a window")

        self.window = window
        self.channel_id = channel_id or fields.DEFAULT_CHANNEL_ID

    def send(self, command: str, data: Any, correlation_id: Optional[str]) -> None:
        if self.window is None:
            raise TransportClosed(f"web channel {self.channel_id!r} is not open")

        message = Envelope(command, data, correlation_id).to_dict()
        detail = {
            fields.DETAIL_ID: self.channel_id,
            fields.DETAIL_MESSAGE: message,
        }

        self.window.dispatch_event(CustomEvent(fields.TO_CHROME, detail))

    def teardown(self) -> None:
        self.window = None


class WebChannelReceiver(Receiver):

    def __init__(self, events=None) -> None:
        Receiver.__init__(self, events)
        self.window = None
        self.channel_id: Optional[str] = None

    def init(self, window=None, channel_id: Optional[str] = None, **config: Any) -> None:
        if window is None:
            raise ValueError("a web channel receiver requires a window")

        self.window = window
        self.channel_id = channel_id or fields.DEFAULT_CHANNEL_ID
        self.window.add_event_listener(fields.TO_CONTENT, self.receive_message)

    def receive_message(self, event: CustomEvent) -> None:
        detail = event.detail

        try:
            channel_id = detail[fields.DETAIL_ID]
            message = detail[fields.DETAIL_MESSAGE]
        except (KeyError, TypeError):
            channel_id = message = None

        if not (channel_id and message):
            logger.error(f"malformed {fields.TO_CONTENT} event")
            return

        if channel_id != self.channel_id:
            # Not from the expected web channel, silently ignore.
            return

        try:
            envelope = Envelope.from_dict(message)
        except ValueError:
            logger.error(f"malformed {fields.TO_CONTENT} event")
            return

        self.deliver(envelope)

    def teardown(self) -> None:
        if self.window is None:
            return

        self.window.remove_event_listener(fields.TO_CONTENT, self.receive_message)
        self.window = None
