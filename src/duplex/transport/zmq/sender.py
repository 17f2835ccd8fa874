"""ZeroMQ outbound strategy."""

from __future__ import annotations

from typing import Any, Optional

import zmq

from ...protocol import fields
from ...protocol.message import Envelope
from ..base import Sender, TransportClosed, TransportConnectionError, TransportError
from .framing import to_frames


class ZmqSender(Sender):
    """Send envelopes through a PUSH socket connected to *address*.

    Messages are never queued for a peer that is not connected; a send with
    nobody listening fails immediately with TransportConnectionError.
    """

    def __init__(self, address: Optional[str] = None):
        self.address = address
        self.channel_id: Optional[str] = None
        self.socket = None

    def init(self, address: Optional[str] = None, channel_id: Optional[str] = None, **config: Any) -> None:
        from . import context

        if address is not None:
            self.address = address
        if self.address is None:
            raise ValueError("a ZeroMQ sender requires an address")

        self.channel_id = channel_id or fields.DEFAULT_CHANNEL_ID

        self.socket = context.socket(zmq.PUSH)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.setsockopt(zmq.IMMEDIATE, 1)
        self.socket.connect(self.address)

    def send(self, command: str, data: Any, correlation_id: Optional[str]) -> None:
        if self.socket is None:
            raise TransportClosed(f"sender for {self.address} is not open")

        frames = to_frames(self.channel_id, Envelope(command, data, correlation_id))

        try:
            self.socket.send_multipart(frames, flags=zmq.NOBLOCK)
        except zmq.Again as exc:
            raise TransportConnectionError(f"{command} @ {self.address}: no peer ready") from exc
        except zmq.ZMQError as exc:
            raise TransportError(f"{command} @ {self.address}: {exc}") from exc

    def teardown(self) -> None:
        if self.socket is None:
            return

        self.socket.close(linger=0)
        self.socket = None
