"""ZeroMQ inbound strategy."""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Optional, Sequence

import zmq
from loguru import logger

from ...protocol import fields
from ..base import Receiver
from .framing import VersionMismatch, from_frames


class ZmqReceiver(Receiver):
    """Receive envelopes on a PULL socket bound to *address*.

    A background thread polls the socket; every decoded envelope is handed
    to the event loop that was running when :func:`init` was called, so the
    ``message`` event is always raised on that loop.
    """

    poll_interval = 100

    def __init__(self, address: Optional[str] = None, events=None):
        Receiver.__init__(self, events)
        self.address = address
        self.channel_id: Optional[str] = None
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self.socket = None
        self.shutdown = False
        self.thread: Optional[threading.Thread] = None

    def init(self, address: Optional[str] = None, channel_id: Optional[str] = None,
             loop: Optional[asyncio.AbstractEventLoop] = None, **config: Any) -> None:
        from . import context

        if address is not None:
            self.address = address
        if self.address is None:
            raise ValueError("a ZeroMQ receiver requires an address")

        self.channel_id = channel_id or fields.DEFAULT_CHANNEL_ID
        self.loop = loop or asyncio.get_running_loop()

        self.socket = context.socket(zmq.PULL)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.bind(self.address)

        self.shutdown = False
        self.thread = threading.Thread(target=self.run, daemon=True)
        self.thread.start()

    def _incoming(self, parts: Sequence[bytes]) -> None:
        try:
            channel_id, envelope = from_frames(parts)
        except VersionMismatch as exc:
            logger.error(f"discarding message on {self.address}: {exc}")
            return
        except ValueError as exc:
            logger.error(f"malformed message on {self.address}: {exc}")
            return

        if channel_id != self.channel_id:
            return

        try:
            self.loop.call_soon_threadsafe(self.deliver, envelope)
        except RuntimeError:
            # The loop is closed; nobody is left to hear this message.
            self.shutdown = True

    def run(self) -> None:
        poller = zmq.Poller()
        poller.register(self.socket, zmq.POLLIN)

        while not self.shutdown:
            for active, _flag in poller.poll(self.poll_interval):
                if active == self.socket:
                    parts = self.socket.recv_multipart()
                    self._incoming(parts)

    def teardown(self) -> None:
        if self.socket is None:
            return

        self.shutdown = True
        if self.thread is not None and self.thread is not threading.current_thread():
            self.thread.join()

        self.socket.close(linger=0)
        self.socket = None
        self.thread = None
