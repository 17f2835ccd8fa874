"""Transport interface.

This is the (small) contract that sender and receiver strategies follow.
It lives outside :mod:`duplex.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Union

from ..protocol.events import Events
from ..protocol.fields import MESSAGE
from ..protocol.message import Envelope


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportConnectionError(TransportError):
    """The transport could not deliver a message to its peer."""


class TransportClosed(TransportError):
    """The transport was used after teardown."""


class Sender(ABC):
    """Outbound half of a channel."""

    def init(self, **config: Any) -> None:
        """Accept transport configuration; unknown options are ignored."""

    @abstractmethod
    def send(self, command: str, data: Any, correlation_id: Optional[str]) -> Union[None, Awaitable[None]]:
        """Transmit one message. May return an awaitable."""

    @abstractmethod
    def teardown(self) -> None:
        """Release transport resources. Must be idempotent."""


class Receiver(ABC):
    """Inbound half of a channel.

    A receiver raises the ``message`` event with an :class:`Envelope` for
    every inbound transport message it has validated and decoded.
    """

    def __init__(self, events: Optional[Events] = None):
        self.events = events if events is not None else Events()

    def init(self, **config: Any) -> None:
        """Accept transport configuration; unknown options are ignored."""

    @abstractmethod
    def teardown(self) -> None:
        """Unsubscribe from the transport. Must be idempotent."""

    def on(self, name: str, callback: Callable[..., Any], weak: bool = False) -> None:
        self.events.on(name, callback, weak)

    def off(self, name: Optional[str] = None, callback: Optional[Callable[..., Any]] = None) -> None:
        self.events.off(name, callback)

    def deliver(self, envelope: Envelope) -> None:
        """Raise the ``message`` event for a decoded *envelope*."""
        self.events.trigger(MESSAGE, envelope)
