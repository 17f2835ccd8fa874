"""Transport layer implementations.

Each transport supplies a sender and a receiver satisfying the contract in
:mod:`duplex.transport.base`. The ZeroMQ transport is imported on demand,
see :mod:`duplex.transport.zmq`.
"""

from .base import (
    Receiver,
    Sender,
    TransportClosed,
    TransportConnectionError,
    TransportError,
)
from .null import NullReceiver, NullSender
from .webchannel import WebChannelReceiver, WebChannelSender
