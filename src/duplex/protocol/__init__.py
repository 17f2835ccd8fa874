"""
duplex protocol layer
=====================

Transport-agnostic correlation of requests and responses. Nothing in this
package knows how a message is actually moved; that is the job of the
sender and receiver strategies in :mod:`duplex.transport`.

    Application code
        │
        ▼
    DuplexChannel (duplex.py)
        - send()      fire-and-forget
        - request()   correlated round trip
        - on()/off()  events named after inbound commands
        │
        ▼
    RequestsAwaitingResponses (pending.py)
        correlation id -> PendingRequest, one timer each
        │
        ▼
    Envelope, Ticker (message.py)
        message record, correlation identifiers
"""

from . import fields
from . import errors
from . import message
from . import events
from . import pending
from . import duplex

from .duplex import DuplexChannel
from .errors import ChannelError, ChannelStateError, ChannelTornDown, ResponseTimeout
from .events import Events
from .message import Envelope
from .pending import PendingRequest, RequestsAwaitingResponses


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
