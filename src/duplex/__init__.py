""" Python implementation of a duplex message channel: fire-and-forget
    notifications and correlated request/response exchanges over a pair of
    pluggable, possibly asymmetric, sender and receiver strategies.
"""

# Utility components.

from . import json
from . import weakref

# Submodules used by multiple other components.

from . import protocol
from . import config
from . import host
from . import transport

# Primary public-facing interfaces.

from . import begin
channel = begin.channel
open_channel = begin.open_channel

from .config import ChannelConfig
from .protocol import DuplexChannel, Envelope, Events

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
