"""ZeroMQ transport: PUSH for outbound messages, PULL for inbound ones."""

import zmq

# One context for every socket; inproc:// endpoints only connect within a
# single context.

context = zmq.Context.instance()

from .sender import ZmqSender
from .receiver import ZmqReceiver
