""" Sender and receiver doubles for exercising a DuplexChannel without any
    real transport behind it.
"""

from duplex.protocol.message import Envelope
from duplex.transport.base import Receiver, Sender


class RecordingSender(Sender):
    """ Remember every message sent. If *respond* is set it is called with
        (command, data, correlation_id) from inside :func:`send`, before
        :func:`send` returns; if *error* is set it is raised instead.
    """

    def __init__(self, respond=None, error=None):
        self.sent = list()
        self.respond = respond
        self.error = error
        self.torn_down = 0


    def send(self, command, data, correlation_id):

        if self.error is not None:
            raise self.error

        self.sent.append((command, data, correlation_id))

        if self.respond is not None:
            self.respond(command, data, correlation_id)


    def teardown(self):
        self.torn_down += 1


class AsyncSender(RecordingSender):
    """ A sender whose :func:`send` returns an awaitable.
    """

    async def send(self, command, data, correlation_id):
        RecordingSender.send(self, command, data, correlation_id)


class MockReceiver(Receiver):

    def __init__(self):
        Receiver.__init__(self)
        self.torn_down = 0


    def feed(self, command, data=None, correlation_id=None):
        self.deliver(Envelope(command, data, correlation_id))


    def teardown(self):
        self.torn_down += 1


class BrokenReceiver(MockReceiver):

    def teardown(self):
        MockReceiver.teardown(self)
        raise RuntimeError('teardown exploded')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
