""" A two way channel. Messages can be sent and received; the channel
    requires both a sender and a receiver, which are the concrete strategies
    used to move messages. Decoupling the two allows a channel to, for
    example, send messages via a custom event and receive them via an
    entirely different mechanism.
"""

import asyncio
import inspect

from loguru import logger

from . import errors
from . import fields
from .events import Events
from .message import Ticker
from .pending import PendingRequest, RequestsAwaitingResponses


UNINITIALIZED = 'uninitialized'
READY = 'ready'
TORN_DOWN = 'torn down'


class DuplexChannel:
    """ The :class:`DuplexChannel` issues fire-and-forget messages via
        :func:`send`, correlated round trips via :func:`request`, and
        re-publishes every inbound message as an event named after its
        command. The event surface is an injected :class:`Events` instance;
        one is created if none is supplied.

        A channel is inert until :func:`init` binds the sender and receiver,
        and unusable after :func:`teardown`.

        :ivar state: One of 'uninitialized', 'ready', or 'torn down'.
        :ivar events: The :class:`Events` used to re-publish messages.
    """

    def __init__(self, events=None):

        if events is None:
            events = Events()

        self.events = events
        self.state = UNINITIALIZED

        self.sender = None
        self.receiver = None
        self.settle_abandoned = True

        self._awaiting = None
        self._ids = Ticker()


    def init(self, sender, receiver, send_timeout=None, settle_abandoned=None, config=None):
        """ Bind the *sender* and *receiver* for the lifetime of the channel.
            The *send_timeout* (in seconds) and *settle_abandoned* flag
            override the corresponding values of the optional *config*, a
            :class:`duplex.config.ChannelConfig` instance.

            With *settle_abandoned* set, a request whose timer expires fails
            with :class:`ResponseTimeout`, and requests still outstanding at
            teardown fail with :class:`ChannelTornDown`. Otherwise expiry
            only logs a diagnostic and teardown simply abandons the requests.
        """

        if self.state != UNINITIALIZED:
            raise errors.ChannelStateError('channel is already initialized')

        if config is not None:
            if send_timeout is None:
                send_timeout = config.send_timeout
            if settle_abandoned is None:
                settle_abandoned = config.settle_abandoned

        if settle_abandoned is not None:
            self.settle_abandoned = bool(settle_abandoned)

        self.sender = sender
        self.receiver = receiver
        self._awaiting = RequestsAwaitingResponses(send_timeout, self._expired)

        receiver.on(fields.MESSAGE, self.on_message_received)
        self.state = READY


    def teardown(self):
        """ Clear every outstanding request, then tear down the sender and
            receiver. Failures in either collaborator are logged, not raised.
            Calling this more than once is harmless.
        """

        if self.state != READY:
            self.state = TORN_DOWN
            return

        self.state = TORN_DOWN
        abandoned = self._awaiting.clear()

        if self.settle_abandoned:
            for request in abandoned:
                request._fail(errors.ChannelTornDown(command=request.command))
        elif abandoned:
            logger.debug(f"abandoning {len(abandoned)} pending requests at teardown")

        self.receiver.off(fields.MESSAGE, self.on_message_received)

        for collaborator in (self.sender, self.receiver):
            try:
                collaborator.teardown()
            except Exception:
                logger.exception(f"teardown failed for {collaborator!r}")


    @property
    def pending(self):
        """ The :class:`RequestsAwaitingResponses` registry, for inspection.
        """

        return self._awaiting


    def _check_ready(self):

        if self.state != READY:
            raise errors.ChannelStateError('channel is ' + self.state)


    async def _transmit(self, command, data, correlation_id, outstanding=None):

        # Defer to the next turn of the event loop; callers get the same
        # asynchronous contract even when the transport responds immediately.

        await asyncio.sleep(0)

        # The request may have been settled, by teardown or by expiry, while
        # waiting for that turn. Nothing is transmitted in that case.

        if outstanding is not None and outstanding.future.done():
            return None

        self._check_ready()

        result = self.sender.send(command, data, correlation_id)

        if inspect.isawaitable(result):
            result = await result

        return result


    async def send(self, command, data=None):
        """ Send a message, do not expect a response. Any exception raised
            by the sender propagates to the caller unchanged.
        """

        self._check_ready()
        await self._transmit(command, data, None)


    async def request(self, command, data=None):
        """ Send a message, expect a response. The return value is the data
            of the inbound message carrying the same correlation id.
        """

        self._check_ready()

        correlation_id = next(self._ids)
        outstanding = PendingRequest(correlation_id, command, data)

        # Register beforehand in case the response is synchronous.

        self._awaiting.add(correlation_id, outstanding)

        try:
            await self._transmit(command, data, correlation_id, outstanding)
        except BaseException:
            # There was a problem sending; nobody is going to answer.
            self._awaiting.remove(correlation_id)
            raise

        try:
            return await outstanding.future
        finally:
            # No-op unless the caller gave up before a response arrived.
            self._awaiting.remove(correlation_id)


    def on_message_received(self, envelope):
        """ Handle an inbound :class:`Envelope` raised by the receiver. If
            it answers an outstanding request that request is resolved; in
            every case the message is re-published as an event named after
            its command.
        """

        correlation_id = envelope.correlation_id
        data = envelope.data

        # A message is not necessarily in response to a sent request.

        if correlation_id is not None and self._awaiting is not None:
            outstanding = self._awaiting.remove(correlation_id)
            if outstanding is not None:
                outstanding._complete(data)

        self.events.trigger(envelope.command, data)


    def _expired(self, request):

        if not self.settle_abandoned:
            return

        self._awaiting.remove(request.correlation_id)
        request._fail(errors.ResponseTimeout(
            'response not received for: ' + str(request.command),
            command=request.command))


    # Event surface, delegated to the injected Events instance.

    def on(self, name, callback, weak=False):
        self.events.on(name, callback, weak)

    def once(self, name, callback):
        self.events.once(name, callback)

    def off(self, name=None, callback=None):
        self.events.off(name, callback)

    def trigger(self, name, *args):
        self.events.trigger(name, *args)


# end of class DuplexChannel


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
