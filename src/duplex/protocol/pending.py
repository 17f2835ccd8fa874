""" Bookkeeping for requests that are still waiting on a response. The
    :class:`RequestsAwaitingResponses` registry is the sole owner of the
    per-request timeout; nothing else schedules or cancels those timers.
"""

import asyncio

from loguru import logger

from . import fields


class PendingRequest:
    """ One outstanding request. The *future* is resolved with the data of
        the correlated response; the *command* and *data* are retained for
        diagnostics. The *timeout* handle is assigned by the registry.
    """

    def __init__(self, correlation_id, command, data=None, future=None):

        if future is None:
            future = asyncio.get_running_loop().create_future()

        self.correlation_id = correlation_id
        self.command = command
        self.data = data
        self.future = future
        self.timeout = None


    def __repr__(self):
        return 'PendingRequest(%r, %r)' % (self.correlation_id, self.command)


    def _complete(self, data):
        """ Hand the response *data* to the original caller. Only the first
            resolution counts; anything after that is ignored.
        """

        if self.future.done():
            return False

        self.future.set_result(data)
        return True


    def _fail(self, error):

        if self.future.done():
            return False

        self.future.set_exception(error)
        return True


# end of class PendingRequest



class RequestsAwaitingResponses:
    """ Map correlation identifiers to :class:`PendingRequest` instances,
        with a timer attached to each. Every request removed from the map has
        its timer cancelled.

        When a timer fires a diagnostic is logged and the optional *expired*
        callable is invoked with the :class:`PendingRequest`; it is up to
        the owner of the registry to decide what happens to the request. An
        owner that removes expired requests keeps the map free of any entry
        whose timer has already fired.
    """

    def __init__(self, send_timeout=None, expired=None):

        if send_timeout is None:
            send_timeout = fields.DEFAULT_SEND_TIMEOUT

        send_timeout = float(send_timeout)
        if send_timeout <= 0:
            raise ValueError('send timeout must be positive: ' + repr(send_timeout))

        self.send_timeout = send_timeout
        self.expired = expired
        self._requests = dict()


    def __contains__(self, correlation_id):
        return correlation_id in self._requests


    def __len__(self):
        return len(self._requests)


    def add(self, correlation_id, request):
        """ Register *request* and start its timer. The caller guarantees
            that *correlation_id* is not already registered.
        """

        loop = asyncio.get_running_loop()
        request.timeout = loop.call_later(self.send_timeout, self._expire, request)
        self._requests[correlation_id] = request


    def get(self, correlation_id):
        return self._requests.get(correlation_id)


    def remove(self, correlation_id):
        """ Cancel the timer and forget the request. Returns the removed
            :class:`PendingRequest`, or None if nothing was registered under
            *correlation_id*.
        """

        try:
            request = self._requests.pop(correlation_id)
        except KeyError:
            return None

        if request.timeout is not None:
            request.timeout.cancel()

        return request


    def clear(self):
        """ Remove every request, cancelling every timer. The removed
            requests are returned so that the caller can settle them.
        """

        removed = list()

        for correlation_id in tuple(self._requests):
            request = self.remove(correlation_id)
            removed.append(request)

        return removed


    def _expire(self, request):

        logger.error(f"Response not received for: {request.command}")

        if self.expired is not None:
            self.expired(request)


# end of class RequestsAwaitingResponses


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
