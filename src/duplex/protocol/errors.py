"""Channel-level exceptions."""

from . import fields


class ChannelError(Exception):
    """ Base class for errors raised by a :class:`DuplexChannel`. Every
        subclass carries a short, stable *code* string that callers can
        match against instead of relying on the class hierarchy.
    """

    code = None

    def __init__(self, text=None, command=None):

        if text is None:
            text = self.code

        Exception.__init__(self, text)
        self.command = command


class ChannelStateError(ChannelError):
    """ The channel was used before :func:`DuplexChannel.init` or after
        :func:`DuplexChannel.teardown`.
    """

    code = fields.CHANNEL_NOT_READY


class ResponseTimeout(ChannelError):
    """ No correlated response arrived within the configured window.
    """

    code = fields.RESPONSE_TIMEOUT


class ChannelTornDown(ChannelError):
    """ The channel was torn down while the request was still waiting.
    """

    code = fields.CHANNEL_TORN_DOWN


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
