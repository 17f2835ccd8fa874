""" Channel configuration. Defaults can be overridden by the environment,
    which is the intended way to adjust a deployed application without
    touching the code that builds its channels:

    ``DUPLEX_SEND_TIMEOUT``
        Seconds to wait for a correlated response (default 90).

    ``DUPLEX_SETTLE_ABANDONED``
        Whether expired and torn-down requests fail their callers
        (default true). Set to false to only log a diagnostic.

    ``DUPLEX_CHANNEL_ID``
        Identifier distinguishing this channel on a shared bus.

    ``DUPLEX_TRANSPORT``
        One of ``webchannel``, ``zmq`` or ``null``.
"""

import os

from .protocol import fields


transports = ('webchannel', 'zmq', 'null')

_true = ('1', 'true', 'yes', 'on')
_false = ('0', 'false', 'no', 'off')


def _boolean(name, value):

    lowered = value.strip().lower()

    if lowered in _true:
        return True
    if lowered in _false:
        return False

    raise ValueError('%s must be a boolean, not %r' % (name, value))


class ChannelConfig:
    """ A plain container for the settings applied when a channel is
        assembled. Instances are normally created via
        :func:`from_environment`.
    """

    def __init__(self, send_timeout=fields.DEFAULT_SEND_TIMEOUT, settle_abandoned=True,
                 channel_id=fields.DEFAULT_CHANNEL_ID, transport='webchannel'):

        send_timeout = float(send_timeout)
        if send_timeout <= 0:
            raise ValueError('send_timeout must be positive: ' + repr(send_timeout))

        if transport not in transports:
            raise ValueError('unknown transport: ' + repr(transport))

        if not channel_id:
            raise ValueError('channel_id cannot be empty')

        self.send_timeout = send_timeout
        self.settle_abandoned = bool(settle_abandoned)
        self.channel_id = channel_id
        self.transport = transport


    def __repr__(self):
        return 'ChannelConfig(send_timeout=%r, settle_abandoned=%r, channel_id=%r, transport=%r)' % \
               (self.send_timeout, self.settle_abandoned, self.channel_id, self.transport)


    @classmethod
    def from_environment(cls, environ=None, **overrides):
        """ Build a :class:`ChannelConfig` from the ``DUPLEX_*`` variables in
            *environ* (default :data:`os.environ`). Keyword *overrides* take
            precedence over the environment.
        """

        if environ is None:
            environ = os.environ

        settings = dict()

        try:
            value = environ['DUPLEX_SEND_TIMEOUT']
        except KeyError:
            pass
        else:
            try:
                settings['send_timeout'] = float(value)
            except ValueError:
                raise ValueError('DUPLEX_SEND_TIMEOUT must be a number, not %r' % (value))

        try:
            value = environ['DUPLEX_SETTLE_ABANDONED']
        except KeyError:
            pass
        else:
            settings['settle_abandoned'] = _boolean('DUPLEX_SETTLE_ABANDONED', value)

        try:
            settings['channel_id'] = environ['DUPLEX_CHANNEL_ID']
        except KeyError:
            pass

        try:
            settings['transport'] = environ['DUPLEX_TRANSPORT'].strip().lower()
        except KeyError:
            pass

        settings.update(overrides)
        return cls(**settings)


# end of class ChannelConfig


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
