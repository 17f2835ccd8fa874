""" A class representation of a channel message, and the generator of the
    correlation identifiers that tie a response back to its request.
"""

import itertools

from . import fields


class Envelope:
    """ The :class:`Envelope` is the structured record exchanged between a
        receiver and the :class:`DuplexChannel`: the *command* naming the
        message, the *data* payload, and the *correlation_id* that is only
        present when the message is a response to a prior request.

        Transports are free to serialize an envelope however they like;
        :func:`to_dict` and :func:`from_dict` cover the common case of a
        JSON-compatible dictionary, where the correlation id travels under
        the ``messageId`` key.
    """

    __slots__ = ('command', 'data', 'correlation_id')

    def __init__(self, command, data=None, correlation_id=None):

        if command is None or command == '':
            raise ValueError('an envelope requires a command')

        self.command = command
        self.data = data
        self.correlation_id = correlation_id


    def __eq__(self, other):

        if not isinstance(other, Envelope):
            return NotImplemented

        return (self.command, self.data, self.correlation_id) == \
               (other.command, other.data, other.correlation_id)


    def __repr__(self):
        return 'Envelope(%r, %r, %r)' % (self.command, self.data, self.correlation_id)


    @property
    def is_response(self):
        return self.correlation_id is not None


    def to_dict(self):
        message = dict()
        message[fields.COMMAND] = self.command
        message[fields.DATA] = self.data

        if self.correlation_id is not None:
            message[fields.MESSAGE_ID] = self.correlation_id

        return message


    @classmethod
    def from_dict(cls, message):
        """ Build an :class:`Envelope` from a decoded wire dictionary. A
            ValueError is raised if the dictionary has no usable command;
            receivers are expected to treat that as a malformed message.
        """

        try:
            command = message[fields.COMMAND]
        except (KeyError, TypeError):
            raise ValueError('message has no command: ' + repr(message))

        data = message.get(fields.DATA)
        correlation_id = message.get(fields.MESSAGE_ID)

        return cls(command, data, correlation_id)


# end of class Envelope



class Ticker:
    """ Locally unique correlation identifiers, one :class:`Ticker` per
        channel. The identifiers are a monotonic count rendered as
        hexadecimal strings; two requests issued back to back never share
        an identifier, no matter how close together they are.
    """

    id_min = 0
    id_max = 0xFFFFFFFF

    def __init__(self, prefix=''):
        self.prefix = prefix
        self._count = itertools.count(self.id_min)


    def __iter__(self):
        return self


    def __next__(self):

        id = next(self._count)

        if id >= self.id_max:
            self._count = itertools.count(self.id_min)

        return '%s%08x' % (self.prefix, id)


# end of class Ticker


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
