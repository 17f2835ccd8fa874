""" Factory functions that assemble a ready-to-use :class:`DuplexChannel`
    from a sender, a receiver, and a :class:`ChannelConfig`. These are the
    principal entry points for applications that do not need to pick their
    own transport strategies.
"""

from .config import ChannelConfig
from .protocol.duplex import DuplexChannel
from .transport.null import NullReceiver, NullSender
from .transport.webchannel import WebChannelReceiver, WebChannelSender


def _assemble(sender, receiver, config):

    channel = DuplexChannel()
    channel.init(sender, receiver, config=config)
    return channel


def channel(window=None, channel_id=None, config=None):
    """ Return a channel communicating via custom events on *window*,
        identified by *channel_id*. If no *window* is provided the channel
        is built on the null transport: sends complete immediately and
        nothing is ever received.
    """

    if config is None:
        config = ChannelConfig.from_environment()

    if channel_id is None:
        channel_id = config.channel_id

    if window is None:
        return _assemble(NullSender(), NullReceiver(), config)

    sender = WebChannelSender()
    sender.init(window=window, channel_id=channel_id)

    receiver = WebChannelReceiver()
    receiver.init(window=window, channel_id=channel_id)

    return _assemble(sender, receiver, config)


def zmq_channel(outbound, inbound, channel_id=None, config=None, loop=None):
    """ Return a channel sending to the *outbound* ZeroMQ address and
        listening on the *inbound* one. Unless a *loop* is given this must
        be called from a running event loop, which is where inbound messages
        will be delivered.
    """

    # Deferred so that pyzmq is only loaded by applications that use it.
    from .transport.zmq import ZmqReceiver, ZmqSender

    if config is None:
        config = ChannelConfig.from_environment()

    if channel_id is None:
        channel_id = config.channel_id

    receiver = ZmqReceiver()
    receiver.init(address=inbound, channel_id=channel_id, loop=loop)

    sender = ZmqSender()
    try:
        sender.init(address=outbound, channel_id=channel_id)
    except Exception:
        receiver.teardown()
        raise

    return _assemble(sender, receiver, config)


def open_channel(config=None, **options):
    """ Build a channel using the transport named by *config* (by default
        read from the environment). The remaining keyword *options* are
        passed to the transport-specific factory: *window* for the web
        channel, *outbound* and *inbound* for ZeroMQ.
    """

    if config is None:
        config = ChannelConfig.from_environment()

    transport = config.transport

    if transport == 'null':
        return channel(None, config=config)

    if transport == 'webchannel':
        try:
            window = options['window']
        except KeyError:
            raise ValueError('the webchannel transport requires a window')
        return channel(window, options.get('channel_id'), config)

    if transport == 'zmq':
        try:
            outbound = options['outbound']
            inbound = options['inbound']
        except KeyError:
            raise ValueError('the zmq transport requires outbound and inbound addresses')
        return zmq_channel(outbound, inbound, options.get('channel_id'), config, options.get('loop'))

    raise ValueError('unknown transport: ' + repr(transport))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
