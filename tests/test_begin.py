import pytest

import duplex
from duplex.config import ChannelConfig
from duplex.host import EventTarget
from duplex.protocol.duplex import READY
from duplex.transport.null import NullReceiver, NullSender
from duplex.transport.webchannel import WebChannelReceiver, WebChannelSender


def test_channel_without_window_is_null():
    channel = duplex.channel(config=ChannelConfig())

    assert channel.state == READY
    assert isinstance(channel.sender, NullSender)
    assert isinstance(channel.receiver, NullReceiver)


def test_channel_applies_config():
    config = ChannelConfig(send_timeout=3, settle_abandoned=False, channel_id='sync')
    channel = duplex.channel(EventTarget(), config=config)

    assert isinstance(channel.sender, WebChannelSender)
    assert isinstance(channel.receiver, WebChannelReceiver)
    assert channel.sender.channel_id == 'sync'
    assert channel.receiver.channel_id == 'sync'
    assert channel.pending.send_timeout == 3.0
    assert channel.settle_abandoned == False


def test_open_channel_selects_transport():
    channel = duplex.open_channel(ChannelConfig(transport='null'))
    assert isinstance(channel.sender, NullSender)

    window = EventTarget()
    channel = duplex.open_channel(ChannelConfig(), window=window, channel_id='other')
    assert channel.receiver.channel_id == 'other'

    with pytest.raises(ValueError):
        duplex.open_channel(ChannelConfig())

    with pytest.raises(ValueError):
        duplex.open_channel(ChannelConfig(transport='zmq'), outbound='inproc://x')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
