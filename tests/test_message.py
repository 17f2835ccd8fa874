import pytest

from duplex.protocol.message import Envelope, Ticker


def test_envelope_requires_command():
    with pytest.raises(ValueError):
        Envelope('')

    with pytest.raises(ValueError):
        Envelope.from_dict({'data': 1})

    with pytest.raises(ValueError):
        Envelope.from_dict(None)


def test_envelope_response_flag():
    assert Envelope('pong', 1, '00000001').is_response == True
    assert Envelope('notice', 1).is_response == False


def test_ticker_is_monotonic():
    ticker = Ticker()
    ids = [next(ticker) for i in range(3)]
    assert ids == ['00000000', '00000001', '00000002']


def test_ticker_wraps():
    ticker = Ticker(prefix='c-')
    ticker.id_max = 2

    ids = [next(ticker) for i in range(4)]
    assert ids == ['c-00000000', 'c-00000001', 'c-00000002', 'c-00000000']


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
