import json
import pytest

import duplex
from duplex.protocol.message import Envelope


def test_dumps_returns_bytes():
    encoded = duplex.json.dumps({'command': 'ping'})
    assert isinstance(encoded, bytes)


def test_encode_and_decode_envelope():
    envelope = Envelope('fxaccounts:login', {'email': 'a@b.c', 'verified': False, 'keys': None}, '00000002')

    encoded = duplex.json.dumps(envelope.to_dict())

    # Whitespace handling varies between the libraries, so compare what the
    # standard library makes of the encoding rather than the bytes.

    assert json.loads(encoded) == {
        'command': 'fxaccounts:login',
        'data': {'email': 'a@b.c', 'verified': False, 'keys': None},
        'messageId': '00000002',
    }

    decoded = Envelope.from_dict(duplex.json.loads(encoded))
    assert decoded == envelope


def test_decode_error():
    with pytest.raises(duplex.json.DecodeError):
        duplex.json.loads(b'{not json')


def test_event_envelope_has_no_message_id():
    message = Envelope('loaded').to_dict()
    assert message == {'command': 'loaded', 'data': None}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
