""" Wire codec for envelopes. msgspec is used when installed, then orjson,
    then the standard library. Whichever backend is active, :func:`dumps`
    produces bytes and :func:`loads` takes bytes or str.
"""

# Only the first backend found is imported.

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


def _stdlib_dumps(value):
    return json.dumps(value, separators=(',', ':')).encode()


if msgspec is not None:
    _encoder = msgspec.json.Encoder()
    _decoder = msgspec.json.Decoder()
    dumps = _encoder.encode
    loads = _decoder.decode
    DecodeError = msgspec.DecodeError
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
else:
    dumps = _stdlib_dumps
    loads = json.loads
    DecodeError = json.JSONDecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
