"""ZMQ multipart framing for channel envelopes.

    version, channel_id, json({command, data, messageId})
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ... import json
from ...protocol.message import Envelope


VERSION = b"1"


class VersionMismatch(ValueError):
    """The frames were produced by an incompatible peer."""


def to_frames(channel_id: str, envelope: Envelope) -> Tuple[bytes, ...]:
    """Encode an envelope for a given channel as multipart frames."""

    payload = json.dumps(envelope.to_dict())
    return (VERSION, channel_id.encode(), payload)


def from_frames(parts: Sequence[bytes]) -> Tuple[str, Envelope]:
    """Decode multipart frames into (channel_id, envelope).

    Raises ValueError for anything that is not a well-formed message.
    """

    if len(parts) != 3:
        raise ValueError(f"expected 3 frames, received {len(parts)}")

    their_version = parts[0]
    if their_version != VERSION:
        raise VersionMismatch(
            f"message is protocol {their_version!r}, recipient expects {VERSION!r}"
        )

    channel_id = parts[1].decode()

    try:
        message = json.loads(parts[2])
    except json.DecodeError as exc:
        raise ValueError(f"undecodable payload: {exc}") from exc

    if not isinstance(message, dict):
        raise ValueError(f"payload is not an object: {message!r}")

    return channel_id, Envelope.from_dict(message)
