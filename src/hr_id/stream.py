"""Asynchronous streaming codec for Id.

Requires the ``stream`` extra (anyio). Each id travels as one JSON string
literal terminated by a newline. The codec suspends only while the
underlying byte stream does I/O.

To read several ids from one connection, pass the same
:class:`~anyio.streams.buffered.BufferedByteReceiveStream` to every
:func:`from_stream` call so bytes read ahead are not lost.
"""

from __future__ import annotations

import json

from anyio import DelimiterNotFound, IncompleteRead
from anyio.abc import ByteReceiveStream, ByteSendStream
from anyio.streams.buffered import BufferedByteReceiveStream

from hr_id.domain.ids import Id
from hr_id.errors import DecodeError, ValidationError
from hr_id.serde import dumps

DELIMITER = b"\n"
DEFAULT_MAX_BYTES = 65536


async def to_stream(id_: Id, send_stream: ByteSendStream) -> None:
    """Write *id_* as a delimited token to *send_stream*."""
    await send_stream.send(dumps(id_).encode("utf-8") + DELIMITER)


def decode_token(raw: bytes) -> Id:
    """Decode one undelimited token read from a stream."""
    try:
        token = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise DecodeError("Id token is not valid UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Id token is not a JSON string: {exc}") from exc

    if not isinstance(token, str):
        raise DecodeError(f"Id token must be a string, not {type(token).__name__}")

    try:
        return Id(token)
    except ValidationError as exc:
        raise DecodeError(str(exc), violation=exc.violation) from exc


async def from_stream(
    receive_stream: ByteReceiveStream,
    *,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> Id:
    """Read one delimited token from *receive_stream* and validate it.

    Raises:
        DecodeError: The stream ended early, the token exceeded *max_bytes*,
            or the token is not a legal id.
    """
    if isinstance(receive_stream, BufferedByteReceiveStream):
        buffered = receive_stream
    else:
        buffered = BufferedByteReceiveStream(receive_stream)

    try:
        raw = await buffered.receive_until(DELIMITER, max_bytes)
    except IncompleteRead as exc:
        raise DecodeError("stream ended before an Id token was complete") from exc
    except DelimiterNotFound as exc:
        raise DecodeError(f"no Id token delimiter within {max_bytes} bytes") from exc

    return decode_token(raw)
