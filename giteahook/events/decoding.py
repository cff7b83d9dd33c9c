"""JSON decoding of authenticated webhook bodies.

The server sends ``null`` for empty nested records, e.g. ``"repo": null`` on
the head ref of a pull request whose fork was deleted. A ``null`` member is
treated like a missing key, so it takes the field's zero value (``None`` for
the optional fields) instead of failing validation.
"""

from __future__ import annotations

import typing as typ

import msgspec

from .errors import EventDecodeError
from .models import Event

_JSON_DECODER = msgspec.json.Decoder()
_ENCODER = msgspec.json.Encoder()


def _drop_nulls(document: typ.Any) -> typ.Any:  # noqa: ANN401 - arbitrary JSON
    """Return ``document`` with ``null`` members removed from every object."""
    if isinstance(document, dict):
        return {
            key: _drop_nulls(value)
            for key, value in document.items()
            if value is not None
        }
    if isinstance(document, list):
        return [_drop_nulls(item) for item in document]
    return document


def decode_event(raw: bytes) -> Event:
    """Decode a raw request body into an ``Event``.

    Parameters
    ----------
    raw
        Body bytes exactly as received. Callers must verify the signature
        over these bytes before decoding.

    Returns
    -------
    Event
        The decoded, immutable event record.

    Raises
    ------
    EventDecodeError
        If ``raw`` is not valid JSON, is not an object, or a field has the
        wrong JSON type.

    """
    try:
        document = _JSON_DECODER.decode(raw)
        return msgspec.convert(_drop_nulls(document), Event)
    except msgspec.DecodeError as exc:
        # ValidationError subclasses DecodeError
        raise EventDecodeError.from_decoder(str(exc)) from exc


def encode_event(event: Event) -> bytes:
    """Encode an ``Event`` back to JSON, e.g. for replaying a delivery."""
    return _ENCODER.encode(event)


__all__ = ["decode_event", "encode_event"]
