"""Multipart framing for the broker/worker exchange.

Body (what a DEALER sends and receives)
    delimiter (empty), payload

Envelope (what the ROUTER sees)
    identity, delimiter (empty), payload

The identity frame is split off and re-attached by the ROUTER adapter, so
everything here deals only in bodies. Any other frame count is rejected.
"""

from __future__ import annotations

from typing import Collection, Optional, Sequence

from ..protocol import Envelope
from ..protocol.fields import DELIMITER
from .base import Frames, TransportFramingError


def to_body(payload: bytes) -> Frames:
    """Encode *payload* as the two-frame body ``(b"", payload)``."""

    return (DELIMITER, payload)


def from_body(parts: Sequence[bytes], expected: Optional[Collection[bytes]] = None) -> bytes:
    """Decode a two-frame body and return its payload.

    If *expected* is given, the payload must be one of those values.
    """

    if len(parts) != 2:
        raise TransportFramingError(f"expected 2 frames (delimiter, payload), got {len(parts)}")

    delimiter, payload = parts
    if delimiter != DELIMITER:
        raise TransportFramingError(f"expected empty delimiter frame, got {delimiter!r}")

    if expected is not None and payload not in expected:
        raise TransportFramingError(f"unexpected payload {payload!r}")

    return payload


def to_envelope(peer: bytes, parts: Sequence[bytes]) -> Envelope:
    """Decode a ROUTER ``(peer_id, frames)`` pair into an :class:`Envelope`."""

    return Envelope(peer, from_body(parts))


def from_envelope(envelope: Envelope) -> Frames:
    """Encode the body of *envelope*; the peer id travels separately."""

    return to_body(envelope.payload)
