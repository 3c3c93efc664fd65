"""ZeroMQ DEALER peer with a caller-chosen identity."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import zmq

from ..base import DealerTransport, Frames, TransportConnectionError, TransportError
from .common import recv_multipart, send_multipart, zmq_context


logger = logging.getLogger(__name__)


class Dealer(DealerTransport):
    """Connect a DEALER socket whose identity is set before connecting."""

    linger = 0

    def __init__(self, identity: Optional[bytes] = None):
        self.identity = identity
        self.endpoint: Optional[str] = None
        self.socket: Optional[zmq.Socket] = None

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self, endpoint: str) -> None:
        socket = zmq_context.socket(zmq.DEALER)
        socket.setsockopt(zmq.LINGER, self.linger)

        # The identity must be in place before connect() for the ROUTER
        # side to see it.
        if self.identity is not None:
            socket.setsockopt(zmq.IDENTITY, self.identity)

        try:
            socket.connect(endpoint)
        except zmq.ZMQError as exc:
            socket.close(linger=0)
            raise TransportConnectionError(f"cannot connect to {endpoint!r}: {exc}") from exc

        self.endpoint = endpoint
        self.socket = socket
        logger.debug("DEALER %s connected to %s", _hex(self.identity), endpoint)

    def close(self) -> None:
        if self.socket is None:
            return
        self.socket.close()
        self.socket = None

    def send(self, frames: Sequence[bytes]) -> None:
        send_multipart(self._require(), tuple(frames))

    def recv(self, timeout: Optional[float] = None) -> Frames:
        return recv_multipart(self._require(), timeout)

    def _require(self) -> zmq.Socket:
        if self.socket is None:
            raise TransportError("DEALER socket is not open")
        return self.socket


def _hex(identity: Optional[bytes]) -> str:
    if identity is None:
        return "(anonymous)"
    return identity.hex()
