"""ZeroMQ ROUTER listener.

The ROUTER socket prepends the sender's identity to every inbound message
and consumes a leading identity frame from every outbound message to decide
which peer receives it. This adapter makes that explicit: inbound messages
come back as ``(peer_id, frames)``, outbound messages take the peer id as a
separate argument.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import zmq

from ..base import Frames, RouterTransport, TransportBindError, TransportError, TransportFramingError
from .common import recv_multipart, send_multipart, zmq_context


logger = logging.getLogger(__name__)


class Router(RouterTransport):
    """Bind a ROUTER socket and exchange identity-addressed messages."""

    # Milliseconds to keep undelivered replies after close(); the final
    # retirement reply goes out immediately before the broker closes.
    linger = 1000

    def __init__(self, linger: Optional[int] = None):
        if linger is not None:
            self.linger = int(linger)

        self.endpoint: Optional[str] = None
        self.socket: Optional[zmq.Socket] = None

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self, endpoint: str) -> None:
        socket = zmq_context.socket(zmq.ROUTER)
        socket.setsockopt(zmq.LINGER, self.linger)

        try:
            socket.bind(endpoint)
        except zmq.ZMQError as exc:
            socket.close(linger=0)
            raise TransportBindError(f"cannot bind {endpoint!r}: {exc}") from exc

        self.endpoint = socket.getsockopt_string(zmq.LAST_ENDPOINT) or endpoint
        self.socket = socket
        logger.debug("ROUTER bound to %s", self.endpoint)

    def close(self) -> None:
        if self.socket is None:
            return
        self.socket.close()
        self.socket = None

    def send(self, peer: bytes, frames: Sequence[bytes]) -> None:
        send_multipart(self._require(), (peer,) + tuple(frames))

    def recv(self, timeout: Optional[float] = None) -> Tuple[bytes, Frames]:
        parts = recv_multipart(self._require(), timeout)
        if len(parts) < 2:
            raise TransportFramingError(
                f"expected identity plus body, got {len(parts)} frame(s)"
            )
        return parts[0], parts[1:]

    def _require(self) -> zmq.Socket:
        if self.socket is None:
            raise TransportError("ROUTER socket is not open")
        return self.socket
