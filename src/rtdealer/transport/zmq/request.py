"""ZeroMQ REQ client used by the request/connect handshake."""

from __future__ import annotations

import logging
from typing import Optional

import zmq

from ..base import Transport, TransportConnectionError
from .common import zmq_context


logger = logging.getLogger(__name__)


class Request(Transport):
    """Connect a REQ socket for the handshake routines."""

    linger = 0

    def __init__(self):
        self.endpoint: Optional[str] = None
        self.socket: Optional[zmq.Socket] = None

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self, endpoint: str) -> None:
        socket = zmq_context.socket(zmq.REQ)
        socket.setsockopt(zmq.LINGER, self.linger)

        try:
            socket.connect(endpoint)
        except zmq.ZMQError as exc:
            socket.close(linger=0)
            raise TransportConnectionError(f"cannot connect to {endpoint!r}: {exc}") from exc

        self.endpoint = endpoint
        self.socket = socket
        logger.debug("REQ connected to %s", endpoint)

    def close(self) -> None:
        if self.socket is None:
            return
        self.socket.close()
        self.socket = None
