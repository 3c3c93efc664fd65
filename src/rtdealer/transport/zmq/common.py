"""Shared ZeroMQ plumbing for the ROUTER, DEALER and REQ adapters."""

from __future__ import annotations

import atexit
import logging
from typing import Optional

import zmq

from ...log import TRACE
from ..base import TransportError, TransportTimeout, Frames


logger = logging.getLogger(__name__)

zmq_context = zmq.Context()


def recv_multipart(socket: zmq.Socket, timeout: Optional[float] = None) -> Frames:
    """Receive one multipart message from *socket*.

    With *timeout* None this blocks until a message arrives; otherwise it
    waits at most *timeout* seconds and raises :class:`TransportTimeout`.
    """

    try:
        if timeout is not None:
            if not socket.poll(int(timeout * 1000), zmq.POLLIN):
                raise TransportTimeout(f"no message within {timeout:.3f} sec")
        parts = tuple(socket.recv_multipart())
    except zmq.ZMQError as exc:
        raise TransportError(f"receive failed: {exc}") from exc

    logger.log(TRACE, "recv %r", parts)
    return parts


def send_multipart(socket: zmq.Socket, frames: Frames) -> None:
    logger.log(TRACE, "send %r", frames)
    try:
        socket.send_multipart(frames)
    except zmq.ZMQError as exc:
        raise TransportError(f"send failed: {exc}") from exc


def _cleanup() -> None:
    # Closed sockets keep their own linger; anything still open is dropped.
    zmq_context.destroy(linger=0)


atexit.register(_cleanup)
