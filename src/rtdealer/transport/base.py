"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`rtdealer.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple


Frames = Tuple[bytes, ...]


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A receive did not complete within the configured timeout."""


class TransportConnectionError(TransportError):
    """The transport could not establish a connection."""


class TransportBindError(TransportError):
    """The listening endpoint could not be bound."""


class TransportFramingError(TransportError):
    """A peer sent a message that does not have the expected shape."""


class Transport(ABC):
    """Minimal contract for a wire-level transport."""

    @abstractmethod
    def open(self, endpoint: str) -> None:
        """Establish the underlying socket on *endpoint*."""

    @abstractmethod
    def close(self) -> None:
        """Tear down the underlying socket."""

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False


class RouterTransport(Transport):
    """A listener that addresses many peers by identity.

    Every inbound message is handed back as ``(peer_id, frames)`` with the
    identity already split off; every outbound message names its peer.
    """

    @abstractmethod
    def send(self, peer: bytes, frames: Sequence[bytes]) -> None:
        """Send *frames* to the peer identified by *peer*."""

    @abstractmethod
    def recv(self, timeout: Optional[float] = None) -> Tuple[bytes, Frames]:
        """Receive the next ``(peer_id, frames)`` pair."""


class DealerTransport(Transport):
    """A connecting peer with a fixed identity."""

    identity: Optional[bytes] = None

    @abstractmethod
    def send(self, frames: Sequence[bytes]) -> None:
        """Send *frames* to the connected listener."""

    @abstractmethod
    def recv(self, timeout: Optional[float] = None) -> Frames:
        """Receive the next multipart message."""
