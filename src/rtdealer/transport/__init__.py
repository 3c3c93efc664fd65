"""Transport layer implementations."""

from .base import (
    Frames,
    Transport,
    RouterTransport,
    DealerTransport,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportBindError,
    TransportFramingError,
)

from . import framing
from . import zmq
