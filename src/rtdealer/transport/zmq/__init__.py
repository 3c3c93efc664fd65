"""ZeroMQ implementations of the transport contract."""

from .router import Router
from .dealer import Dealer
from .request import Request
