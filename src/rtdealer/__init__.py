""" Python implementation of the ZeroMQ router/dealer load-balancing
    demonstration. A broker binds a ROUTER socket and hands out work
    signals for a fixed time budget; workers connect DEALER sockets, work
    until they are fired, and report how much they got done.
"""

# Utility components.

from . import log

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import config

from .config import ConfigurationError
from .transport import (
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportBindError,
    TransportFramingError,
)

# Primary public-facing interfaces.

from .broker import Broker
from .worker import Worker
from .request import Requester

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
