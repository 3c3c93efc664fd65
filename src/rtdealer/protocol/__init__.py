"""
rtdealer Protocol Layer
=======================

The transport-agnostic vocabulary of the broker/worker exchange: the
literal payloads, the addressed :class:`Envelope`, and worker identity
generation. Nothing in here imports ZeroMQ.

Exchange
--------

    Worker                                  Broker
      |   ["", "Hi boss!"]                    |
      | ------------------------------------> |  (transport prepends id)
      |                                       |
      |   [id, "", "Work harder" | "Fired!"]  |
      | <------------------------------------ |  (transport consumes id)

The broker answers "Work harder" until its time budget has elapsed and
"Fired!" afterwards. A worker stops at its first "Fired!".
"""

from . import fields
from . import identity
from .envelope import Envelope


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
