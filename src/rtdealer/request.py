""" The request/connect handshake: connect a REQ socket to an endpoint and
    run a named routine against it.
"""

import logging

from . import config
from .transport.zmq import Request


logger = logging.getLogger(__name__)


class Requester:

    def __init__(self, settings, transport=None):

        self.config = settings.validate()

        if transport is None:
            transport = Request()

        self.transport = transport
        self.routines = {'default': self.default}


    def run(self):
        try:
            routine = self.routines[self.config.routine]
        except KeyError:
            raise config.ConfigurationError('unknown routine for socket of type req: ' + repr(self.config.routine))

        logger.info("Preparing to connect REQ socket")
        self.transport.open(self.config.endpoint)

        try:
            return routine()
        finally:
            self.transport.close()


    def close(self):
        self.transport.close()


    def default(self):
        logger.info("Running default routine for req after connect to %s", self.config.endpoint)


# end of class Requester


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
