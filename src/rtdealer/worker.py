import logging
import random
import time

from . import protocol
from .transport import framing
from .transport.zmq import Dealer


logger = logging.getLogger(__name__)


class Worker:
    """ A :class:`Worker` connects to a broker under a fresh random identity
        and asks for work until it is told to retire. Every continue signal
        counts as one completed unit of work, followed by a simulated work
        delay; the first retirement signal ends the loop.

        *identity* may be supplied for testing; otherwise one is generated
        at :func:`start`. *sleep* and *rng* stand in for :func:`time.sleep`
        and the :mod:`random` module.
    """

    def __init__(self, config, transport=None, identity=None, sleep=time.sleep, rng=random):

        self.config = config.validate()
        self.identity = identity
        self.transport = transport
        self.sleep = sleep
        self.rng = rng

        self.total_completed = 0


    def start(self, endpoint=None):
        """ Pick an identity, attach it to the connection, and connect. """

        if endpoint is None:
            endpoint = self.config.endpoint

        if self.identity is None:
            self.identity = protocol.identity.generate(self.config.identity_length)

        if self.transport is None:
            self.transport = Dealer(self.identity)
        else:
            self.transport.identity = self.identity

        self.transport.open(endpoint)
        logger.info("Worker %s connected to %s", self.identity.hex(), endpoint)


    def request(self):
        """ Send one ready request and return the broker's reply payload. """

        self.transport.send(framing.to_body(protocol.fields.READY))
        parts = self.transport.recv(self.config.timeout)

        if self.config.strict:
            return framing.from_body(parts, expected=protocol.fields.REPLIES)
        else:
            return framing.from_body(parts)


    def work(self):
        duration = self.rng.uniform(self.config.work_min, self.config.work_max)
        self.sleep(duration)
        return duration


    def run(self):
        """ Loop until fired; return the number of completed work units. """

        if self.transport is None or not self.transport.is_open:
            self.start()

        while True:
            reply = self.request()

            if reply == protocol.fields.FIRED:
                break

            self.total_completed += 1
            duration = self.work()
            logger.debug("Worker %s finished unit %d in %.3f sec",
                         self.identity.hex(), self.total_completed, duration)

        logger.info("Worker %s completed %d tasks", self.identity.hex(), self.total_completed)
        return self.total_completed


    def close(self):
        if self.transport is not None:
            self.transport.close()


# end of class Worker


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
