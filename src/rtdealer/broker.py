import logging
import time

from . import protocol
from .transport import framing
from .transport.zmq import Router


logger = logging.getLogger(__name__)


class Broker:
    """ The :class:`Broker` binds a listening endpoint and answers every
        worker request with either a continue signal or a retirement signal.
        The choice depends only on how long it has been since the broker
        started: workers are told to work harder until *allowed_duration*
        seconds have elapsed, and are fired after that. The broker stops
        once it has sent *worker_pool_size* retirement replies.

        The decision is made independently for every request. There is no
        draining state or broadcast; two workers asking at nearly the same
        moment can get different answers depending on arrival order.

        The quota counts replies sent, not distinct workers. A worker that
        ignores its retirement and asks again is fired again, and counts
        again. Setting *distinct* in the configuration changes the count to
        one per worker identity; repeat requests from a retired worker still
        get "Fired!" but no longer move the broker toward stopping.

        *transport* defaults to a ZeroMQ ROUTER socket. *clock* is the
        source of elapsed time, :func:`time.monotonic` unless a test wants
        otherwise.

        :ivar start_time: The *clock* reading captured when the endpoint was
            bound; None until :func:`start` is called.
        :ivar workers_fired: The number of retirement replies sent so far.
    """

    def __init__(self, config, transport=None, clock=time.monotonic):

        self.config = config.validate()
        self.allowed_duration = self.config.allowed_duration
        self.worker_pool_size = self.config.worker_pool_size

        if transport is None:
            transport = Router()

        self.transport = transport
        self.clock = clock

        self.start_time = None
        self.workers_fired = 0
        self.retired = set()


    @property
    def done(self):
        """ True once the retirement quota has been met. """

        if self.config.distinct:
            fired = len(self.retired)
        else:
            fired = self.workers_fired

        return fired >= self.worker_pool_size


    @property
    def endpoint(self):
        """ The endpoint actually bound, which may differ from the
            configured one when a wildcard port was requested.
        """

        return getattr(self.transport, 'endpoint', None) or self.config.endpoint


    def start(self, endpoint=None):
        """ Bind the listening endpoint and start the clock. A failure to
            bind raises :class:`rtdealer.transport.TransportBindError`; there
            is no retry.
        """

        if endpoint is None:
            endpoint = self.config.endpoint

        self.transport.open(endpoint)
        self.start_time = self.clock()

        logger.info("Broker listening on %s: %d worker(s), %.3f sec budget",
                    self.endpoint, self.worker_pool_size, self.allowed_duration)


    def elapsed(self, now=None):
        if self.start_time is None:
            raise RuntimeError('the Broker must be started before it can keep time')

        if now is None:
            now = self.clock()

        return now - self.start_time


    def decide(self, now=None):
        """ Return the reply payload appropriate for a request arriving at
            *now*: the continue signal while inside the budget, the
            retirement signal after it.
        """

        if self.elapsed(now) < self.allowed_duration:
            return protocol.fields.WORK
        else:
            return protocol.fields.FIRED


    def serve_one(self):
        """ Receive one request, reply to it, and return the
            :class:`rtdealer.protocol.Envelope` that was sent. The request
            body is checked for shape and otherwise ignored.
        """

        peer, parts = self.transport.recv(self.config.timeout)
        request = framing.to_envelope(peer, parts)

        response = request.reply(self.decide())
        self.transport.send(response.peer, framing.from_envelope(response))

        if response.fired:
            self.workers_fired += 1
            self.retired.add(response.peer)
            logger.info("Fired worker %s (%d/%d)", response.peer.hex(),
                        self.workers_fired, self.worker_pool_size)
        else:
            logger.debug("Worker %s told to work harder", response.peer.hex())

        return response


    def run(self):
        """ Serve requests until the retirement quota is met, then return
            the number of retirement replies sent. Transport failures and
            malformed requests propagate; nothing is retried.
        """

        if self.start_time is None:
            self.start()

        while not self.done:
            self.serve_one()

        logger.info("Broker done after firing %d worker(s)", self.workers_fired)
        return self.workers_fired


    def close(self):
        self.transport.close()


# end of class Broker


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
