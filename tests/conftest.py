import collections
import socket
import threading

import pytest

import rtdealer
from rtdealer.transport import DealerTransport, RouterTransport, TransportError


class FakeClock:
    """ A clock that only moves when told to. """

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FakeRouter(RouterTransport):
    """ Stand-in for the ROUTER adapter. Inbound messages are queued with
        :func:`push`; every reply is recorded in :attr:`sent`. Calling
        :func:`recv` on an empty queue raises, which ends a runaway loop.
    """

    def __init__(self, on_recv=None):
        self.inbound = collections.deque()
        self.sent = list()
        self.endpoint = None
        self.on_recv = on_recv
        self.closed = False

    @property
    def is_open(self):
        return self.endpoint is not None and not self.closed

    def open(self, endpoint):
        self.endpoint = endpoint

    def close(self):
        self.closed = True

    def push(self, peer, *frames):
        if not frames:
            frames = (b'', b'Hi boss!')
        self.inbound.append((peer, tuple(frames)))

    def send(self, peer, frames):
        self.sent.append((peer,) + tuple(frames))

    def recv(self, timeout=None):
        if self.on_recv is not None:
            self.on_recv(self)
        if not self.inbound:
            raise TransportError('no more scripted requests')
        return self.inbound.popleft()


class FakeDealer(DealerTransport):
    """ Stand-in for the DEALER adapter, answering from a scripted list of
        replies.
    """

    def __init__(self, replies=()):
        self.replies = collections.deque(replies)
        self.sent = list()
        self.endpoint = None
        self.closed = False

    @property
    def is_open(self):
        return self.endpoint is not None and not self.closed

    def open(self, endpoint):
        self.endpoint = endpoint

    def close(self):
        self.closed = True

    def send(self, frames):
        self.sent.append(tuple(frames))

    def recv(self, timeout=None):
        if not self.replies:
            raise TransportError('no more scripted replies')
        return tuple(self.replies.popleft())


def work(continues):
    """ Scripted broker replies: *continues* work signals, then fired. """

    replies = [(b'', b'Work harder')] * continues
    replies.append((b'', b'Fired!'))
    return replies


class Background(threading.Thread):
    """ Run *target* on a daemon thread and keep its result or exception. """

    def __init__(self, target):
        threading.Thread.__init__(self, daemon=True)
        self.target = target
        self.result = None
        self.error = None

    def run(self):
        try:
            self.result = self.target()
        except Exception as e:
            self.error = e

    def outcome(self, timeout=10):
        self.join(timeout)
        assert not self.is_alive(), 'background role did not finish'
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def router():
    return FakeRouter()


@pytest.fixture
def endpoint():
    """ A loopback endpoint with a wildcard port; the bound port is read
        back from the broker after it starts.
    """

    return 'tcp://127.0.0.1:*'


@pytest.fixture
def free_endpoint():
    """ A loopback endpoint on a port that was free a moment ago. """

    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(('127.0.0.1', 0))
    port = probe.getsockname()[1]
    probe.close()

    return 'tcp://127.0.0.1:%d' % (port)


@pytest.fixture
def started_broker(endpoint):
    """ Factory for real brokers bound to loopback; each is closed after
        the test.
    """

    brokers = list()

    def factory(**kwargs):
        kwargs.setdefault('timeout', 5)
        settings = rtdealer.config.BrokerConfig(endpoint, **kwargs)
        broker = rtdealer.Broker(settings)
        broker.start()
        brokers.append(broker)
        return broker

    yield factory

    for broker in brokers:
        broker.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
