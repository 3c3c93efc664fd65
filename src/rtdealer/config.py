""" Validated configuration for each role. The values are plain attributes;
    :func:`validate` is called before any socket is opened, so a bad endpoint
    or an impossible quota never reaches the transport.
"""

import math

from . import protocol


class ConfigurationError(ValueError):
    """ An endpoint, role, routine, or numeric setting is missing or
        invalid.
    """


roles = ('router', 'dealer', 'req')
routines = ('default',)


def check_endpoint(endpoint):
    """ Endpoints are opaque strings handed straight to the transport; the
        only requirement here is that one was provided.
    """

    if not isinstance(endpoint, str):
        raise ConfigurationError('endpoint must be a string, not ' + repr(endpoint))

    if endpoint.strip() == '':
        raise ConfigurationError('an endpoint is required')

    return endpoint


def check_role(role):
    if role in roles:
        return role

    raise ConfigurationError('unknown role: ' + repr(role))


def _number(value, name):
    """ Return *value* as a finite float. """

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(name + ' must be a number, not ' + repr(value))

    if not math.isfinite(number):
        raise ConfigurationError(name + ' must be finite, not ' + repr(value))

    return number


def _count(value, name):
    """ Return *value* as an int, refusing anything with a fractional part. """

    number = _number(value, name)
    if not number.is_integer():
        raise ConfigurationError(name + ' must be a whole number, not ' + repr(value))

    return int(number)


def _check_timeout(timeout):
    """ An infinite timeout is the same as none at all: block forever. """

    if timeout is None:
        return None

    if isinstance(timeout, (int, float)) and timeout == math.inf:
        return None

    timeout = _number(timeout, 'timeout')
    if timeout < 0:
        raise ConfigurationError('timeout cannot be negative: ' + repr(timeout))

    return timeout


class BrokerConfig:
    """ Settings for :class:`rtdealer.broker.Broker`.

        *allowed_duration* is the number of seconds after binding during
        which workers are told to keep working; *worker_pool_size* is the
        number of retirement replies to send before the broker stops.
        *timeout*, if set, bounds each receive in seconds. *distinct*
        switches the quota from counting replies to counting distinct
        worker identities.
    """

    allowed_duration = 30
    worker_pool_size = 4

    def __init__(self, endpoint, allowed_duration=None, worker_pool_size=None,
                 timeout=None, distinct=False):

        self.endpoint = endpoint
        if allowed_duration is not None:
            self.allowed_duration = allowed_duration
        if worker_pool_size is not None:
            self.worker_pool_size = worker_pool_size

        self.timeout = timeout
        self.distinct = bool(distinct)


    def validate(self):
        check_endpoint(self.endpoint)

        self.allowed_duration = _number(self.allowed_duration, 'allowed duration')
        if self.allowed_duration < 0:
            raise ConfigurationError('allowed duration cannot be negative')

        self.worker_pool_size = _count(self.worker_pool_size, 'worker pool size')
        if self.worker_pool_size < 1:
            raise ConfigurationError('worker pool size must be at least 1')

        self.timeout = _check_timeout(self.timeout)
        return self


# end of class BrokerConfig



class WorkerConfig:
    """ Settings for :class:`rtdealer.worker.Worker`. Simulated work after
        each continue signal sleeps for a duration drawn uniformly from
        *work_min* to *work_max* seconds; set them equal for a fixed delay.

        Any well-formed reply other than "Fired!" counts as a continue
        signal. With *strict* set, a reply that is neither "Work harder"
        nor "Fired!" is rejected as a framing error instead.
    """

    work_min = 0.0
    work_max = 0.1

    def __init__(self, endpoint, work_min=None, work_max=None, timeout=None,
                 identity_length=protocol.identity.LENGTH, strict=False):

        self.endpoint = endpoint
        if work_min is not None:
            self.work_min = work_min
        if work_max is not None:
            self.work_max = work_max

        self.timeout = timeout
        self.identity_length = identity_length
        self.strict = bool(strict)


    def validate(self):
        check_endpoint(self.endpoint)

        self.work_min = _number(self.work_min, 'work_min')
        self.work_max = _number(self.work_max, 'work_max')

        if self.work_min < 0:
            raise ConfigurationError('work duration cannot be negative')
        if self.work_max < self.work_min:
            raise ConfigurationError('work range is inverted: %r > %r' % (self.work_min, self.work_max))

        self.identity_length = _count(self.identity_length, 'identity length')
        if self.identity_length < 1 or self.identity_length > protocol.identity.MAXIMUM:
            raise ConfigurationError('identity length must be 1..%d bytes' % (protocol.identity.MAXIMUM))

        self.timeout = _check_timeout(self.timeout)
        return self


# end of class WorkerConfig



class RequestConfig:
    """ Settings for :class:`rtdealer.request.Requester`. """

    def __init__(self, endpoint, routine='default'):
        self.endpoint = endpoint
        self.routine = routine


    def validate(self):
        check_endpoint(self.endpoint)

        if self.routine not in routines:
            raise ConfigurationError('unknown routine for socket of type req: ' + repr(self.routine))

        return self


# end of class RequestConfig


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
