""" Command line entry point. One subcommand per role, each taking a single
    endpoint; ``-v`` may be repeated to raise the log level.
"""

import argparse
import logging
import sys

from . import config
from . import log
from .broker import Broker
from .request import Requester
from .transport import TransportError
from .worker import Worker


logger = logging.getLogger(__name__)


def parser():
    """ Build the :class:`argparse.ArgumentParser` for the command line. """

    description = 'CLI entrypoint to the ZeroMQ router/dealer demonstration'
    top = argparse.ArgumentParser(prog='rtdealer', description=description)
    top.add_argument('-v', dest='verbosity', action='count', default=0,
                     help='Sets the level of verbosity')

    subparsers = top.add_subparsers(dest='role', metavar='ROLE')
    subparsers.required = True

    endpoint_help = 'Bind like tcp://*:5555 or connect like tcp://0.0.0.0:5555'

    router = subparsers.add_parser('router', help='Run the broker: bind a ROUTER socket and fire workers')
    router.add_argument('-e', '--endpoint', required=True, help=endpoint_help)
    router.add_argument('--duration', type=float, default=config.BrokerConfig.allowed_duration,
                        help='Seconds to keep workers busy (default: %(default)s)')
    router.add_argument('--workers', type=int, default=config.BrokerConfig.worker_pool_size,
                        help='Retirements to send before stopping (default: %(default)s)')
    router.add_argument('--timeout', type=float, default=None,
                        help='Give up after this many seconds without a request')
    router.add_argument('--distinct', action='store_true',
                        help='Count each worker identity only once toward the quota')

    dealer = subparsers.add_parser('dealer', help='Run a worker: connect a DEALER socket and ask for work')
    dealer.add_argument('-e', '--endpoint', required=True, help=endpoint_help)
    dealer.add_argument('--work-min', type=float, default=config.WorkerConfig.work_min,
                        help='Shortest simulated work, in seconds (default: %(default)s)')
    dealer.add_argument('--work-max', type=float, default=config.WorkerConfig.work_max,
                        help='Longest simulated work, in seconds (default: %(default)s)')
    dealer.add_argument('--timeout', type=float, default=None,
                        help='Give up after this many seconds without a reply')

    req = subparsers.add_parser('req', help='Connect a REQ socket and run a routine')
    req.add_argument('-e', '--endpoint', required=True, help=endpoint_help)
    req.add_argument('-r', '--routine', default='default',
                     help='The routine to run once connected (default: %(default)s)')

    return top


def build(arguments):
    """ Translate parsed *arguments* into the runnable object for the
        selected role. Configuration problems surface here, before any
        socket is opened.
    """

    role = config.check_role(arguments.role)

    if role == 'router':
        settings = config.BrokerConfig(arguments.endpoint,
                                       allowed_duration=arguments.duration,
                                       worker_pool_size=arguments.workers,
                                       timeout=arguments.timeout,
                                       distinct=arguments.distinct)
        return Broker(settings)

    if role == 'dealer':
        settings = config.WorkerConfig(arguments.endpoint,
                                       work_min=arguments.work_min,
                                       work_max=arguments.work_max,
                                       timeout=arguments.timeout)
        return Worker(settings)

    settings = config.RequestConfig(arguments.endpoint, arguments.routine)
    return Requester(settings)


def main(argv=None):

    arguments = parser().parse_args(argv)

    level = log.level_for(arguments.verbosity)
    log.get_logger('rtdealer', level)
    logger.debug("Found level: %s", logging.getLevelName(level))
    logger.log(log.TRACE, "CLI params: %r", vars(arguments))

    try:
        role = build(arguments)
    except config.ConfigurationError as e:
        logger.error(str(e))
        print('rtdealer: ' + str(e), file=sys.stderr)
        return 1

    try:
        role.run()
    except TransportError as e:
        logger.error("%s failed: %s", arguments.role, e)
        print('rtdealer: ' + str(e), file=sys.stderr)
        return 1
    finally:
        role.close()

    return 0


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
