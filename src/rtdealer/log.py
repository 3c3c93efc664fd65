""" Logger setup for rtdealer. Every module logs through a child of the
    ``rtdealer`` logger; :func:`get_logger` attaches the one handler and
    sets the level, typically once from the command line front end.
"""

import logging
import sys


TRACE = 5
logging.addLevelName(TRACE, 'TRACE')

FORMAT = "%(asctime)s - %(name)s.%(funcName)s.%(lineno)d - [%(levelname)s]: %(message)s"

_verbosity_levels = (logging.ERROR, logging.INFO, logging.DEBUG, TRACE)


def level_for(verbosity):
    """ Map a count of ``-v`` flags to a logging level: 0 is ERROR, 1 is
        INFO, 2 is DEBUG, and 3 or more is TRACE.
    """

    if verbosity < 0:
        verbosity = 0

    try:
        return _verbosity_levels[verbosity]
    except IndexError:
        return TRACE


def get_logger(name='rtdealer', level=logging.INFO):
    """
    Set up and return a logger with a predefined format.

    :param name: Name of the logger.
    :param level: Logging level (e.g., logging.INFO, logging.DEBUG).
    :return: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)

    return logger


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
