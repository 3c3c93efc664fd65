import logging

import pytest

import rtdealer
from rtdealer import cli, log

from conftest import Background


@pytest.mark.parametrize('verbosity,level', (
    (0, logging.ERROR),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (3, log.TRACE),
    (7, log.TRACE),
))
def test_verbosity(verbosity, level):
    assert log.level_for(verbosity) == level


def test_trace_level_name():
    assert logging.getLevelName(log.TRACE) == 'TRACE'


def test_get_logger():
    first = log.get_logger('rtdealer.test_cli', logging.DEBUG)
    second = log.get_logger('rtdealer.test_cli', logging.INFO)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO


def test_parse():
    arguments = cli.parser().parse_args(['-vv', 'router', '-e', 'tcp://*:5555', '--workers', '2'])

    assert arguments.verbosity == 2
    assert arguments.role == 'router'
    assert arguments.endpoint == 'tcp://*:5555'
    assert arguments.workers == 2
    assert arguments.duration == 30
    assert arguments.timeout is None
    assert arguments.distinct == False

    arguments = cli.parser().parse_args(['dealer', '--endpoint', 'tcp://0.0.0.0:5555'])

    assert arguments.verbosity == 0
    assert arguments.work_min == 0.0
    assert arguments.work_max == 0.1

    arguments = cli.parser().parse_args(['req', '-e', 'tcp://0.0.0.0:5555'])
    assert arguments.routine == 'default'


def test_build():
    arguments = cli.parser().parse_args(['router', '-e', 'tcp://*:5555', '--duration', '1.5'])
    role = cli.build(arguments)

    assert isinstance(role, rtdealer.Broker)
    assert role.allowed_duration == 1.5
    assert role.transport.is_open == False

    arguments = cli.parser().parse_args(['dealer', '-e', 'tcp://0.0.0.0:5555'])
    assert isinstance(cli.build(arguments), rtdealer.Worker)

    arguments = cli.parser().parse_args(['req', '-e', 'tcp://0.0.0.0:5555'])
    assert isinstance(cli.build(arguments), rtdealer.Requester)


def test_missing_role():
    with pytest.raises(SystemExit) as caught:
        cli.main([])

    assert caught.value.code == 2


def test_missing_endpoint():
    with pytest.raises(SystemExit) as caught:
        cli.main(['dealer'])

    assert caught.value.code == 2


def test_bad_configuration(capsys):
    assert cli.main(['router', '-e', '']) == 1
    assert cli.main(['router', '-e', 'tcp://*:5555', '--workers', '0']) == 1
    assert cli.main(['dealer', '-e', 'tcp://0.0.0.0:5555', '--work-min', '1', '--work-max', '0.5']) == 1
    assert cli.main(['req', '-e', 'tcp://0.0.0.0:5555', '-r', 'bogus']) == 1

    captured = capsys.readouterr()
    assert 'unknown routine' in captured.err


def test_non_finite_arguments(capsys):
    assert cli.main(['router', '-e', 'tcp://*:5555', '--duration', 'nan']) == 1
    assert cli.main(['router', '-e', 'tcp://*:5555', '--timeout', 'nan']) == 1
    assert cli.main(['dealer', '-e', 'tcp://0.0.0.0:5555', '--work-max', 'inf']) == 1

    captured = capsys.readouterr()
    assert 'must be finite' in captured.err


def test_req_default(free_endpoint, caplog):
    caplog.set_level(logging.INFO, logger='rtdealer')

    assert cli.main(['-v', 'req', '-e', free_endpoint]) == 0
    assert 'Running default routine for req after connect to ' + free_endpoint in caplog.text


def test_bind_failure(capsys):
    assert cli.main(['router', '-e', 'nonsense']) == 1

    captured = capsys.readouterr()
    assert 'cannot bind' in captured.err


def test_router_and_dealer(free_endpoint):
    """ Run both roles through the command line front end against each
        other on a loopback port.
    """

    router = Background(lambda: cli.main(['router', '-e', free_endpoint,
                                          '--duration', '0', '--workers', '1',
                                          '--timeout', '5']))
    router.start()

    dealer = cli.main(['dealer', '-e', free_endpoint, '--timeout', '5'])

    assert dealer == 0
    assert router.outcome() == 0


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
