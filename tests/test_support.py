import logging

from normalforms import ParseError
from normalforms.support import excepthook
from normalforms.support.logging import DeltaTimeFormatter, Timer


def test_excepthook_prints_user_errors(capsys):
    excepthook.excepthook(ParseError, ParseError('incomplete formula'), None)
    assert capsys.readouterr().err == 'ParseError: incomplete formula\n'


def test_excepthook_delegates_other_errors(monkeypatch):
    calls = []
    monkeypatch.setattr(excepthook, 'sys_excepthook',
                        lambda *args: calls.append(args))
    exc = ValueError('bad')
    excepthook.excepthook(ValueError, exc, None)
    assert calls == [(ValueError, exc, None)]


def test_delta_time_formatter():
    formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    record = logging.LogRecord('demo', logging.INFO, __file__, 1, 'hello', None, None)
    formatter.set_reference_time(record.created - 1.5)
    assert formatter.format(record).endswith(': hello')
    assert record.delta.startswith('0:00:01')


def test_timer():
    timer = Timer()
    first = timer.get()
    assert first >= 0.0
    assert timer.get() >= first
    timer.reset()
    assert timer.get() >= 0.0


def test_delta_time_formatter_reference_time_is_settable_only():
    assert not hasattr(DeltaTimeFormatter, 'get_reference_time')
