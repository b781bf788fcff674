"""Unit tests for JSON logging in logging.py

Test coverage includes:

1. JsonFormatter output
   - Standard fields, `extra` fields, exception tracebacks and stack info.
   - Non-JSON-serializable extras are rendered with str().

2. initialize_logging()
   - Root logger gets a JSON stdout handler at the requested level or LOG_LEVEL.
   - AWS SDK loggers are capped at WARNING.
"""

import sys
import json
import logging

import pytest
from freezegun import freeze_time

from cloudpaste.lifecycle import NotFoundReason
from cloudpaste.utils.logging import JsonFormatter, initialize_logging


def make_record(msg='Paste created.', level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord(
        name='cloudpaste.lifecycle.paste_lifecycle_manager',
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.__dict__.update(extra)
    return record


# -------------------------------
# 1. JsonFormatter output
# -------------------------------


@freeze_time('2025-10-19 12:00:00.123')
def test_format_standard_fields():
    log = json.loads(JsonFormatter().format(make_record()))

    assert log == {
        'timestamp': '2025-10-19T12:00:00.123Z',
        'level': 'INFO',
        'logger': 'cloudpaste.lifecycle.paste_lifecycle_manager',
        'message': 'Paste created.',
    }


def test_format_extra_fields():
    record = make_record(event='PASTE_NOT_FOUND', paste_id='abc12345', reason=NotFoundReason.EXPIRED)

    log = json.loads(JsonFormatter().format(record))

    assert log['event'] == 'PASTE_NOT_FOUND'
    assert log['paste_id'] == 'abc12345'
    assert log['reason'] == 'expired'


def test_format_unserializable_extra():
    log = json.loads(JsonFormatter().format(make_record(error=ValueError('boom'))))
    assert log['error'] == 'boom'


def test_format_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = make_record('Unexpected error.', level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert log['level'] == 'ERROR'
    assert 'RuntimeError: boom' in log['exception']
    assert 'exc_info' not in log


def test_format_stack_info():
    record = make_record('Slow access.', level=logging.WARNING)
    record.stack_info = 'Stack (most recent call last):\n  File "app.py", line 1'

    log = json.loads(JsonFormatter().format(record))

    assert log['stack'].startswith('Stack (most recent call last):')
    assert 'stack_info' not in log


# -------------------------------
# 2. initialize_logging()
# -------------------------------


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
    for name in ('botocore', 'boto3', 'urllib3'):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.mark.parametrize('env_level, expected', [(None, logging.INFO), ('debug', logging.DEBUG), ('WARNING', logging.WARNING)])
def test_initialize_logging(monkeypatch, restore_root_logger, env_level, expected):
    if env_level is None:
        monkeypatch.delenv('LOG_LEVEL', raising=False)
    else:
        monkeypatch.setenv('LOG_LEVEL', env_level)

    initialize_logging()

    root = restore_root_logger
    assert root.level == expected
    [handler] = [h for h in root.handlers if isinstance(h.formatter, JsonFormatter)]
    assert isinstance(handler, logging.StreamHandler)


def test_initialize_logging_emits_json(monkeypatch, restore_root_logger, capsys):
    monkeypatch.setenv('LOG_LEVEL', 'INFO')
    initialize_logging()

    logging.getLogger('cloudpaste.test').info('Paste viewed.', extra={'paste_id': 'abc12345'})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert json.loads(line)['paste_id'] == 'abc12345'


def test_initialize_logging_with_explicit_level(monkeypatch, restore_root_logger):
    monkeypatch.setenv('LOG_LEVEL', 'ERROR')

    initialize_logging('debug')

    assert restore_root_logger.level == logging.DEBUG


def test_initialize_logging_quiets_aws_sdk(monkeypatch, restore_root_logger):
    monkeypatch.setenv('LOG_LEVEL', 'DEBUG')

    initialize_logging()

    assert logging.getLogger('botocore').level == logging.WARNING
    assert logging.getLogger('cloudpaste').getEffectiveLevel() == logging.DEBUG
