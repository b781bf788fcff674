"""Structured JSON logging

Whoever embeds the lifecycle manager calls `initialize_logging()` once at
start-up. Library modules only ever do `logging.getLogger(__name__)` and pass
structured fields through `extra=`; every such field becomes a top-level key
of the emitted JSON line:

    >>> logger.info('Paste not found.', extra={'event': 'PASTE_NOT_FOUND', 'paste_id': 'Xq3bT9aZ', 'reason': 'expired'})
    {"timestamp": "2025-10-19T12:00:00.000Z", "level": "INFO", "logger": "cloudpaste.lifecycle.paste_lifecycle_manager",
     "message": "Paste not found.", "event": "PASTE_NOT_FOUND", "paste_id": "Xq3bT9aZ", "reason": "expired"}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from cloudpaste.constants import ENV


# Attributes every LogRecord carries, plus the ones Formatter.format() adds
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}

# Chatty third-party loggers capped at WARNING
_QUIET_LOGGERS = ('botocore', 'boto3', 'urllib3')


class JsonFormatter(logging.Formatter):
    """Render a LogRecord, including its `extra` fields, as one JSON object"""

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            log['stack'] = self.formatStack(record.stack_info)

        # default=str: extras may carry enums, exceptions, datetimes
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Send JSON logs to stdout at `level` (default: LOG_LEVEL env var, else INFO)"""
    level = (level or os.getenv(ENV.App.LOG_LEVEL) or 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'loggers': {name: {'level': 'WARNING'} for name in _QUIET_LOGGERS},
            'root': {'level': level, 'handlers': ['stdout']},
        }
    )
