"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at process start (ShortenerApp
does it when asked to) before any other logging is done.

Logging format:
{
    "timestamp": "2026-10-16T12:00:00.000Z",
    "level": "INFO",
    "logger": "clickshortener.sweeper",
    "thread": "link-sweeper",
    "message": "Expired links evicted.",
    "evicted": 3
}
"""

import json
import logging
import logging.config
from datetime import datetime, UTC

from clickshortener.utils.config import log_level as configured_log_level


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'message',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'thread': record.threadName,
            'message': record.getMessage(),
        }

        # Attach `extra` fields; UUIDs, datetimes and the like go through str()
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': (level or configured_log_level()).upper(),
                'handlers': ['stdout'],
            },
        }
    )
