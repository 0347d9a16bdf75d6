"""JSON logging for processes embedding the link store

Modules log through `logging.getLogger(__name__)` and attach context with
`extra={...}`. Nothing is configured on import: the process entry point (the
HTTP layer, a worker, or `open_service(configure_logging=True)`) calls
`initialize_logging()` once to route every record to stdout as one JSON line:

    {"timestamp": "2025-12-26T12:00:00.000Z", "level": "DEBUG",
     "logger": "golinks.dao.redis.stats_redis_dao", "message": "Saved click stats.", "keys": 2}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC
from typing import Optional

from golinks.constants import ENV


# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render a LogRecord and its `extra` fields as a single JSON object"""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        entry = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        entry.update((key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS)

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def initialize_logging(level: Optional[str] = None) -> None:
    """Send all log records to stdout through JsonFormatter

    Args:
        level (Optional[str]):
            Root log level name. Defaults to $LOG_LEVEL, then 'INFO'.
    """
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
            'root': {'level': level, 'handlers': ['stdout']},
        }
    )
