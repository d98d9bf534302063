"""
Logging Configuration
JSON log output for view compilation and rendering
"""
import logging
import logging.handlers
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union
from datetime import datetime, timezone

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord('', 0, '', 0, '', (), None))) | {'message', 'asctime'}


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line

    Standard fields come first, followed by anything passed via `extra`:

        {"timestamp": "...", "level": "INFO", "logger": "bladerunner.view.compilers",
         "message": "Compiled view /app/views/home.blade.html", "compiled": "/app/storage/views/3f2a.py"}
    """

    def __init__(self, static_fields: Optional[Dict[str, Any]] = None):
        """
        Args:
            static_fields: Fields added to every entry (e.g. {'service': 'web'})
        """
        super().__init__()
        self.static_fields = dict(static_fields or {})

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(self.static_fields)
        entry.update(self.extra_fields(record))

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)

    @staticmethod
    def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
        return {
            key: value for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith('_')
        }


class LoggerConfig:
    """
    Centralized logging configuration

    Example:
        LoggerConfig.setup_logger(
            log_file='storage/logs/views.log',
            environment='development',
            console=True,
        )
    """

    LEVELS = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.DEBUG,
        'local': logging.DEBUG,
        'testing': logging.ERROR,
    }

    @classmethod
    def setup_logger(
        cls,
        name: str = 'bladerunner',
        log_file: Optional[Union[str, Path]] = None,
        environment: str = 'production',
        console: bool = False,
        plain: bool = False,
        max_bytes: int = None,
        backup_count: int = None,
    ) -> logging.Logger:
        """
        Configure a logger with a rotating file and/or console handler

        Args:
            name: Logger name
            log_file: Log file path; no file handler when omitted
            environment: Environment name used to pick the level
            console: Also log to stderr
            plain: Human readable lines instead of JSON
            max_bytes: Max bytes before rotation
            backup_count: Number of rotated files to keep

        Returns:
            Configured logger
        """
        from bladerunner.defaults import DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT

        formatter = (
            logging.Formatter('%(asctime)s %(levelname)s [%(name)s] %(message)s')
            if plain else JSONFormatter()
        )

        handlers = []
        if log_file is not None:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes or DEFAULT_LOG_MAX_BYTES,
                backupCount=DEFAULT_LOG_BACKUP_COUNT if backup_count is None else backup_count,
                encoding='utf-8'
            ))
        if console:
            handlers.append(logging.StreamHandler())

        logger = logging.getLogger(name)
        logger.setLevel(cls.get_level_by_environment(environment))
        cls._replace_handlers(logger, handlers, formatter)

        # Entries are written once, by this logger's own handlers
        logger.propagate = False

        return logger

    @classmethod
    def get_level_by_environment(cls, environment: str) -> int:
        return cls.LEVELS.get(environment.lower(), logging.INFO)

    @staticmethod
    def _replace_handlers(logger: logging.Logger, handlers: Iterable[logging.Handler], formatter: logging.Formatter):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
