"""TelebindLogger -- Singleton JSON logger with console and optional rotating file output.

Configures the ``telebind`` logger, the parent of every ``telebind.*``
module logger, so records from the client, the dispatcher and the envelope
decoder all come out as single-line JSON.
"""

import json
import logging
import os
import re
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional

# Bot tokens look like ``123456789:AAH...``; they are part of every API URL.
_TOKEN_RE = re.compile(r"\d{5,}:[A-Za-z0-9_-]{30,}")


def redact_tokens(text: str) -> str:
    return _TOKEN_RE.sub("<token>", text)


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    Standard fields (timestamp, level, logger, message, module, func_name)
    are always present. Keys passed via ``extra=`` are merged in, e.g.::

        logger.warning(
            "Bot API returned an error",
            extra={"api_endpoint": "sendMessage", "error_code": 429, "retry_after": 5},
        )
    """

    # Keys of a bare LogRecord; anything else on a record came from extra=.
    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_tokens(record.getMessage()),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exc_info"] = redact_tokens(self.formatException(record.exc_info))

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TelebindLogger:
    """Singleton owner of the ``telebind`` logger's handlers.

    Usage::

        from core.logger import TelebindLogger

        logger = TelebindLogger.get_logger(log_file="logs/telebind.log")
        logger.info("Bot started")
    """

    _instance: Optional["TelebindLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "telebind"

    # Rotation settings
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_file: Optional[str] = None) -> "TelebindLogger":
        """Ensure only one instance is ever created (Singleton)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_file)
        return cls._instance

    def _init_logger(self, level: int, log_file: Optional[str]) -> None:
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    @staticmethod
    def get_logger(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
        """Return the shared ``telebind`` logger.

        Creates the singleton on first call; later calls return the same
        logger regardless of the arguments.
        """
        instance = TelebindLogger(level, log_file)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton and its handlers (used by tests)."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None
