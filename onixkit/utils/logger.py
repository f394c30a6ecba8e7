"""
Logging plumbing for onixkit.

`LoggerManager` hands out one configured `logging.Logger` per name, with a
console handler (colored through `colorlog`) and a file handler that can
write structured JSON lines through `JsonLogFormatter`.
"""

import os
import sys
import json
import logging
from typing import Optional

from colorlog import ColoredFormatter

from onixkit.utils.task_paths import TaskPaths


class LoggerManager:
    """
    Factory for singleton `logging.Logger` instances.

    The first call for a name builds the logger and attaches a console
    handler (stdout) and a file handler; later calls return the same object
    so handlers are never attached twice. Propagation is disabled so the
    root logger does not echo every record a second time.

    The log file is resolved in this order:
    - `log_file`, when given explicitly;
    - `task_paths.get_module_log_path(name)`, when a `TaskPaths` is given;
    - `<_default_log_dir>/<name>.log` otherwise.
    """

    _loggers = {}
    _default_log_dir = "logs"

    @classmethod
    def get_logger(
        cls,
        name: str,
        log_file: Optional[str] = None,
        level: str = "INFO",
        use_json: bool = False,
        use_color: bool = True,
        task_paths: Optional[TaskPaths] = None,
    ) -> logging.Logger:
        """
        Retrieve or create a logger configured for console and file output.

        Args:
            name (str): Logger name, usually the onixkit area ("product",
                "config").
            log_file (Optional[str]): Full path to a log file. Overrides
                task_paths if set.
            level (str): Logging level threshold ("DEBUG", "INFO", etc.).
            use_json (bool): If True, format file logs as JSON lines.
            use_color (bool): If True, color console output.
            task_paths (Optional[TaskPaths]): Resolves the log file path
                when `log_file` is not given.

        Returns:
            logging.Logger: A fully configured logger instance.
        """
        if name in cls._loggers:
            return cls._loggers[name]

        logger = logging.getLogger(f"onixkit.{name}")
        logger.setLevel(level.upper())
        logger.propagate = False

        if not log_file and task_paths:
            log_file = task_paths.get_module_log_path(name)

        log_dir = os.path.dirname(log_file) if log_file else cls._default_log_dir
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        if not log_file:
            log_file = os.path.join(log_dir, f"{name}.log")

        logger.addHandler(cls._setup_file_handler(log_file, level, use_json))
        logger.addHandler(cls._setup_console_handler(level, use_color))

        cls._loggers[name] = logger
        return logger

    @staticmethod
    def set_level(logger: logging.Logger, level: str) -> logging.Logger:
        """Apply `level` to `logger` and every handler attached to it."""
        logger.setLevel(level.upper())
        for handler in logger.handlers:
            handler.setLevel(level.upper())
        return logger

    @classmethod
    def reset(cls) -> None:
        """Close and forget every logger handed out so far."""
        for logger in cls._loggers.values():
            for handler in logger.handlers[:]:
                handler.close()
                logger.removeHandler(handler)
        cls._loggers.clear()

    @staticmethod
    def _setup_file_handler(
        filepath: str, level: str, use_json: bool
    ) -> logging.Handler:
        handler = logging.FileHandler(filepath, encoding="utf-8")
        handler.setLevel(level.upper())
        handler.setFormatter(LoggerManager._get_formatter(use_json=use_json, color=False))
        return handler

    @staticmethod
    def _setup_console_handler(level: str, use_color: bool) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level.upper())
        handler.setFormatter(LoggerManager._get_formatter(use_json=False, color=use_color))
        return handler

    @staticmethod
    def _get_formatter(
        use_json: bool = False, color: bool = False
    ) -> logging.Formatter:
        """
        Returns a log formatter object based on configuration.

        Args:
            use_json (bool): If True, returns a JSON formatter.
            color (bool): If True, returns a `colorlog` formatter.

        Returns:
            logging.Formatter: A formatter instance.
        """
        if use_json:
            return JsonLogFormatter()

        fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        datefmt = "%Y-%m-%d %H:%M:%S"

        if color:
            return ColoredFormatter(
                fmt="%(log_color)s" + fmt,
                datefmt=datefmt,
                log_colors={
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'bold_red',
                },
            )
        return logging.Formatter(fmt, datefmt)


class JsonLogFormatter(logging.Formatter):
    """
    Formats each record as one JSON object per line.

    Example Output:
        {
            "timestamp": "2026-10-19 13:12:01",
            "level": "WARNING",
            "logger": "onixkit.product",
            "message": "product.subitem.skipped",
            "path": "Contributor",
            "reason": "<ContributorRole> not found"
        }

    Extra fields are merged in from `extra={"extra_data": {...}}`.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "extra_data"):
            log_record.update(record.extra_data)
        return json.dumps(log_record)
