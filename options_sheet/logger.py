"""
Logging configuration for the options_sheet package.

Provides console and file handlers, with colored output for interactive
terminals and optional JSON file logs.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json

PACKAGE_LOGGER = "options_sheet"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for file logs that get parsed later."""

    RECORD_FIELDS = {
        'level': 'levelname',
        'logger': 'name',
        'module': 'module',
        'function': 'funcName',
        'line': 'lineno',
    }

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'message': record.getMessage(),
        }
        entry.update({key: getattr(record, attr) for key, attr in self.RECORD_FIELDS.items()})
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        # Caller-supplied fields
        entry.update(getattr(record, 'extra_data', {}))
        return json.dumps(entry, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name for terminals."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Other handlers share the record and must see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}\033[1m{record.levelname}{self.RESET}"
        return super().format(colored)


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_level: str = "WARNING",
    log_dir: Optional[Path] = None,
    console_output: bool = True,
    file_output: bool = False,
    json_logs: bool = False,
    colored_console: bool = True,
) -> logging.Logger:
    """
    Setup and configure logger for the package.

    Args:
        name: Logger name
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files (default: logs/)
        console_output: Enable console logging (to stderr)
        file_output: Enable file logging
        json_logs: Use JSON format for file logs
        colored_console: Use colored output for console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    if console_output:
        # stdout is reserved for formula results
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, log_level.upper()))

        if colored_console and sys.stderr.isatty():
            console_format = ColoredFormatter(
                '%(asctime)s | %(levelname)s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        else:
            console_format = logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

    if file_output:
        if log_dir is None:
            log_dir = Path("logs")
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"{name}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(logging.DEBUG)  # File gets all logs

        if json_logs:
            file_format = JsonFormatter()
        else:
            file_format = logging.Formatter(
                '%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance by name.

    The package logger is set up with console-only defaults the first time
    any module asks for a logger; module loggers propagate to it.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    base_name = name.split('.')[0]
    base_logger = logging.getLogger(base_name)

    if not base_logger.handlers:
        setup_logger(name=base_name)

    return logging.getLogger(name)


def configure_logging(config) -> logging.Logger:
    """
    Configure the package logger from a SheetConfig.

    Args:
        config: SheetConfig instance

    Returns:
        The package logger
    """
    return setup_logger(
        name=PACKAGE_LOGGER,
        log_level=config.log_level,
        log_dir=config.log_dir,
        console_output=True,
        file_output=config.log_dir is not None,
        json_logs=config.json_logs,
    )
