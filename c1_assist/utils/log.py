# c1_assist/utils/log.py
"""
Logging setup for application log files.

Loggers are created at import time without handlers.
File handlers are added when reconfigure_loggers() is called
once the application has started.
"""

import logging
from pathlib import Path
from typing import Optional

# Module-level registry to track configured loggers
_configured_loggers = set()

FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def setup_logger(name: str, level: int = logging.DEBUG) -> logging.Logger:
    """
    Create or retrieve a logger without console handlers.

    File handlers are added later by reconfigure_loggers().

    Args:
        name: Logger name (e.g., "core.scaffold")
        level: Logging level (default: DEBUG)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False  # Prevent duplicate logs to root logger

    return logger


def reconfigure_loggers(log_dir: Optional[Path] = None) -> Path:
    """
    Point every active logger at a file in the application log directory.

    Existing file handlers are replaced; stream handlers are preserved.
    Log files are opened in append mode.

    Args:
        log_dir: Target directory (default: CFG.LOG_DIR)

    Returns:
        The log directory in use
    """
    if log_dir is None:
        from ..config import DEFAULT_CONFIG as CFG
        log_dir = CFG.LOG_DIR

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger_names = list(logging.Logger.manager.loggerDict.keys())
    loggers_to_configure = [logging.getLogger(name) for name in logger_names]

    for logger in loggers_to_configure:
        _remove_file_handlers(logger)

        # Only our own loggers get a file
        if logger.name.split(".")[0] not in ("core", "gui", "utils", "app"):
            continue

        log_file = log_dir / (logger.name.replace('.', '_') + ".log.txt")
        try:
            fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            logging.getLogger().warning(f"Could not create log file handler for {logger.name}: {e}")
            continue

        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(fh)
        _configured_loggers.add(logger.name)

    return log_dir


def _remove_file_handlers(logger: logging.Logger) -> None:
    for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        handler.close()
        logger.removeHandler(handler)


def get_configured_loggers() -> set:
    """Return set of logger names that have been configured with file handlers."""
    return _configured_loggers.copy()


def clear_logger_configuration():
    """Remove all file handlers from all loggers."""
    logger_names = list(logging.Logger.manager.loggerDict.keys())
    for logger in [logging.getLogger(name) for name in logger_names]:
        _remove_file_handlers(logger)

    _configured_loggers.clear()

