# c1_assist/utils/__init__.py
"""
Utilities package.
Exports commonly used functions for external access.
"""

from .log import reconfigure_loggers, setup_logger, clear_logger_configuration

__all__ = [
    "reconfigure_loggers",
    "setup_logger",
    "clear_logger_configuration"
]
