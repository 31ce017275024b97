# c1_assist/app.py
"""
Application bootstrap: logging, exception hook, Qt application and main window.
"""

import logging
import sys

from .config import DEFAULT_CONFIG
from .utils.log import reconfigure_loggers

CONSOLE_LOG_LEVEL = logging.WARNING


def configure_logging():
    logging.basicConfig(
        level=DEFAULT_CONFIG.LOG_LEVEL,
        format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
    )

    for handler in logging.root.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(CONSOLE_LOG_LEVEL)


def handle_exception(exc_type, exc_value, exc_traceback):
    """Global exception handler for uncaught exceptions."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    logging.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))


def main():
    configure_logging()

    from PySide6.QtWidgets import QApplication
    from .gui.main_window import MainWindow

    try:
        app = QApplication(sys.argv)
        app.setApplicationName("C1 Assist")
        app.setOrganizationName("C1 Assist")

        # Loggers exist once the window modules are imported
        reconfigure_loggers()
        sys.excepthook = handle_exception

        window = MainWindow()
        window.show()
        return app.exec()

    except Exception as e:
        logging.critical(f"Application failed to start: {e}", exc_info=True)
        return 1
