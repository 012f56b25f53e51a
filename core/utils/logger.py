"""
Diagnostic logging for dotenvx-interactive.

Operator-facing messages go through ``core.utils.console``; this logger only
carries diagnostics (timings, spawned commands, tracebacks of unexpected
faults).
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from core.config import Config
from core.utils.console import console

LOGGER_NAME = "dotenvx_interactive"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        verbose (bool): Show debug records on the console.
        log_file (Optional[str]): Also write every record to this file.
            Defaults to ``Config.LOG_FILE``.

    Returns:
        logging.Logger: The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = RichHandler(console=console, show_path=False, markup=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.addHandler(console_handler)

    log_file = log_file or Config.LOG_FILE
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
