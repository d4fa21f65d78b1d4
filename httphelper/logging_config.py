"""
Logging configuration for httphelper

Modules log through children of the "httphelper" logger. Importing the library
only attaches a NullHandler; applications that want output either configure
logging themselves or call setup_logging().
"""

import logging
import sys
from pathlib import Path

LIBRARY_LOGGER = "httphelper"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def _is_managed(handler: logging.Handler) -> bool:
    return getattr(handler, "_httphelper_managed", False)


def setup_logging(log_file: Path | None = None, verbose: bool = True) -> logging.Logger:
    """
    Attach console and file handlers to the httphelper logger

    Handlers installed by an earlier call are replaced; handlers added by the
    application are left alone. The logger level is only lowered as far as the
    installed handlers need: DEBUG with a log file, INFO for the console alone.

    Args:
        log_file: Optional file that receives DEBUG output (request/response traces)
        verbose: Whether to also print INFO and above to stdout

    Returns:
        The httphelper logger
    """
    logger = logging.getLogger(LIBRARY_LOGGER)

    for handler in [h for h in logger.handlers if _is_managed(h)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    handlers: list[logging.Handler] = []

    if verbose:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._httphelper_managed = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    if handlers:
        needed = min(h.level for h in handlers)
        if logger.level == logging.NOTSET or logger.level > needed:
            logger.setLevel(needed)

    return logger


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'urls', 'forms')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{LIBRARY_LOGGER}.{module_name}")
