"""
Logging configuration for the API doc code generator.

Stages log through children of the package logger ("apidoc_codegen.scanner",
"apidoc_codegen.synthesizer", ...). Records go to stderr: stdout belongs to
the CLI, whose only output there is the final Success!/Failed: line.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "apidoc_codegen"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    # FileHandler stores os.path.abspath of the name it was given
    target = os.path.abspath(path)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Safe to call repeatedly: the console handler is installed once, later
    calls set the level on the logger and every handler, and a log file is
    attached the first time it is named.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Also append records to this file
        stream: Console stream (default: stderr)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not logger.handlers:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file and not _has_file_handler(logger, Path(log_file)):
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger


# Package logger, configured at import so library use logs without setup
logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """Child logger for one pipeline stage, e.g. get_module_logger("scanner")."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{module_name}")
