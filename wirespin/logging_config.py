#
# PROJECT: wirespin
# MODULE: wirespin/logging_config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 8
# LOG_REF: 2026-10-19
#
"""
Logging Configuration
Sets up the package logger.
"""
import logging
import sys
from typing import Optional

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  console: bool = True) -> logging.Logger:
    """
    Configures the logger for the 'wirespin' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        console: Attach a stderr handler. The curses demo turns this off
            while it owns the terminal.
    """
    logger = logging.getLogger("wirespin")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(FORMAT, datefmt='%H:%M:%S')

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
    return logger
