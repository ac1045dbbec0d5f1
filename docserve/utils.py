#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Logging Setup for docserve
--------------------------
Configures the root logger with a colored console handler and an
optional rotating log file.
"""

import logging
from logging.handlers import RotatingFileHandler

import colorama
from colorama import Fore, Style

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter coloring each record by level."""

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record):
        message = super().format(record)
        color = self.COLORS.get(record.levelno, Fore.GREEN)
        return color + message + Style.RESET_ALL


def setup_logging(log_level='INFO', log_file=None, max_size=10485760, backup_count=5, use_colored_logging=True):
    """
    Set up logging configuration.

    Args:
        log_level: Logging level name (default: INFO)
        log_file: Log file path (default: None, console only)
        max_size: Maximum log file size in bytes (default: 10MB)
        backup_count: Number of rotated logs to keep (default: 5)
        use_colored_logging: Whether to color console output (default: True)

    Returns:
        logging.Logger: Root logger instance
    """
    log_level_value = getattr(logging, str(log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level_value)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if use_colored_logging:
        colorama.init(autoreset=True)

    console_handler = logging.StreamHandler()
    if use_colored_logging:
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count
            )
        except OSError as e:
            root_logger.error(f"Error setting up log file {log_file}: {e}")
        else:
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            root_logger.addHandler(file_handler)

    return root_logger
