"""
Logging Module

Logging setup for the scoring tool.

Diagnostics go to stderr by default so stdout carries only the score.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def setup_logging(
    level: str = 'WARNING',
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure application logging.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for file logging
        format_string: Custom format string
        stream: Console stream, defaults to stderr
        
    Returns:
        Root logger
    """
    level_map = {name: getattr(logging, name) for name in LOG_LEVELS}
    
    log_level = level_map.get(level.upper(), logging.WARNING)
    
    if format_string is None:
        format_string = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
    
    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    
    # Clear existing handlers
    root_logger.handlers = []
    
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a named logger."""
    return logging.getLogger(name)
