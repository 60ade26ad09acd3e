"""
Logging configuration for benchtrack.

Provides centralized logging setup with clean, concise terminal output.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

# Applied to every logger created through setup_logger after configure_logging runs
_default_level = logging.INFO
_default_log_file: Optional[Path] = None


def setup_logger(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.
    
    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO, or the level given to configure_logging)
        log_file: Optional file path for log output
        
    Returns:
        Configured logger instance
    """
    level = _default_level if level is None else level
    log_file = log_file or _default_log_file

    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    
    # Console handler with clean formatting
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    
    # Clean format: [LEVEL] message
    console_formatter = logging.Formatter(
        fmt='[%(levelname)s] %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)
    
    # Optional file handler with more detailed format
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        
        file_formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    
    # Prevent propagation to root logger
    logger.propagate = False
    
    return logger


def configure_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Re-apply level and file output to every benchtrack logger.

    Module loggers are created at import time, before the CLI has read
    --verbose or the configured log file, so they are rebuilt here.
    """
    global _default_level, _default_log_file
    _default_level = level
    _default_log_file = log_file

    for name in list(logging.root.manager.loggerDict):
        if name == "benchtrack" or name.startswith("benchtrack."):
            setup_logger(name, level=level, log_file=log_file)
