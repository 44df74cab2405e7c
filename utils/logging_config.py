# utils/logging_config.py
import logging
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown logging level '{level}'")
        return value
    return level


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None,
                  logger_name: Optional[str] = None) -> logging.Logger:
    """
    Set up logging with a console handler and optionally a file handler.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("debug").
        log_file: Optional path to a file for logging output.
        logger_name: Configure this logger instead of the root logger.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(_coerce_level(level))
    
    # Clear existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()
    
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    
    # Console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    
    # Optional file handler
    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
    return logger

def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Retrieve a logger with the given name.

    Args:
        name: The name of the logger.
        level: Optional level; when omitted the logger inherits from its parents.

    Returns:
        The logger.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_coerce_level(level))
    return logger
