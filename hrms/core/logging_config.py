"""
Logging Configuration
=====================

Configures the root logger with a console handler. Safe to call more than
once: if the root logger already has handlers, only the level is updated.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.
    
    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    
    if logger.handlers:
        return
    
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
