"""
Logging setup for drivers.

The library itself only creates module loggers; programs embedding the
engine call setup_logger() once to see search progress.
"""

import logging
from pathlib import Path
from typing import Optional, Union


def setup_logger(debug: bool = False, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configure the "rooktree" logger.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Write to this file instead of stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("rooktree")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(Path(log_file), mode='w')
    else:
        handler = logging.StreamHandler()
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
