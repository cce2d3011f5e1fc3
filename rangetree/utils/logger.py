# rangetree/utils/logger.py

import logging
import os
from pathlib import Path

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATEFMT = '%Y-%m-%d %H:%M:%S'


def _replace_file_handler(logger, log_file, level, formatter):
    """Keep exactly one FileHandler on the logger, pointed at log_file."""
    target = os.path.abspath(log_file)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            if handler.baseFilename == target:
                handler.setLevel(level)
                return
            logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


def setup_logger(name, log_file=None, level=logging.INFO):
    """
    Create a logger with console output and optional file output

    Args:
        name (str): Name of the logger
        log_file (str or Path, optional): Path to log file. A file handler
            left over from an earlier call with another path is closed.
        level (logging level, optional): Logging level

    Returns:
        logging.Logger: Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    consoles = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    if not consoles:
        console_handler = logging.StreamHandler()
        logger.addHandler(console_handler)
        consoles = [console_handler]
    for handler in consoles:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _replace_file_handler(logger, log_file, level, formatter)

    return logger


def get_logger(name, level=logging.INFO):
    """Console-only logger; see setup_logger."""
    return setup_logger(name, level=level)
