"""
Logging Configuration
Sets up the 'clothsim' logger for the demo driver and tests that want output.
"""
import logging
import sys
from typing import Optional, Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str]) -> int:
    """Accept logging.DEBUG as well as 'debug' / 'DEBUG'."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level {level!r}")
    return value


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'clothsim' logger and returns it.

    Args:
        level: Logging level, as a number or a name ("info", "DEBUG").
        log_file: Optional path to also write logs to.
    """
    level = resolve_level(level)
    logger = logging.getLogger("clothsim")
    logger.setLevel(level)
    # records stop here so an application root handler does not print them twice
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}, file={log_file}")
    return logger
