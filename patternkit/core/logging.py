"""
Loguru setup and dispatch tracing.

Usage:
    setup_logging(sl.config.data.general)
    trace_dispatches(sl.dispatcher)   # "menu/open -> execute" per event
"""
import sys
import os
from typing import Callable, TYPE_CHECKING
from loguru import logger

from .config import GeneralSettings

if TYPE_CHECKING:
    from .commands.dispatcher import EventDispatcher

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def setup_logging(general: GeneralSettings):
    """
    Configures Loguru from the `general` config section.

    debug_mode switches the console to DEBUG, which is where dispatch misses
    and (re)bindings are reported. log_dir adds a rotating file sink.
    """
    logger.remove()

    level = "DEBUG" if general.debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    if general.log_dir:
        os.makedirs(general.log_dir, exist_ok=True)
        logger.add(os.path.join(general.log_dir, "patternkit_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.info(f"Logging initialized ({level}).")


def trace_dispatches(dispatcher: 'EventDispatcher') -> Callable:
    """
    Log every successful dispatch at INFO.

    Returns the connected callback so callers can disconnect it from
    dispatcher.dispatched later.
    """
    def _trace(channel: str, key: str, action: str):
        logger.info(f"{channel}/{key} -> {action}")

    dispatcher.dispatched.connect(_trace)
    return _trace
