"""
Logging setup for utilkit.
"""

import logging
from typing import Optional, Union

PACKAGE_LOGGER = "utilkit"

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING,
                      fmt: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the utilkit logger.

    Calling it again replaces the handler installed by a previous call
    instead of stacking another one.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    log.setLevel(level)

    for handler in list(log.handlers):
        if getattr(handler, '_utilkit_handler', False):
            log.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    handler._utilkit_handler = True
    log.addHandler(handler)
    return log
