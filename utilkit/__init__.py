"""
Utilkit Python Package

General-purpose utility toolkit - text, data, numeric, validation and timing helpers
"""

import logging

__version__ = "0.1.0"
__author__ = "Mauricio Fernandez"
__email__ = "mauricio.fernandez@siemens.com"

from . import core, data, numeric, text, timing, util
from .core import *  # noqa: F401,F403
from .data import *  # noqa: F401,F403
from .numeric import *  # noqa: F401,F403
from .text import *  # noqa: F401,F403
from .timing import *  # noqa: F401,F403
from .util import *  # noqa: F401,F403

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    ["core", "data", "numeric", "text", "timing", "util"]
    + core.__all__
    + data.__all__
    + numeric.__all__
    + text.__all__
    + timing.__all__
    + util.__all__
)
