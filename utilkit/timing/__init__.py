# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Timing package providing call wrappers and async helpers.

This package includes:
- Debounce and throttle wrappers with cancellation
- Once and noop helpers
- Sleep, retry with backoff, timeouts and error capture
"""

from .function import Debounced, Throttled, debounce, throttle, once, noop
from .promise import sleep, retry, retry_sync, timeout, catch_error

__all__ = [
    # Wrappers
    'Debounced', 'Throttled', 'debounce', 'throttle', 'once', 'noop',

    # Async helpers
    'sleep', 'retry', 'retry_sync', 'timeout', 'catch_error'
]
