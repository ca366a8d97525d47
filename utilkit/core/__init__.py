# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Core package providing the shared errors, types, settings and logging setup.

This package includes:
- Error codes and the UtilkitError hierarchy
- Shared value types (RGB, RetryOptions, CatchResult, ValueCategory)
- Settings loading from the environment or JSON/YAML files
- Logging configuration for the utilkit logger
"""

from .errors import (
    ErrorCode, UtilkitError, ValidationError, ConfigurationError,
    OperationTimeoutError
)
from .types import (
    ValueCategory, PadDirection, SortOrder, RGB, RetryOptions, CatchResult
)
from .config import (
    Settings, get_config_value, get_bool_config, get_int_config,
    get_float_config
)
from .log import configure_logging

__all__ = [
    # Errors
    'ErrorCode', 'UtilkitError', 'ValidationError', 'ConfigurationError',
    'OperationTimeoutError',

    # Types
    'ValueCategory', 'PadDirection', 'SortOrder', 'RGB', 'RetryOptions',
    'CatchResult',

    # Configuration
    'Settings', 'get_config_value', 'get_bool_config', 'get_int_config',
    'get_float_config',

    # Logging
    'configure_logging'
]
