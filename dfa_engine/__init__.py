"""
DFA engine: validation and execution of deterministic finite automata.
Centralized exports for the public API.
"""

import logging

from .dfa import DFA

from .errors import (
    DFAError,
    DFAValidationError,
    ValidationErrorKind,
)

from .models import (
    DFAConfig,
    DFAResult,
    ExecutionStep,
    ExecutionTrace,
)

from .library import (
    contains,
    count_parity,
    divisible_by,
    ends_with,
    starts_with,
)

from .settings import Settings

from .logging_config import setup_logging, get_logger

__all__ = [
    # Engine
    "DFA",
    # Errors
    "DFAError",
    "DFAValidationError",
    "ValidationErrorKind",
    # Models
    "DFAConfig",
    "DFAResult",
    "ExecutionStep",
    "ExecutionTrace",
    # Library
    "contains",
    "count_parity",
    "divisible_by",
    "ends_with",
    "starts_with",
    # Settings / logging
    "Settings",
    "setup_logging",
    "get_logger",
]

# Silent until the application calls setup_logging().
logging.getLogger(__name__).addHandler(logging.NullHandler())
