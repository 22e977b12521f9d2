"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting generation (single, batch, grouped)
    * :mod:`.enums` - Domain enumerations (OutputFormat, DuplicatePolicy)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    GREETING_FORMATS,
    GreetingGenerator,
    LogSink,
    RandomSource,
    group_hellos,
    hello,
    hellos,
)
from .enums import DuplicatePolicy, OutputFormat
from .errors import ConfigurationError, DuplicateNameError, EmptyNameError

__all__ = [
    # Behaviors
    "GREETING_FORMATS",
    "GreetingGenerator",
    "LogSink",
    "RandomSource",
    "group_hellos",
    "hello",
    "hellos",
    # Enums
    "DuplicatePolicy",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "DuplicateNameError",
    "EmptyNameError",
]
