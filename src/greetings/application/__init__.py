"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GenerateGreetings,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadGreetingsSettings,
)

__all__ = [
    "DisplayConfig",
    "GenerateGreetings",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadGreetingsSettings",
]
