"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate entirely
in memory -- no filesystem, no logging framework, no unseeded randomness.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.greeting` - Deterministic greeting generation
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .greeting import generate_greetings_in_memory
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from greetings.application.ports import (
        DisplayConfig,
        GenerateGreetings,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_generate_greetings: GenerateGreetings = generate_greetings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "generate_greetings_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
