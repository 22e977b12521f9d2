"""Public package surface exposing greeting generation, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: greeting generation, policies, and errors
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    GREETING_FORMATS,
    GreetingGenerator,
    group_hellos,
    hello,
    hellos,
)
from .domain.enums import DuplicatePolicy
from .domain.errors import DuplicateNameError, EmptyNameError

__all__ = [
    "GREETING_FORMATS",
    "DuplicateNameError",
    "DuplicatePolicy",
    "EmptyNameError",
    "GreetingGenerator",
    "get_config",
    "group_hellos",
    "hello",
    "hellos",
    "print_info",
]
