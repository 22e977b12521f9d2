"""CLI command implementations.

Contents:
    * Greeting commands from :mod:`.greet`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_hello, cli_hellos
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_hello",
    "cli_hellos",
    "cli_info",
]
