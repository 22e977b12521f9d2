"""Command-line interface for greetings.

Contents:
    * :func:`cli` - Root rich-click group from :mod:`.root`.
    * :func:`main` - Process entry from :mod:`.main`.
    * ``cli_*`` - Subcommands from :mod:`.commands`.
    * :class:`CLIContext`, :class:`TracebackState` - Run state from :mod:`.context`.
"""

from __future__ import annotations

from .commands import cli_config, cli_hello, cli_hellos, cli_info
from .context import CLIContext, TracebackState, apply_traceback_preferences
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_hello",
    "cli_hellos",
    "cli_info",
    "main",
]
