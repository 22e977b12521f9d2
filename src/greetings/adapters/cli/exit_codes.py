"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries an :class:`ExitCode` member
instead of a bare ``1``. Signals and uncaught exceptions are mapped by
``lib_cli_exit_tools``.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h conventions.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
