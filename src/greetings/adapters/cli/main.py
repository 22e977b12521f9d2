"""Process entry for the ``greetings`` command line.

The console script and ``python -m greetings`` both end up in :func:`main`,
which turns every outcome of the root group into an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greetings import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState

if TYPE_CHECKING:
    from greetings.composition import AppServices


def _report_unhandled(exc: BaseException) -> int:
    """Print ``exc`` through lib_cli_exit_tools and return the code it maps to."""
    verbose = TracebackState.capture().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Run the root group with ``services_factory`` as its ``obj``.

    Click's own exits and usage errors keep their codes; commands exit
    through ``SystemExit``, which lib_cli_exit_tools maps like any other
    exception.
    """
    from .root import cli

    try:
        cli.main(
            args=list(argv) if argv is not None else sys.argv[1:],
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_unhandled(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: CLI arguments; ``None`` uses ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were.
        services_factory: Builds the AppServices; pass ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greetings.composition import build_production
        >>> main(["hellos", "Laura"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous = TracebackState.capture()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            previous.restore()
        # Only the main thread owns the logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
