"""Render configuration through lib_layered_config's Rich display."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from greetings.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Write ``config`` to stdout, optionally restricted to one section.

    Pending log records are flushed first so they do not interleave with the
    rendered configuration.

    Args:
        config: Loaded configuration to show.
        output_format: ``HUMAN`` for TOML-like text, ``JSON`` for JSON.
        section: Only show this top-level section (e.g. ``"greetings"``).
        console: Rich console to write to; mainly for tests.
        profile: Profile name included in provenance comments.

    Raises:
        ValueError: If ``section`` does not exist in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _lib_display(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
