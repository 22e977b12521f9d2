"""State shared between the root command and its subcommands.

Contents:
    * :class:`CLIContext` - What the root command resolved for this run.
    * :class:`TracebackState` - The two ``lib_cli_exit_tools`` traceback flags.
    * :func:`apply_traceback_preferences` - Mirror ``--traceback`` into those flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from greetings.adapters.config.overrides import apply_overrides

if TYPE_CHECKING:
    from greetings.adapters.greeting.config import GreetingsSettings
    from greetings.composition import AppServices


@dataclass(slots=True)
class CLIContext:
    """Configuration and services the root command resolved for this run.

    ``set_overrides`` keeps the raw ``--set`` strings so a subcommand that
    loads another profile can reapply them.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock(obj=CLIContext(traceback=False, config=MagicMock(), services=MagicMock()))
        >>> CLIContext.from_click(ctx).traceback
        False
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    @classmethod
    def from_click(cls, ctx: click.Context) -> CLIContext:
        """Return the context the root command stored in ``ctx.obj``.

        Raises:
            RuntimeError: If a subcommand runs without the root command.
        """
        if not isinstance(ctx.obj, cls):
            raise RuntimeError("CLI context not initialized; run subcommands through the root group.")
        return ctx.obj

    def config_for(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the configuration for ``profile`` and the profile it came from.

        Without a profile the root command's configuration is reused. Another
        profile is loaded fresh with the root ``--set`` overrides reapplied.
        """
        if not profile:
            return self.config, self.profile
        return apply_overrides(self.services.get_config(profile=profile), self.set_overrides), profile

    def greetings_settings(self) -> GreetingsSettings:
        """Validate the ``[greetings]`` section of the current configuration.

        Raises:
            ConfigurationError: If the section holds invalid values.
        """
        return self.services.load_greetings_settings(self.config.as_dict())


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config``."""

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        """Read the current flags."""
        config = lib_cli_exit_tools.config
        return cls(bool(getattr(config, "traceback", False)), bool(getattr(config, "traceback_force_color", False)))

    def restore(self) -> None:
        """Write these flags back."""
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror the ``--traceback`` flag into ``lib_cli_exit_tools.config``.

    Example:
        >>> previous = TracebackState.capture()
        >>> apply_traceback_preferences(True)
        >>> TracebackState.capture()
        TracebackState(enabled=True, force_color=True)
        >>> previous.restore()
    """
    TracebackState(bool(enabled), bool(enabled)).restore()


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
]
