"""Greeting CLI commands.

Contents:
    * :func:`cli_hello` - Greet a single name.
    * :func:`cli_hellos` - Greet a list of names and print the resulting mapping.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import orjson
import rich_click as click

from greetings.domain.enums import DuplicatePolicy, OutputFormat
from greetings.domain.errors import ConfigurationError, DuplicateNameError, EmptyNameError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext
from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from greetings.adapters.greeting.config import GreetingsSettings

logger = logging.getLogger(__name__)


def _load_settings(cli_ctx: CLIContext) -> GreetingsSettings:
    """Read the ``[greetings]`` section or exit with CONFIG_ERROR."""
    try:
        return cli_ctx.greetings_settings()
    except ConfigurationError as exc:
        logger.error("Invalid greetings configuration", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _render(messages: dict[str, str], fmt: OutputFormat) -> str:
    """Render the mapping as Python's dict repr or as a JSON object."""
    if fmt is OutputFormat.JSON:
        return orjson.dumps(messages, option=orjson.OPT_INDENT_2).decode("utf-8")
    return str(messages)


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_hello(ctx: click.Context, name: str) -> None:
    """Print one greeting for NAME; an empty NAME exits with INVALID_ARGUMENT."""
    cli_ctx = CLIContext.from_click(ctx)
    settings = _load_settings(cli_ctx)

    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Executing hello command")
        try:
            messages = cli_ctx.services.generate_greetings([name], seed=settings.seed)
        except EmptyNameError as exc:
            logger.error("Greeting rejected", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(messages[name])


@click.command("hellos", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (Python mapping or JSON)",
)
@click.option(
    "--reject-duplicates",
    is_flag=True,
    default=False,
    help="Fail on a repeated name instead of keeping its last greeting",
)
@click.pass_context
def cli_hellos(ctx: click.Context, names: tuple[str, ...], output_format: str, reject_duplicates: bool) -> None:
    """Greet every NAME and print the name-to-greeting mapping.

    Without NAMES, greets the names from the ``greetings.names`` setting.
    Any empty name aborts the whole run; nothing is printed to stdout.
    """
    cli_ctx = CLIContext.from_click(ctx)
    settings = _load_settings(cli_ctx)
    requested = list(names) if names else list(settings.names)
    policy = DuplicatePolicy.REJECT if reject_duplicates else settings.duplicates
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "hellos", "format": fmt.value, "duplicates": policy.value}
    with lib_log_rich.runtime.bind(job_id="cli-hellos", extra=extra):
        logger.info(
            "Generating greetings",
            extra={"count": len(requested), "from_config": not names, "duplicates": policy.value},
        )
        try:
            messages = cli_ctx.services.generate_greetings(requested, duplicates=policy, seed=settings.seed)
        except (EmptyNameError, DuplicateNameError) as exc:
            logger.error("Greetings rejected", extra={"error": str(exc), "error_type": type(exc).__name__})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(_render(messages, fmt))


__all__ = ["cli_hello", "cli_hellos"]
