"""Console script entry point for the ``greetings`` command.

Lives at package level, outside the adapters layer, so it can hand the
production composition to the CLI without adapters importing composition.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
