"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by tests so the CLI and the
configuration path resolution never drift from the installed distribution.

Contents:
    * Distribution metadata constants (``name``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers consumed by lib_layered_config.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in pyproject.toml.
name: Final[str] = "greetings"
#: Human-readable summary shown in CLI help output.
title: Final[str] = "Random greetings for a list of names"
#: Current release version pulled from pyproject.toml.
version: Final[str] = "1.0.0"
#: Repository homepage.
homepage: Final[str] = "https://example.com/greetings"
#: Author attribution surfaced in CLI output.
author: Final[str] = "greetings maintainers"
#: Contact email surfaced in CLI output.
author_email: Final[str] = "maintainers@example.com"
#: Console-script name published by the package.
shell_command: Final[str] = "greetings"

#: Vendor, application and slug for lib_layered_config path resolution.
LAYEREDCONF_VENDOR: Final[str] = "greetings"
LAYEREDCONF_APP: Final[str] = "greetings"
LAYEREDCONF_SLUG: Final[str] = "greetings"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetings:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
