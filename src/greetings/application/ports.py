"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches the
corresponding adapter function, so plain module-level functions satisfy the
ports through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` and ``GreetingsSettings``
    are imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts hold at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import DuplicatePolicy, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.greeting.config import GreetingsSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class GenerateGreetings(Protocol):
    """Map each name to a greeting, failing fast on the first invalid name."""

    def __call__(
        self,
        names: Sequence[str],
        *,
        duplicates: DuplicatePolicy = ...,
        seed: int | None = ...,
    ) -> dict[str, str]: ...


class LoadGreetingsSettings(Protocol):
    """Load GreetingsSettings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreetingsSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GenerateGreetings",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadGreetingsSettings",
]
