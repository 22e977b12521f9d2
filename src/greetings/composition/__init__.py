"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path

# Greeting services
from ..adapters.greeting.config import load_greetings_settings
from ..adapters.greeting.generator import generate_greetings

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GenerateGreetings,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadGreetingsSettings,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_generate_greetings: GenerateGreetings = generate_greetings
    _assert_load_greetings_settings: LoadGreetingsSettings = load_greetings_settings
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    generate_greetings: GenerateGreetings
    load_greetings_settings: LoadGreetingsSettings
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        generate_greetings=generate_greetings,
        load_greetings_settings=load_greetings_settings,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Configuration is empty (so greeting settings use their defaults), logging
    and display are no-ops, and greetings come from a fixed seed.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        generate_greetings_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        generate_greetings=generate_greetings_in_memory,
        load_greetings_settings=load_greetings_settings,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Greetings
    "generate_greetings",
    "load_greetings_settings",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
