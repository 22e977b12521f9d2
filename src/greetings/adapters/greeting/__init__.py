"""Greeting adapter - settings loading and production generator wiring.

Contents:
    * :mod:`.config` - GreetingsSettings model and loader
    * :mod:`.generator` - Batch greeting generation with a private random source
"""

from __future__ import annotations

from .config import DEFAULT_NAMES, GreetingsSettings, load_greetings_settings
from .generator import generate_greetings

__all__ = [
    "DEFAULT_NAMES",
    "GreetingsSettings",
    "generate_greetings",
    "load_greetings_settings",
]
