"""Greeting settings model and loader.

Provides the GreetingsSettings Pydantic model for validated, immutable
``[greetings]`` settings and the loader that builds it from configuration
dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from greetings.domain.enums import DuplicatePolicy
from greetings.domain.errors import ConfigurationError

#: Names greeted when neither the command line nor configuration provide any.
DEFAULT_NAMES: tuple[str, ...] = ("Laura", "Alejandro", "Soledad")


def _default_names() -> list[str]:
    return list(DEFAULT_NAMES)


class GreetingsSettings(BaseModel):
    """Validated, immutable ``[greetings]`` configuration.

    Example:
        >>> settings = GreetingsSettings(names=["Ana"], duplicates="reject", seed=3)
        >>> settings.duplicates
        <DuplicatePolicy.REJECT: 'reject'>
        >>> GreetingsSettings().names
        ['Laura', 'Alejandro', 'Soledad']
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    names: list[str] = Field(default_factory=_default_names)
    duplicates: DuplicatePolicy = DuplicatePolicy.OVERWRITE
    seed: int | None = None

    @field_validator("names", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> Any:
        """Accept a single name, as environment variables and .env files provide.

        A blank string means no names, so an empty variable greets nobody.

        Examples:
            >>> GreetingsSettings._coerce_string_to_list("Laura")
            ['Laura']
            >>> GreetingsSettings._coerce_string_to_list(["Laura", "Soledad"])
            ['Laura', 'Soledad']
            >>> GreetingsSettings._coerce_string_to_list("")
            []
        """
        if isinstance(v, str):
            return [v] if v.strip() else []
        return v

    @field_validator("duplicates", mode="before")
    @classmethod
    def _normalise_policy(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_greetings_settings(config_dict: Mapping[str, Any]) -> GreetingsSettings:
    """Build GreetingsSettings from the ``greetings`` section of ``config_dict``.

    Args:
        config_dict: Configuration mapping, typically ``Config.as_dict()``.

    Returns:
        Settings with defaults for missing keys.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_greetings_settings({"greetings": {"names": ["Ana", "Bo"], "seed": 1}}).names
        ['Ana', 'Bo']
        >>> load_greetings_settings({}).duplicates
        <DuplicatePolicy.OVERWRITE: 'overwrite'>
    """
    section: Any = config_dict.get("greetings", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[greetings] must be a table, got {type(section).__name__}")
    try:
        return GreetingsSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        problems = "; ".join(
            f"greetings.{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid [greetings] configuration: {problems}") from exc


__all__ = [
    "DEFAULT_NAMES",
    "GreetingsSettings",
    "load_greetings_settings",
]
