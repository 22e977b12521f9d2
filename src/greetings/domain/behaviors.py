"""Greeting generation: pure domain functions with no I/O or framework dependencies.

The random source and the log sink are injected so a seeded
``random.Random`` makes every result reproducible. When omitted, the
process-wide :mod:`random` module and this module's stdlib logger are used.

Contents:
    * :data:`GREETING_FORMATS` - The fixed candidate greeting formats.
    * :class:`GreetingGenerator` - Generator holding the injected dependencies.
    * :func:`hello` - Greeting for one name.
    * :func:`hellos` - Mapping of name to greeting for a batch of names.
    * :func:`group_hellos` - Every greeting per name, duplicates kept.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence
from typing import Any, Final, Protocol, cast

from .enums import DuplicatePolicy
from .errors import DuplicateNameError, EmptyNameError

#: Candidate formats; one is chosen uniformly per greeting.
GREETING_FORMATS: Final[tuple[str, ...]] = (
    "Hi {name}, welcome!",
    "Hi {name}, great to see you!",
    "Hi {name}, well met!",
)

_NAME_PLACEHOLDER: Final[str] = "{name}"

_logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can pick one element of a sequence (``random.Random`` does)."""

    def choice(self, seq: Sequence[str], /) -> str: ...


class LogSink(Protocol):
    """Minimal logging interface; a stdlib ``logging.Logger`` satisfies it."""

    def debug(self, msg: object, *args: object, **kwargs: Any) -> None: ...


class GreetingGenerator:
    """Generate greetings from a fixed set of formats.

    Args:
        rng: Random source used to pick a format. Defaults to the process-wide
            :mod:`random` module. Give each thread its own ``random.Random``
            when generating in parallel.
        logger: Sink for debug records. Defaults to this module's logger.
        formats: Candidate formats, each containing ``{name}``.

    Raises:
        ValueError: If ``formats`` is empty or an entry lacks ``{name}``.

    Example:
        >>> import random
        >>> generator = GreetingGenerator(rng=random.Random(7))
        >>> generator.hello("Laura").startswith("Hi Laura, ")
        True
        >>> sorted(generator.hellos(["Soledad", "Laura"]))
        ['Laura', 'Soledad']
    """

    __slots__ = ("_formats", "_logger", "_rng")

    def __init__(
        self,
        *,
        rng: RandomSource | None = None,
        logger: LogSink | None = None,
        formats: Sequence[str] = GREETING_FORMATS,
    ) -> None:
        if not formats:
            raise ValueError("formats must not be empty")
        for fmt in formats:
            if _NAME_PLACEHOLDER not in fmt:
                raise ValueError(f"format {fmt!r} lacks the {_NAME_PLACEHOLDER} placeholder")
        self._formats: tuple[str, ...] = tuple(formats)
        self._rng: RandomSource = rng if rng is not None else cast(RandomSource, random)
        self._logger: LogSink = logger if logger is not None else _logger

    @property
    def formats(self) -> tuple[str, ...]:
        """Candidate formats this generator picks from."""
        return self._formats

    def hello(self, name: str) -> str:
        """Return a greeting for ``name``.

        Raises:
            EmptyNameError: If ``name`` is the empty string.
        """
        if not name:
            raise EmptyNameError()
        fmt = self._rng.choice(self._formats)
        return fmt.format(name=name)

    def hellos(
        self,
        names: Iterable[str],
        *,
        duplicates: DuplicatePolicy | str = DuplicatePolicy.OVERWRITE,
    ) -> dict[str, str]:
        """Return a mapping of each name to a greeting.

        Fails fast: the first invalid name raises and nothing is returned.
        With ``DuplicatePolicy.OVERWRITE`` a repeated name keeps its last
        greeting; with ``DuplicatePolicy.REJECT`` it raises. The policy may
        also be given by its string value.

        Raises:
            EmptyNameError: If any name is the empty string.
            DuplicateNameError: If a name repeats under ``REJECT``.
            ValueError: If ``duplicates`` names no known policy.
        """
        policy = DuplicatePolicy(duplicates)
        messages: dict[str, str] = {}
        for name in names:
            if policy is DuplicatePolicy.REJECT and name in messages:
                raise DuplicateNameError(name)
            messages[name] = self.hello(name)
        self._logger.debug("Generated greetings", extra={"count": len(messages)})
        return messages

    def group_hellos(self, names: Iterable[str]) -> dict[str, list[str]]:
        """Return every greeting generated per name, in input order.

        Raises:
            EmptyNameError: If any name is the empty string.
        """
        grouped: dict[str, list[str]] = {}
        for name in names:
            grouped.setdefault(name, []).append(self.hello(name))
        self._logger.debug("Generated grouped greetings", extra={"count": len(grouped)})
        return grouped


def hello(name: str, *, rng: RandomSource | None = None) -> str:
    r"""Return a greeting for one name.

    Args:
        name: Recipient; must be non-empty.
        rng: Optional random source; defaults to the :mod:`random` module.

    Returns:
        One of :data:`GREETING_FORMATS` with ``name`` substituted.

    Raises:
        EmptyNameError: If ``name`` is the empty string.

    Example:
        >>> hello("Gladys") in {fmt.format(name="Gladys") for fmt in GREETING_FORMATS}
        True
        >>> hello("")
        Traceback (most recent call last):
        ...
        greetings.domain.errors.EmptyNameError: empty name
    """
    return GreetingGenerator(rng=rng).hello(name)


def hellos(
    names: Iterable[str],
    *,
    rng: RandomSource | None = None,
    duplicates: DuplicatePolicy | str = DuplicatePolicy.OVERWRITE,
) -> dict[str, str]:
    """Return a mapping from each name to its greeting.

    An empty input yields an empty mapping.

    Raises:
        EmptyNameError: If any name is the empty string.
        DuplicateNameError: If a name repeats and ``duplicates`` is ``REJECT``.

    Example:
        >>> sorted(hellos(["Laura", "Alejandro", "Soledad"]))
        ['Alejandro', 'Laura', 'Soledad']
        >>> hellos([])
        {}
    """
    return GreetingGenerator(rng=rng).hellos(names, duplicates=duplicates)


def group_hellos(names: Iterable[str], *, rng: RandomSource | None = None) -> dict[str, list[str]]:
    """Return every greeting per name, keeping those a mapping would overwrite.

    Example:
        >>> grouped = group_hellos(["Laura", "Laura"])
        >>> len(grouped["Laura"])
        2
    """
    return GreetingGenerator(rng=rng).group_hellos(names)


__all__ = [
    "GREETING_FORMATS",
    "GreetingGenerator",
    "LogSink",
    "RandomSource",
    "group_hellos",
    "hello",
    "hellos",
]
