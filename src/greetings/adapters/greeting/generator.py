"""Production greeting adapter wiring randomness and logging into the domain.

The domain generator takes its random source and log sink as arguments;
this adapter decides which ones a running process uses: a private
``random.Random`` (seeded when a seed is configured) and a stdlib logger that
lib_log_rich receives through ``attach_std_logging``.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from greetings.domain.behaviors import GreetingGenerator
from greetings.domain.enums import DuplicatePolicy

logger = logging.getLogger(__name__)


def generate_greetings(
    names: Sequence[str],
    *,
    duplicates: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
    seed: int | None = None,
) -> dict[str, str]:
    """Return a greeting per name using a fresh random source.

    Args:
        names: Names to greet, in order.
        duplicates: Policy for repeated names.
        seed: Seed for reproducible output; ``None`` seeds from the OS.

    Returns:
        Mapping of name to greeting.

    Raises:
        EmptyNameError: If any name is empty.
        DuplicateNameError: If a name repeats under ``DuplicatePolicy.REJECT``.

    Example:
        >>> generate_greetings(["Laura"], seed=1) == generate_greetings(["Laura"], seed=1)
        True
    """
    logger.debug(
        "Generating greetings",
        extra={"count": len(names), "duplicates": duplicates.value, "seeded": seed is not None},
    )
    generator = GreetingGenerator(rng=random.Random(seed), logger=logger)
    return generator.hellos(names, duplicates=duplicates)


__all__ = ["generate_greetings"]
