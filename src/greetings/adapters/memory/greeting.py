"""In-memory greeting adapter for testing.

Generates greetings from a fixed seed so test output is reproducible.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from ...domain.behaviors import GreetingGenerator
from ...domain.enums import DuplicatePolicy

#: Seed used when the caller does not provide one.
TEST_SEED = 0


def generate_greetings_in_memory(
    names: Sequence[str],
    *,
    duplicates: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
    seed: int | None = None,
) -> dict[str, str]:
    """Return deterministic greetings; ``seed`` defaults to :data:`TEST_SEED`.

    Example:
        >>> generate_greetings_in_memory(["Ana"]) == generate_greetings_in_memory(["Ana"])
        True
    """
    rng = random.Random(TEST_SEED if seed is None else seed)
    return GreetingGenerator(rng=rng).hellos(names, duplicates=duplicates)


__all__ = ["TEST_SEED", "generate_greetings_in_memory"]
