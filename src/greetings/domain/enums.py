"""Type-safe domain enums for output formats and duplicate handling."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for greetings and configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output (Python mapping repr / TOML-like config).
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DuplicatePolicy(str, Enum):
    """How a batch greeting run treats a name that appears more than once.

    Attributes:
        OVERWRITE: Later greetings replace earlier ones for the same name.
        REJECT: The second occurrence raises DuplicateNameError.

    Example:
        >>> DuplicatePolicy("overwrite") is DuplicatePolicy.OVERWRITE
        True
        >>> DuplicatePolicy.REJECT == "reject"
        True
    """

    OVERWRITE = "overwrite"
    REJECT = "reject"


__all__ = [
    "DuplicatePolicy",
    "OutputFormat",
]
