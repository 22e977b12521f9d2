"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class EmptyNameError(ValueError):
    """A greeting was requested for an empty name.

    The only validation the greeting generator performs. Inherits from
    ValueError so callers treating bad input generically still catch it.

    Example:
        >>> err = EmptyNameError()
        >>> str(err)
        'empty name'
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, message: str = "empty name") -> None:
        super().__init__(message)


class DuplicateNameError(ValueError):
    """A name appeared twice while duplicates are rejected.

    Attributes:
        name: The repeated name.

    Example:
        >>> err = DuplicateNameError("Laura")
        >>> str(err)
        'duplicate name: Laura'
        >>> err.name
        'Laura'
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate name: {name}")
        self.name = name


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[greetings]`` section holds values that cannot be
    parsed. Caught at CLI boundaries to provide user-friendly messages.

    Example:
        >>> err = ConfigurationError("greetings.names must be a list of strings")
        >>> str(err)
        'greetings.names must be a list of strings'
    """


__all__ = [
    "ConfigurationError",
    "DuplicateNameError",
    "EmptyNameError",
]
