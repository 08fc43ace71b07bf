# src/flatconf/exceptions.py
"""
Custom exceptions for the flatconf library.

Load and conversion failures are never raised by flatconf itself. They are
returned to the caller alongside a usable result (an empty store, or the
supplied default) so that an application can decide whether to log them,
collect them, or raise them.
"""

from typing import Any


class FlatConfError(Exception):
    """Base class for all flatconf specific errors."""
    def __init__(self, message: str = "An unspecified error occurred in flatconf."):
        super().__init__(message)


class LoadError(FlatConfError):
    """
    Returned when a configuration file cannot be read.

    The store that accompanies this error is empty. ``reason`` holds the
    underlying exception (``OSError``, or ``ValueError`` for an invalid path) and is also
    chained as ``__cause__``.
    """
    def __init__(self, path: str = "", reason: BaseException | None = None):
        self.path = path
        self.reason = reason
        super().__init__(f"unable to load properties from {path}. Reason: {reason}")
        self.__cause__ = reason


class ConversionError(FlatConfError):
    """Returned when a stored value cannot be parsed into the requested type."""
    def __init__(
        self,
        key: str = "",
        default: Any = None,
        type_name: str = "unknown",
        value: str | None = None,
    ):
        self.key = key
        self.default = default
        self.type_name = type_name
        self.value = value
        super().__init__(
            f"property {key} does not have a valid {type_name} value. "
            f"Using default {_format_default(default)}"
        )


def _format_default(default: Any) -> str:
    # bool first: it is a subclass of int
    if isinstance(default, bool):
        return "true" if default else "false"
    if isinstance(default, float):
        return f"{default:f}"
    return str(default)
