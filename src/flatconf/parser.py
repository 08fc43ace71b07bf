# src/flatconf/parser.py
"""
Line parsing and literal grammars for flatconf.

The file format is line oriented. Every line is trimmed, blank lines and
comment lines are skipped, and the rest are split on the first separator
into a key and a value, both trimmed again. Lines without a separator and
lines with an empty key are dropped without an error.

Note that a key can never contain the separator: ``a=b = c`` is stored as
key ``a`` with value ``b = c``. Trimming uses ``str.strip()``, which also
removes the ASCII separator controls ``\\x1c``-``\\x1f`` at either end.

Integers are limited to the signed 64-bit range.
"""

import logging
import math
import re

from .config import DEFAULT_SETTINGS, ParserSettings

logger = logging.getLogger(__name__)

BOOL_TRUE_VALUES = frozenset({"on", "true", "yes", "enable", "enabled", "1"})
BOOL_FALSE_VALUES = frozenset({"off", "false", "no", "disable", "disabled", "0"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_FLOAT_SPECIALS = frozenset({"inf", "infinity", "nan"})


def parse_line(line: str, settings: ParserSettings = DEFAULT_SETTINGS) -> tuple[str, str] | None:
    """
    Parse a single line into a ``(key, value)`` pair.

    Returns None for blank lines, comment lines, lines without a separator
    and lines whose key is empty after trimming.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(settings.comment_prefix):
        return None

    key, sep, value = stripped.partition(settings.separator)
    if not sep:
        logger.debug("Skipping line without '%s' separator: %r", settings.separator, stripped)
        return None

    key = key.strip()
    if not key:
        logger.debug("Skipping line with empty key: %r", stripped)
        return None
    return key, value.strip()


def parse_text(text: str, settings: ParserSettings | None = None) -> dict[str, str]:
    """
    Parse configuration text into a key/value dictionary.

    Lines are split on ``\\n`` only; a trailing ``\\r`` is removed by the
    per-line trim. Later occurrences of a key overwrite earlier ones.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS
    properties: dict[str, str] = {}
    for line in text.split("\n"):
        pair = parse_line(line, settings)
        if pair is not None:
            key, value = pair
            properties[key] = value
    return properties


def parse_int(text: str) -> int | None:
    """Parse a base-10 signed integer literal, or return None."""
    if _INT_PATTERN.fullmatch(text) is None:
        return None
    try:
        value = int(text)
    except ValueError:
        # beyond the interpreter's digit limit
        return None
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def parse_float(text: str) -> float | None:
    """
    Parse a decimal floating point literal, or return None.

    ``inf``, ``infinity`` and ``nan`` are accepted with an optional sign.
    Finite literals that overflow a double are rejected.
    """
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if unsigned.lower() in _FLOAT_SPECIALS:
        return float(text)
    if _FLOAT_PATTERN.fullmatch(text) is None:
        return None
    value = float(text)
    if math.isinf(value):
        return None
    return value


def parse_bool(text: str) -> bool | None:
    """Match a whole value, case-insensitively, against the boolean tokens."""
    folded = text.casefold()
    if folded in BOOL_TRUE_VALUES:
        return True
    if folded in BOOL_FALSE_VALUES:
        return False
    return None
