# src/flatconf/store.py
"""
ConfigStore: a flat, read-only key/value configuration.

A store is built once from a file (or a string) and never changes
afterwards. Values are kept as strings; the typed accessors parse them on
every call and fall back to the caller's default when the key is missing
or the value does not parse.

Typical usage::

    from flatconf import load

    config, err = load("app.cfg")
    if err is not None:
        logger.warning("%s", err)   # continue with defaults

    port, err = config.get_int("port", 8080)
    verbose, err = config.get_bool("verbose", False)
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from .config import DEFAULT_SETTINGS, ParserSettings
from .exceptions import ConversionError, LoadError
from .parser import parse_bool, parse_float, parse_int, parse_text

logger = logging.getLogger(__name__)


class ConfigStore:
    """Immutable mapping of configuration keys to string values, with typed accessors."""

    def __init__(self, properties: Mapping[str, str] | None = None, source: str | None = None):
        self._properties: Mapping[str, str] = MappingProxyType(dict(properties or {}))
        self._source = source

    @classmethod
    def load(
        cls,
        path: str | Path,
        settings: ParserSettings | None = None,
    ) -> tuple["ConfigStore", LoadError | None]:
        """
        Load a configuration file.

        Args:
            path: Path of the file to read.
            settings: Optional parser settings; defaults to ``#`` comments,
                ``=`` separator and UTF-8.

        Returns:
            ``(store, None)`` on success. If the file cannot be read
            (missing, unreadable, or an invalid path), returns
            ``(empty_store, LoadError)``; the error is returned, not raised,
            so the caller can carry on with defaults. Bytes that are invalid
            in the configured encoding never fail the load.
        """
        if settings is None:
            settings = DEFAULT_SETTINGS
        source = str(path)
        try:
            raw = Path(path).read_bytes()
        except (OSError, ValueError) as e:
            logger.debug("Unable to load properties from %s: %s", source, e)
            return cls(source=source), LoadError(source, e)

        # undecodable bytes are kept as lone surrogates so the other lines survive
        try:
            text = raw.decode(settings.encoding, errors="surrogateescape")
        except UnicodeDecodeError:
            text = raw.decode(settings.encoding, errors="replace")
        store = cls(parse_text(text, settings), source=source)
        logger.debug("Loaded %d properties from %s", len(store), source)
        return store, None

    @classmethod
    def from_text(cls, text: str, settings: ParserSettings | None = None) -> "ConfigStore":
        """Build a store from configuration text already in memory."""
        return cls(parse_text(text, settings))

    @property
    def source(self) -> str | None:
        """Path the store was loaded from, or None for stores built from text."""
        return self._source

    @property
    def properties(self) -> Mapping[str, str]:
        """Read-only view of the stored key/value pairs."""
        return self._properties

    def has_key(self, key: str) -> bool:
        return key in self._properties

    def get_string(self, key: str, default: str) -> str:
        """Return the stored value verbatim, or ``default`` if the key is missing."""
        return self._properties.get(key, default)

    def get_int(self, key: str, default: int) -> tuple[int, ConversionError | None]:
        """
        Return the value of ``key`` as an integer.

        A missing key yields ``(default, None)``. A value that is not a
        base-10 integer (``3.14``, ``1_000``, ``0x10``) yields
        ``(default, ConversionError)``.
        """
        return self._convert(key, default, parse_int, "integer")

    def get_float(self, key: str, default: float) -> tuple[float, ConversionError | None]:
        """
        Return the value of ``key`` as a float.

        Same contract as :meth:`get_int`. Integer text such as ``874`` is a
        valid float.
        """
        return self._convert(key, default, parse_float, "float")

    def get_bool(self, key: str, default: bool) -> tuple[bool, ConversionError | None]:
        """
        Return the value of ``key`` as a boolean.

        Valid values are on/off, true/false, yes/no, enable/disable,
        enabled/disabled and 1/0, all case insensitive (``ON``, ``On`` and
        ``oN`` are all true). Anything else yields ``(default, ConversionError)``.
        """
        return self._convert(key, default, parse_bool, "bool")

    def _convert(self, key, default, parse, type_name):
        value = self._properties.get(key)
        if value is None:
            return default, None

        parsed = parse(value)
        if parsed is None:
            logger.debug("Property %s=%r is not a valid %s, using default", key, value, type_name)
            return default, ConversionError(key, default, type_name, value)
        return parsed, None

    def keys(self):
        return self._properties.keys()

    def as_dict(self) -> dict[str, str]:
        """Return a mutable copy of the stored properties."""
        return dict(self._properties)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"ConfigStore(source={self._source!r}, keys={len(self._properties)})"


def load(
    path: str | Path,
    settings: ParserSettings | None = None,
) -> tuple[ConfigStore, LoadError | None]:
    """Load a configuration file. See :meth:`ConfigStore.load`."""
    return ConfigStore.load(path, settings)
