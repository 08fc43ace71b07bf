# src/flatconf/__init__.py
"""
flatconf - A small loader for flat ``key = value`` configuration files.

The format of a configuration file is::

    # This is a comment
    key1 = value1
    key2 = value2

Supported value types are strings, booleans (on/off, true/false, yes/no,
enable/disable, enabled/disabled or 1/0), integers and floats.
"""

from importlib.metadata import PackageNotFoundError, version

from .config import ParserSettings
from .exceptions import ConversionError, FlatConfError, LoadError
from .store import ConfigStore, load

try:
    __version__ = version("flatconf")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "ConfigStore",
    "ConversionError",
    "FlatConfError",
    "LoadError",
    "ParserSettings",
    "load",
    "__version__",
]
