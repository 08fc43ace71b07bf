# src/flatconf/config/__init__.py
"""
Configuration module for the flatconf library.

Holds the settings that control how flatconf itself reads files. These are
not the values of the files being loaded; see :mod:`flatconf.store` for that.
"""

from .models import DEFAULT_SETTINGS, ParserSettings

__all__ = ["DEFAULT_SETTINGS", "ParserSettings"]
