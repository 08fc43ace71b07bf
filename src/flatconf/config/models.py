# src/flatconf/config/models.py
"""
Pydantic models for flatconf loader settings.

The defaults describe the one supported file format::

    # This is a comment
    key1 = value1
    key2 = value2

Overriding a field only changes the marker or encoding used; the line rules
(trim, skip blanks, split on the first separator, drop empty keys) stay the
same.
"""

import codecs

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserSettings(BaseModel):
    """Settings used when reading and splitting a configuration file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    encoding: str = Field("utf-8", description="Text encoding of the configuration file")
    comment_prefix: str = Field(
        "#", description="Marker that starts a comment line (only at the start of the trimmed line)"
    )
    separator: str = Field("=", description="Separator between key and value (first occurrence wins)")

    @field_validator("encoding")
    @classmethod
    def check_encoding_known(cls, v: str) -> str:
        """Reject encodings the codec registry does not know."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")
        return v

    @field_validator("comment_prefix", "separator")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        """Markers must contain at least one non-whitespace character."""
        if not v.strip():
            raise ValueError("Marker must not be empty or whitespace")
        return v


DEFAULT_SETTINGS = ParserSettings()
