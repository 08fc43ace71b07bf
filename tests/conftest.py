# tests/conftest.py
"""
Shared fixtures for flatconf tests.
"""

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write configuration text to a file under tmp_path and return its path."""

    def _write(name: str, contents: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(contents.encode(encoding))
        return path

    return _write


@pytest.fixture
def values_config(write_config):
    """A file holding an integer, a non-numeric string and a float."""
    return write_config("values.cfg", "key1=874\nkey2=invalid int\nkey3=3.14")


@pytest.fixture
def bool_config(write_config):
    """A file holding boolean tokens in mixed case plus one invalid token."""
    return write_config(
        "bools.cfg",
        "key1=on\nkey2=OFF\nkey3=true\nkey4=False\nkey5=fake",
    )
