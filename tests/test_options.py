"""
Tests for parser options and package constants.
"""

import pytest

import ngxconf
from ngxconf.const import APP_NAME, APP_VERSION, QUOTED_ESCAPES
from ngxconf.options import ParserOptions


def test_constants() -> None:
    """Test that constants are defined."""
    assert APP_NAME == "ngxconf"
    assert ngxconf.__version__ == APP_VERSION
    assert set(QUOTED_ESCAPES) == {"n", "r", "t", '"', "'", "\\"}


def test_default_options() -> None:
    options = ParserOptions()
    assert options.filename == "<string>"
    assert options.encoding == "utf-8"
    assert options.brace_ends_word is True


def test_replace_returns_copy() -> None:
    options = ParserOptions()
    changed = options.replace(filename="a.conf", brace_ends_word=False)
    assert changed.filename == "a.conf"
    assert changed.brace_ends_word is False
    assert options.filename == "<string>"


def test_replace_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError, match="Unknown parser option"):
        ParserOptions().replace(colour="red")


def test_unknown_encoding_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown encoding: 'nope'"):
        ParserOptions(encoding="nope")
    with pytest.raises(ValueError, match="Unknown encoding"):
        ParserOptions().replace(encoding="nope")
