"""
Exceptions raised while lexing and parsing configuration text.
"""

from .const import DEFAULT_FILENAME


class ConfigError(Exception):
    """Base exception for all configuration syntax errors."""

    def __init__(self, message: str, line: int, filename: str = DEFAULT_FILENAME):
        self.message = message
        self.line = line
        self.filename = filename
        text = f"{message} at line {line}"
        if filename != DEFAULT_FILENAME:
            text = f"{filename}: {text}"
        super().__init__(text)


class LexerError(ConfigError):
    """Exception raised for lexer errors (bad quoting, bad escapes, undecodable input)."""


class ParseError(ConfigError):
    """Exception raised for parser errors (unexpected or missing tokens)."""
