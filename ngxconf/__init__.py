"""
Parser for nginx-style configuration text.

    >>> from ngxconf import parse_config
    >>> tree = parse_config("events { worker_connections 512; }")
    >>> tree.get_block("events").get_command("worker_connections").get()
    '512'
"""

from .const import APP_VERSION as __version__
from .errors import ConfigError, LexerError, ParseError
from .lexer import Lexer, Token, TokenType, tokenize
from .options import ParserOptions
from .parser import ConfigParser, parse_config
from .tree import Block, Command

__all__ = [
    "__version__",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Parser
    "ConfigParser",
    "parse_config",
    "ParserOptions",
    # Tree
    "Block",
    "Command",
    # Errors
    "ConfigError",
    "LexerError",
    "ParseError",
]
