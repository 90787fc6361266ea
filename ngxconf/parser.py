"""
Parser for nginx-style configuration syntax.

Pulls tokens from the lexer one at a time and builds an immutable tree of
Blocks and Commands. The first error anywhere aborts the whole parse; no
partial tree is ever returned.
"""

from dataclasses import dataclass, field

from .errors import ParseError
from .lexer import Lexer, Source, Token, TokenType
from .logging import get_logger
from .options import ParserOptions
from .tree import Block, Command

logger = get_logger("parser")


@dataclass
class _OpenBlock:
    """A block whose closing brace has not been seen yet."""

    words: tuple[str, ...] = ()
    line: int = 0
    commands: list[Command] = field(default_factory=list)

    def close(self) -> Command:
        return Command(self.words, Block(tuple(self.commands)), self.line)


class ConfigParser:
    """
    Single-pass parser for nginx-style configuration.

    Grammar:
        config   := (command | COMMENT)*
        command  := WORD+ (';' | '{' config '}')

    Comments are accepted anywhere a token may appear and are dropped.
    Open blocks are kept on an explicit stack, so nesting depth is not
    limited by the interpreter's recursion limit.

    A parser consumes its source; parse() can only be called once.
    """

    def __init__(self, source: Source, options: ParserOptions | None = None):
        self.options = options or ParserOptions()
        self.filename = self.options.filename
        self.lexer = Lexer(source, self.options)
        self._parsed = False

    def _next(self) -> Token:
        """Pull the next non-comment token, raising on lexer errors."""
        token = self.lexer.next_token()
        while token.type is TokenType.COMMENT:
            token = self.lexer.next_token()

        if token.type is TokenType.ILLEGAL:
            raise token.error
        return token

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self.lexer.line, self.filename)

    def parse(self) -> Block:
        """Parse the entire configuration document."""
        if self._parsed:
            raise RuntimeError("ConfigParser instances are single-use")
        self._parsed = True

        logger.debug("Parsing %s", self.filename)
        try:
            block = self._parse_document()
        except Exception as e:
            logger.debug("Parse of %s failed: %s", self.filename, e)
            raise

        logger.debug("Parsed %d top-level command(s) from %s", len(block), self.filename)
        return block

    def _parse_document(self) -> Block:
        # stack[0] is the document itself, every other entry an open block
        stack = [_OpenBlock()]

        while True:
            token = self._next()
            if token.type is TokenType.WORD:
                words, opens_block = self._parse_command(token)
                if opens_block:
                    stack.append(_OpenBlock(words, token.line))
                else:
                    stack[-1].commands.append(Command(words, None, token.line))
            elif token.type is TokenType.BRACE_CLOSE and len(stack) > 1:
                closed = stack.pop()
                stack[-1].commands.append(closed.close())
            elif token.type is TokenType.EOF:
                if len(stack) > 1:
                    raise self._error("missing terminating token")
                return Block(tuple(stack[0].commands))
            elif len(stack) == 1:
                raise self._error(f"unexpected global token {token}")
            else:
                raise self._error(f"unexpected block token {token}")

    def _parse_command(self, first: Token) -> tuple[tuple[str, ...], bool]:
        """
        Parse the words of a command after its already-read name.

        Returns the words and whether the command opens a block ('{')
        rather than ending with ';'.
        """
        words = [first.value]

        while True:
            token = self._next()
            if token.type is TokenType.WORD:
                words.append(token.value)
            elif token.type is TokenType.SEMICOLON:
                return tuple(words), False
            elif token.type is TokenType.BRACE_OPEN:
                return tuple(words), True
            elif token.type is TokenType.EOF:
                raise self._error("missing terminating token")
            else:
                raise self._error(f"unexpected command token {token}")


def parse_config(source: Source, options: ParserOptions | None = None, **overrides) -> Block:
    """
    Convenience function to parse configuration text.

    Args:
        source: Configuration text, bytes, or a readable text/binary stream
        options: Parser options (defaults if None)
        **overrides: ParserOptions fields to change, e.g. filename="nginx.conf"

    Returns:
        Parsed top-level Block

    Raises:
        LexerError: On malformed quoting or undecodable input
        ParseError: On unexpected or missing tokens
    """
    options = options or ParserOptions()
    if overrides:
        options = options.replace(**overrides)
    return ConfigParser(source, options).parse()
