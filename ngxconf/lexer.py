"""
Lexer (tokenizer) for nginx-style configuration syntax.

Supports:
- Bare words (anything up to whitespace or ';')
- Single and double quoted words with backslash escapes
- Braces and semicolons
- Single-line (#) comments, reported as tokens so callers can see them

Characters are pulled from the input on demand, so the lexer works the
same on an in-memory string and on a (possibly huge) open stream.
"""

import codecs
import io
import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from typing import BinaryIO, Callable, Iterator, TextIO

from .const import QUOTED_ESCAPES
from .errors import LexerError
from .options import ParserOptions

Source = str | bytes | bytearray | TextIO | BinaryIO

# Control characters with the Unicode White_Space property; the rest are Z*
CONTROL_SPACES = "\t\n\v\f\r\x85"


def is_space(char: str) -> bool:
    """Whether char has the Unicode White_Space property."""
    return char in CONTROL_SPACES or unicodedata.category(char) in ("Zs", "Zl", "Zp")


class TokenType(Enum):
    """Token types for the nginx-style config syntax."""

    EOF = auto()          # end of input
    BRACE_OPEN = auto()   # {
    BRACE_CLOSE = auto()  # }
    SEMICOLON = auto()    # ;
    WORD = auto()         # bare or quoted word
    COMMENT = auto()      # # comment text
    ILLEGAL = auto()      # lexer error token


@dataclass
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: str
    line: int
    column: int
    error: LexerError | None = None

    def __str__(self) -> str:
        if self.type is TokenType.ILLEGAL:
            message = self.error.message if self.error else self.value
            return f"{self.type.name}[{message}]"
        if self.type in (TokenType.WORD, TokenType.COMMENT):
            return f"{self.type.name}[{self.value}]"
        return self.type.name

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


class Lexer:
    """
    Tokenizer for nginx-style configuration syntax.

    Example config:
        # upstream servers
        upstream backend {
            server 127.0.0.1:8080;
        }

        log_format main '$remote_addr "$request"';

    next_token() is called repeatedly until an EOF or ILLEGAL token comes
    back. Once an ILLEGAL token has been produced the lexer keeps returning
    it; there is no recovery.
    """

    CHUNK_SIZE = 4096

    def __init__(self, source: Source, options: ParserOptions | None = None):
        self.options = options or ParserOptions()
        self.filename = self.options.filename
        self.line = 1
        self.column = 1

        self._read_chunk = self._make_reader(source)
        self._buffer = ""
        self._pos = 0
        self._exhausted = False
        self._failure: Token | None = None

    def _make_reader(self, source: Source) -> Callable[[], str]:
        """Build a function returning the next chunk of text, or '' at end of input."""
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        elif not hasattr(source, "read"):
            raise TypeError(
                f"Expected str, bytes or a readable stream, got {type(source).__name__}"
            )

        decoder = codecs.getincrementaldecoder(self.options.encoding)()
        stream = source
        chunk_size = self.CHUNK_SIZE

        def read_chunk() -> str:
            while True:
                data = stream.read(chunk_size)
                if isinstance(data, str):
                    return data
                # Binary stream: a chunk may end inside a multi-byte sequence
                text = decoder.decode(data, final=not data)
                if text or not data:
                    return text

        return read_chunk

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self._pos >= len(self._buffer):
            if self._exhausted:
                return ""
            self._buffer = self._read_chunk()
            self._pos = 0
            if not self._buffer:
                self._exhausted = True
                return ""
        return self._buffer[self._pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self._current()
        if not char:
            return ""

        self._pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _skip_whitespace(self) -> None:
        char = self._current()
        while char and is_space(char):
            self._advance()
            char = self._current()

    def _error(self, message: str) -> LexerError:
        return LexerError(message, self.line, self.filename)

    def _read_quoted(self) -> Token:
        """Read a single or double quoted word, resolving escapes."""
        start_line = self.line
        start_col = self.column
        quote_char = self._advance()

        result = []
        while True:
            char = self._current()
            if not char or char == "\n":
                raise self._error(f"missing terminating {quote_char} character")
            self._advance()

            if char == quote_char:
                break
            if char != "\\":
                result.append(char)
                continue

            escape_char = self._current()
            if not escape_char:
                raise self._error(f"missing terminating {quote_char} character")
            if escape_char not in QUOTED_ESCAPES:
                raise self._error(f"invalid quoted character: '\\{escape_char}'")
            self._advance()
            result.append(QUOTED_ESCAPES[escape_char])

        return Token(TokenType.WORD, "".join(result), start_line, start_col)

    def _read_comment(self) -> Token:
        """Read a comment up to (not including) the end of the line."""
        start_line = self.line
        start_col = self.column
        self._advance()  # skip #

        result = []
        char = self._current()
        while char and char != "\n":
            result.append(self._advance())
            char = self._current()

        return Token(TokenType.COMMENT, "".join(result), start_line, start_col)

    def _read_word(self) -> Token:
        """Read a bare word. The terminating character is left unconsumed."""
        start_line = self.line
        start_col = self.column
        brace_ends_word = self.options.brace_ends_word

        result = []
        char = self._current()
        while char and not is_space(char) and char != ";":
            if char == "{" and brace_ends_word:
                break
            result.append(self._advance())
            char = self._current()

        return Token(TokenType.WORD, "".join(result), start_line, start_col)

    def _scan(self) -> Token:
        self._skip_whitespace()

        char = self._current()
        start_line = self.line
        start_col = self.column

        if not char:
            return Token(TokenType.EOF, "", start_line, start_col)

        if char == "'" or char == '"':
            return self._read_quoted()

        if char == "{":
            self._advance()
            return Token(TokenType.BRACE_OPEN, "{", start_line, start_col)

        if char == "}":
            self._advance()
            return Token(TokenType.BRACE_CLOSE, "}", start_line, start_col)

        if char == ";":
            self._advance()
            return Token(TokenType.SEMICOLON, ";", start_line, start_col)

        if char == "#":
            return self._read_comment()

        return self._read_word()

    def next_token(self) -> Token:
        """Get the next token from the source."""
        if self._failure is not None:
            return self._failure

        try:
            return self._scan()
        except LexerError as e:
            error = e
        except (OSError, UnicodeError, ValueError) as e:
            error = self._error(f"failed to read input: {e}")
            error.__cause__ = e

        self._failure = Token(TokenType.ILLEGAL, "", error.line, self.column, error)
        return self._failure

    def tokenize(self) -> Iterator[Token]:
        """Generate tokens up to and including the first EOF or ILLEGAL token."""
        while True:
            token = self.next_token()
            yield token
            if token.type in (TokenType.EOF, TokenType.ILLEGAL):
                break

    def __iter__(self) -> Iterator[Token]:
        """Allow iteration over tokens."""
        return self.tokenize()


def tokenize(source: Source, options: ParserOptions | None = None) -> list[Token]:
    """Convenience function to tokenize a whole source."""
    return list(Lexer(source, options))
