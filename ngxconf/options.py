"""
Options controlling a single parse.
"""

import codecs
from dataclasses import dataclass, fields, replace as dataclass_replace

from .const import DEFAULT_BRACE_ENDS_WORD, DEFAULT_ENCODING, DEFAULT_FILENAME


@dataclass(frozen=True)
class ParserOptions:
    """
    Parser configuration.

    Attributes:
        filename: Name used in error messages and log records
        encoding: Encoding used to decode bytes and binary streams
        brace_ends_word: Whether an unquoted '{' terminates a bare word.
            When False the brace is kept as part of the word text,
            so "server{" is a single word.
    """

    filename: str = DEFAULT_FILENAME
    encoding: str = DEFAULT_ENCODING
    brace_ends_word: bool = DEFAULT_BRACE_ENDS_WORD

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from e

    def replace(self, **changes) -> "ParserOptions":
        """Return a copy with the given fields changed."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown parser option(s): {', '.join(sorted(unknown))}")
        return dataclass_replace(self, **changes)
