"""
Character Source
================

A thin pump that hands the scanner one character at a time.

The source never pushes characters back and does no position tracking;
the Scanner owns line and column. End of input is reported as the
END_OF_INPUT sentinel (the empty string), and keeps being reported on
every later call.

Example Usage
-------------
>>> from tinys.lexer.source import CharacterSource, END_OF_INPUT
>>> source = CharacterSource.from_string("ab")
>>> source.read_character(), source.read_character()
('a', 'b')
>>> source.read_character() == END_OF_INPUT
True
"""

import io
import logging
from pathlib import Path
from typing import TextIO, Union

from tinys.errors import SourceUnreadableError

logger = logging.getLogger(__name__)


# Returned by read_character() once the stream is exhausted
END_OF_INPUT = ""


class CharacterSource:
    """
    Single-character reader over a text stream.

    The first character is read eagerly so that is_empty() can be
    answered without disturbing what read_character() returns.

    Attributes:
        name: Display name of the underlying stream
    """

    def __init__(self, stream: TextIO, name: str = "<input>"):
        self.name = name
        self._stream = stream
        self._pending = stream.read(1)
        self._empty = self._pending == END_OF_INPUT
        self._exhausted = self._empty

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        encoding: str = "utf-8",
    ) -> "CharacterSource":
        """
        Open a source file for reading.

        Undecodable bytes are replaced with U+FFFD rather than failing the
        open, so they surface later as invalid symbols with a position.

        Raises:
            SourceUnreadableError: If the file cannot be opened
        """
        try:
            stream = open(path, "r", encoding=encoding, errors="replace", newline="")
        except OSError as e:
            logger.debug(f"Cannot open {path}: {e}")
            raise SourceUnreadableError(str(path)) from e

        logger.debug(f"Opened source file {path}")
        return cls(stream, str(path))

    @classmethod
    def from_string(cls, text: str, name: str = "<input>") -> "CharacterSource":
        """Wrap in-memory source text."""
        return cls(io.StringIO(text, newline=""), name)

    def read_character(self) -> str:
        """
        Return the next character, or END_OF_INPUT when exhausted.
        """
        if self._exhausted:
            return END_OF_INPUT

        if self._pending:
            char = self._pending
            self._pending = ""
            return char

        char = self._stream.read(1)
        if char == END_OF_INPUT:
            self._exhausted = True
        return char

    def is_empty(self) -> bool:
        """Return True if the source held no characters at all."""
        return self._empty

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()

    def __enter__(self) -> "CharacterSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
