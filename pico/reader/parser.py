"""
  Pico Reader

- Single pass, recursive descent, one top-level form per `read()` call
- Pulls characters one at a time from any text source with a `read(size)`
  method (io.StringIO, open files, sys.stdin), so it can sit on a live stream
- Emits Pico Values:

    - integers          -> Integer
    - "strings"         -> String (escapes \\n \\t \\r \\0 \\\\ \\")
    - (a b c)           -> List, () -> NIL
    - 'form             -> form with quoted=True
    - ''form            -> (quote form) with quoted=True
    - everything else   -> Symbol

  End of input yields the EOF sentinel. Malformed input, including forms nested
  deeper than `max_depth`, raises PicoSyntaxError;
  the Interpreter turns that into error-channel state.
"""

from __future__ import annotations

import io
import re
from contextlib import contextmanager
from typing import Iterator, TextIO, Union

from pico.config import DEFAULT_MAX_DEPTH
from pico.errors import PicoSyntaxError
from pico.types.value import EOF, NIL, Integer, List, String, Symbol, Value, make_list

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")

DELIMITERS = frozenset("()\"';")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "0": "\0",
}

Source = Union[TextIO, str]


class CharStream:
    """A character source with one character of lookahead.

    `peek()` and `advance()` return "" at end of input.
    """

    __slots__ = ("_source", "_pending", "line", "column")

    def __init__(self, source: Source):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._source = source
        self._pending: str | None = None
        self.line = 1
        self.column = 0

    def peek(self) -> str:
        if self._pending is None:
            self._pending = self._source.read(1)
        return self._pending

    def advance(self) -> str:
        ch = self.peek()
        self._pending = None
        if ch == "\n":
            self.line += 1
            self.column = 0
        elif ch:
            self.column += 1
        return ch

    @property
    def position(self) -> str:
        return f"line {self.line}, column {self.column}"


class Reader:
    def __init__(self, source: Union[CharStream, Source], max_depth: int = DEFAULT_MAX_DEPTH):
        self.stream = source if isinstance(source, CharStream) else CharStream(source)
        # Lists may nest at most this deep
        self.max_depth = max_depth
        self._depth = 0

    def read(self) -> Value:
        """Read one form, or return EOF when only whitespace/comments remain."""
        self._skip_whitespace_and_comments()
        if self.stream.peek() == "":
            return EOF
        return self._read_form()

    def read_all(self) -> Iterator[Value]:
        while (form := self.read()) is not EOF:
            yield form

    # ------------------------
    # Lexical helpers
    # ------------------------
    def _skip_whitespace_and_comments(self) -> None:
        stream = self.stream
        while True:
            ch = stream.peek()
            if ch and ch.isspace():
                stream.advance()
            elif ch == ";":
                while stream.peek() not in ("", "\n"):
                    stream.advance()
            else:
                return

    def _read_form(self) -> Value:
        stream = self.stream
        ch = stream.peek()

        if ch == "":
            raise PicoSyntaxError(f"Unexpected end of input at {stream.position}")

        if ch == "(":
            stream.advance()
            with self._nested():
                return self._read_list()

        if ch == ")":
            stream.advance()
            raise PicoSyntaxError(f"Unmatched ')' at {stream.position}")

        if ch == '"':
            stream.advance()
            return self._read_string()

        if ch == "'":
            stream.advance()
            self._skip_whitespace_and_comments()
            if stream.peek() == "":
                raise PicoSyntaxError(f"Nothing to quote at {stream.position}")
            # a quote directly in front of another quote reads as (quote ...)
            nested = stream.peek() == "'"
            with self._nested():
                return self._quote(self._read_form(), nested)

        return self._read_atom()

    def _read_list(self) -> List:
        start = self.stream.position
        items: list[Value] = []
        while True:
            self._skip_whitespace_and_comments()
            ch = self.stream.peek()
            if ch == "":
                raise PicoSyntaxError(f"Unterminated list starting at {start}")
            if ch == ")":
                self.stream.advance()
                return make_list(items)
            items.append(self._read_form())

    def _read_string(self) -> String:
        start = self.stream.position
        chars: list[str] = []
        while True:
            ch = self.stream.advance()
            if ch == "":
                raise PicoSyntaxError(f"Unterminated string starting at {start}")
            if ch == '"':
                return String("".join(chars))
            if ch == "\\":
                escaped = self.stream.advance()
                if escaped == "":
                    raise PicoSyntaxError(f"Unterminated string starting at {start}")
                chars.append(ESCAPES.get(escaped, escaped))
            else:
                chars.append(ch)

    def _read_atom(self) -> Value:
        chars: list[str] = []
        while True:
            ch = self.stream.peek()
            if ch == "" or ch.isspace() or ch in DELIMITERS:
                break
            chars.append(self.stream.advance())
        token = "".join(chars)
        if INTEGER_RE.match(token):
            try:
                return Integer(int(token))
            except ValueError:
                raise PicoSyntaxError(f"Integer literal too long at {self.stream.position}") from None
        return Symbol(token)

    @contextmanager
    def _nested(self) -> Iterator[None]:
        if self._depth >= self.max_depth:
            raise PicoSyntaxError(f"Nesting too deep (limit {self.max_depth}) at {self.stream.position}")
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    @staticmethod
    def _quote(form: Value, nested: bool = False) -> Value:
        if nested:
            return List((Symbol("quote"), form.with_quote(False)), quoted=True)
        # the empty list stays the NIL singleton
        return form.with_quote(True)


def read_string(text: str) -> Value:
    """Read the first form of `text` (EOF if there is none)."""
    return Reader(text).read()
