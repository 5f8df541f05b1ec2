"""Last-error state of an interpreter.

Only the most recent error survives. Evaluation aborts on the first failure,
so an earlier error is never lost behind a later one.
"""

from __future__ import annotations

from typing import Optional

from pico.errors import PicoError

MAX_ERROR = 1000


class ErrorChannel:
    __slots__ = ("max_length", "_message", "_kind", "_exception")

    def __init__(self, max_length: int = MAX_ERROR):
        self.max_length = max_length
        self._message = ""
        self._kind: Optional[str] = None
        self._exception: Optional[PicoError] = None

    def set_error(self, fmt: str, *args, kind: str = PicoError.kind) -> None:
        """Format and store a message, printf-style. Overlong messages are truncated."""
        message = fmt % args if args else fmt
        self._message = message[: self.max_length]
        self._kind = kind
        self._exception = None

    def record(self, exc: PicoError) -> None:
        """Store a raised PicoError as the current error."""
        self.set_error("%s", str(exc) or exc.kind, kind=exc.kind)
        self._exception = exc

    def get_error(self) -> Optional[str]:
        return self._message or None

    def has_error(self) -> bool:
        return bool(self._message)

    @property
    def kind(self) -> Optional[str]:
        """Short name of the error class, e.g. "UnboundSymbol"."""
        return self._kind if self._message else None

    @property
    def exception(self) -> Optional[PicoError]:
        return self._exception if self._message else None

    def clear(self) -> None:
        self._message = ""
        self._kind = None
        self._exception = None

    def consume(self) -> Optional[str]:
        """Return the current message and clear the channel."""
        message = self.get_error()
        self.clear()
        return message

    def __repr__(self):
        return f"<ErrorChannel {self._kind}: {self._message!r}>" if self._message else "<ErrorChannel clear>"
