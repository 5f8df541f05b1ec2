from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from pico.config import Settings
from pico.error_channel import ErrorChannel
from pico.errors import PicoConstantViolation, PicoEvaluationError
from pico.types.symbol_table import SymbolTable
from pico.types.value import Value

logger = logging.getLogger(__name__)


class Context:
    """Mutable state of one interpreter instance.

    Holds the global symbol table, the error channel and the stack of
    function-call frames. Name resolution is dynamic: the innermost frame
    binding a name wins, then the global table. Not thread-safe; use one
    Context per thread.
    """

    __slots__ = ("symbols", "errors", "frames", "output", "settings", "depth")

    def __init__(self, settings: Optional[Settings] = None, output: Optional[TextIO] = None):
        self.settings = settings or Settings()
        self.symbols = SymbolTable(self.settings.symbol_table_size, self.settings.symbol_table_scale)
        self.errors = ErrorChannel(self.settings.max_error)
        self.frames: list[dict[str, Value]] = []
        self.output = output if output is not None else sys.stdout
        self.depth = 0

    def _frame_for(self, name: str) -> Optional[dict[str, Value]]:
        for frame in reversed(self.frames):
            if name in frame:
                return frame
        return None

    def resolve(self, name: str) -> Value:
        frame = self._frame_for(name)
        if frame is not None:
            return frame[name]
        return self.symbols.value(name)

    def assign(self, name: str, value: Value) -> None:
        """Rebind `name` in the innermost frame holding it, else globally."""
        frame = self._frame_for(name)
        if frame is not None:
            frame[name] = value
            return
        self.symbols.assign(name, value)

    def is_bound(self, name: str) -> bool:
        if self._frame_for(name) is not None:
            return True
        entry = self.symbols.find(name)
        return entry is not None and entry.bound

    @contextmanager
    def frame(self, bindings: dict[str, Value]) -> Iterator[dict[str, Value]]:
        for name in bindings:
            entry = self.symbols.find(name)
            if entry is not None and entry.constant:
                raise PicoConstantViolation(f"Cannot bind constant symbol {name}")
        self.frames.append(bindings)
        logger.debug("Pushed frame %d: %s", len(self.frames), list(bindings))
        try:
            yield bindings
        finally:
            self.frames.pop()
            logger.debug("Popped frame %d", len(self.frames) + 1)

    @contextmanager
    def descend(self) -> Iterator[None]:
        """Guard one level of nested evaluation against runaway recursion."""
        if self.depth >= self.settings.max_depth:
            raise PicoEvaluationError(f"Maximum evaluation depth {self.settings.max_depth} exceeded")
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def reset(self) -> None:
        """Drop call frames left behind by an aborted evaluation."""
        self.frames.clear()
        self.depth = 0
