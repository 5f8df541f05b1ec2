from __future__ import annotations

import logging
import weakref
from typing import Optional, TextIO, Union

from pico.builtin import env_builtin
from pico.config import Settings
from pico.errors import PicoError, PicoEvaluationError, PicoSyntaxError
from pico.evaluation import special_forms
from pico.evaluation.evaluator import evaluate
from pico.printer import print_value, to_string
from pico.reader.parser import CharStream, Reader
from pico.runtime_context import Context
from pico.types.value import EOF, FAILURE, NIL, T, Value

logger = logging.getLogger(__name__)

ReadSource = Union[Reader, CharStream, TextIO, str]


class Interpreter:
    """
    Orchestrates reading, evaluating and printing Pico code.

    Failures never escape as exceptions: `read` and `eval` return the FAILURE
    sentinel and leave the reason in the error channel, so callers check
    `has_error()` after every step.
    """

    def __init__(self, settings: Optional[Settings] = None, output: Optional[TextIO] = None):
        self.settings = settings or Settings.from_env()
        self.context = Context(self.settings, output)
        self._readers: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._initialized = False
        self.initialize()

    @property
    def symbols(self):
        return self.context.symbols

    @property
    def errors(self):
        return self.context.errors

    def initialize(self) -> None:
        """Install t, nil and every builtin. Runs exactly once per interpreter."""
        if self._initialized:
            raise RuntimeError("Interpreter is already initialized")
        symbols = self.context.symbols
        symbols.define_constant("t", T)
        symbols.define_constant("nil", NIL)
        special_forms.register(symbols)
        env_builtin.register(symbols)
        self._initialized = True
        logger.info("Interpreter initialized with %d symbols", len(symbols))

    # ------------------------
    # Read
    # ------------------------
    def reader(self, source: ReadSource) -> Reader:
        """Return the Reader for `source`, reusing one per stream so lookahead survives."""
        if isinstance(source, Reader):
            return source
        if isinstance(source, (str, CharStream)):
            return Reader(source, self.settings.max_depth)
        reader = self._readers.get(source)
        if reader is None:
            reader = Reader(source, self.settings.max_depth)
            self._readers[source] = reader
        return reader

    def read(self, source: ReadSource) -> Value:
        """Read one form. Returns EOF at end of input, FAILURE on malformed input."""
        self.errors.clear()
        try:
            return self.reader(source).read()
        except RecursionError:
            return self._fail(PicoSyntaxError("Input nested too deeply to read"))
        except PicoError as exc:
            logger.debug("Read failed: %s", exc)
            return self._fail(exc)

    # ------------------------
    # Eval
    # ------------------------
    def eval(self, expr: Value) -> Value:
        """Evaluate one form. Returns FAILURE (error channel set) on failure."""
        if expr is FAILURE:
            return FAILURE
        self.errors.clear()
        if expr is EOF:
            self.errors.set_error("Cannot evaluate end of input", kind="EvaluationError")
            return FAILURE
        try:
            return evaluate(expr, self.context)
        except RecursionError:
            # max_depth set beyond what the Python stack can hold
            return self._fail(PicoEvaluationError("Maximum recursion depth exceeded"))
        except PicoError as exc:
            logger.debug("Eval failed: %s", exc)
            return self._fail(exc)

    def _fail(self, exc: PicoError) -> Value:
        self.errors.record(exc)
        self.context.reset()
        return FAILURE

    def eval_string(self, code: str) -> Value:
        """Read and evaluate every form in `code`, stopping at the first failure.

        Returns the value of the last form (nil if there are none) or FAILURE.
        """
        reader = Reader(code, self.settings.max_depth)
        result: Value = NIL
        while True:
            expr = self.read(reader)
            if expr is FAILURE:
                return FAILURE
            if expr is EOF:
                return result
            result = self.eval(expr)
            if result is FAILURE:
                return FAILURE

    # ------------------------
    # Print
    # ------------------------
    def print(self, value: Value, stream: Optional[TextIO] = None) -> None:
        print_value(value, stream if stream is not None else self.context.output)

    @staticmethod
    def to_string(value: Value) -> str:
        return to_string(value)

    # ------------------------
    # Error channel
    # ------------------------
    def has_error(self) -> bool:
        return self.errors.has_error()

    def get_error(self) -> Optional[str]:
        return self.errors.get_error()

    def clear_error(self) -> None:
        self.errors.clear()
