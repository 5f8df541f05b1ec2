"""Core evaluator for the Pico interpreter.

Evaluation rules, in order:

1. A quoted form yields an unquoted copy of itself; nothing inside it is evaluated.
2. Integers, strings, t, the empty list and procedures evaluate to themselves.
3. A symbol evaluates to its binding (innermost call frame, then the global table).
4. A non-empty list is a call: the head must evaluate to a Function or Builtin
   and the rest are the arguments, handed to the application engine.

Errors propagate as PicoError exceptions up to the Interpreter boundary.
"""

from __future__ import annotations

from pico.errors import PicoNotCallable
from pico.evaluation.apply import apply
from pico.printer import to_string
from pico.runtime_context import Context
from pico.types.value import (
    Builtin,
    Function,
    Integer,
    List,
    Procedure,
    String,
    Symbol,
    TrueType,
    Value,
    strip_quote,
)


def evaluate(expr: Value, ctx: Context) -> Value:
    if expr.quoted:
        return strip_quote(expr)

    match expr:
        case Integer() | String() | TrueType() | Function() | Builtin():
            return expr
        case Symbol(name):
            return ctx.resolve(name)
        case List(items) if not items:
            return expr
        case List(items):
            with ctx.descend():
                head = evaluate(items[0], ctx)
                if not isinstance(head, Procedure):
                    raise PicoNotCallable(f"{to_string(items[0])} is not a function: {to_string(head)}")
                return apply(head, items[1:], ctx, evaluate)

    # --- Anything else is not a Pico value ---
    raise TypeError(f"Cannot evaluate non-value {expr!r}")
