"""Application engine for Pico.

Functions and builtins share one invocation path: arguments are evaluated
(unless the callee declares UNEVAL_ARGS), the count is validated against the
callee's ParamSpec, and only then does the callee run.
"""

from __future__ import annotations

from typing import Callable, Sequence

from pico.errors import PicoEvaluationError, PicoNotCallable, PicoTypeError
from pico.runtime_context import Context
from pico.types.value import NIL, Builtin, Function, List, Symbol, Value, make_list

EvaluatorFn = Callable[[Value, Context], Value]


def apply_builtin(
    fn: Builtin,
    args: Sequence[Value],
    ctx: Context,
    evaluate_fn: EvaluatorFn,
    evaluate_args: bool = True,
) -> Value:
    """Call a native builtin with a single List of its arguments."""
    if evaluate_args and not fn.uneval_args:
        args = [evaluate_fn(arg, ctx) for arg in args]
    fn.check_arity(len(args))
    result = fn.func(ctx, make_list(args))
    if not isinstance(result, Value):
        raise PicoEvaluationError(f"Builtin {fn.name} returned a non-value: {result!r}")
    return result


def apply_function(
    fn: Function,
    args: Sequence[Value],
    ctx: Context,
    evaluate_fn: EvaluatorFn,
    evaluate_args: bool = True,
) -> Value:
    """Bind arguments positionally in a fresh frame and run the body forms.

    The value of the last body form is the result; an empty body yields nil.
    """
    if evaluate_args:
        args = [evaluate_fn(arg, ctx) for arg in args]
    fn.check_arity(len(args))
    bindings = {param.name: value for param, value in zip(fn.params, args)}
    result: Value = NIL
    with ctx.frame(bindings):
        for form in fn.forms:
            result = evaluate_fn(form, ctx)
    return result


def apply(
    head: Value,
    args: Sequence[Value],
    ctx: Context,
    evaluate_fn: EvaluatorFn,
    evaluate_args: bool = True,
) -> Value:
    """Apply either a Function or a Builtin; anything else is not callable."""
    match head:
        case Builtin():
            return apply_builtin(head, args, ctx, evaluate_fn, evaluate_args)
        case Function():
            return apply_function(head, args, ctx, evaluate_fn, evaluate_args)
    raise PicoNotCallable(f"Cannot apply non-function {head!r}")


def check_params(params: Value) -> List:
    """Validate a lambda list: a list of distinct symbols."""
    if not isinstance(params, List):
        raise PicoTypeError(f"Parameter list must be a list, got {params!r}")
    seen: set[str] = set()
    for param in params:
        if not isinstance(param, Symbol):
            raise PicoTypeError(f"Parameter must be a symbol, got {param!r}")
        if param.name in seen:
            raise PicoTypeError(f"Duplicate parameter {param.name}")
        seen.add(param.name)
    return params
