from pico.errors import PicoTypeError
from pico.evaluation.evaluator import evaluate
from pico.runtime_context import Context
from pico.types.value import List, Symbol, Value


def setq_form(ctx: Context, args: List) -> Value:
    """(setq var value): evaluate value, bind it to the unevaluated symbol var."""
    var_sym, val_expr = args
    if not isinstance(var_sym, Symbol):
        raise PicoTypeError(f"setq first argument must be a symbol, got {var_sym!r}")
    value = evaluate(val_expr, ctx)
    ctx.assign(var_sym.name, value)
    return value
