from pico.errors import PicoArityError
from pico.evaluation.evaluator import evaluate
from pico.runtime_context import Context
from pico.types.value import NIL, List, Value, true_p


def if_form(ctx: Context, args: List) -> Value:
    """(if test then [else]) evaluates only the chosen branch; no else -> nil."""
    if len(args) > 3:
        raise PicoArityError(f"if expects at most 3 arguments, got {len(args)}")

    if true_p(evaluate(args[0], ctx)):
        return evaluate(args[1], ctx)
    elif len(args) > 2:
        return evaluate(args[2], ctx)
    else:
        return NIL
