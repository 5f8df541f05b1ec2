from pico.evaluation.evaluator import evaluate
from pico.runtime_context import Context
from pico.types.value import NIL, List, Value, true_p


def while_form(ctx: Context, args: List) -> Value:
    """(while test body...) repeats body while test is true; returns nil."""
    test, body = args[0], args[1:]
    while true_p(evaluate(test, ctx)):
        for expr in body:
            evaluate(expr, ctx)
    return NIL
