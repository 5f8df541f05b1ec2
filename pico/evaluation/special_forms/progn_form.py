from pico.evaluation.evaluator import evaluate
from pico.runtime_context import Context
from pico.types.value import NIL, List, Value


def progn_form(ctx: Context, args: List) -> Value:
    result: Value = NIL
    for expr in args:
        result = evaluate(expr, ctx)
    return result
