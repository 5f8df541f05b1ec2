from pico.evaluation.evaluator import evaluate
from pico.runtime_context import Context
from pico.types.value import NIL, T, List, Value, true_p


def and_form(ctx: Context, args: List) -> Value:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a false value
    (the empty list) is found, which stops evaluation and yields nil. If all
    operands are true, returns the value of the last operand. With zero
    operands, returns t.
    """
    result: Value = T
    for expr in args:
        result = evaluate(expr, ctx)
        if not true_p(result):
            return NIL
    return result


def or_form(ctx: Context, args: List) -> Value:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    true value. If none are true (or there are no operands), returns nil.
    """
    for expr in args:
        val = evaluate(expr, ctx)
        if true_p(val):
            return val
    return NIL
