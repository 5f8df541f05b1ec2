from pico.evaluation.apply import check_params
from pico.runtime_context import Context
from pico.types.value import Function, List, Value, make_list


def lambda_form(ctx: Context, args: List) -> Value:
    """(lambda (params...) body...) -> Function.

    Zero or more body forms; an empty body makes the function return nil.
    """
    params = check_params(args[0])
    return Function(params, make_list(args[1:]))
