from pico.errors import PicoTypeError
from pico.evaluation.apply import check_params
from pico.runtime_context import Context
from pico.types.value import Function, List, Symbol, Value, make_list


def defun_form(ctx: Context, args: List) -> Value:
    """
    (defun name (params...) body...)
    Binds the function globally under `name` and returns the name symbol.
    Builtin names are constants, so redefining one fails.
    """
    name = args[0]
    if not isinstance(name, Symbol):
        raise PicoTypeError(f"defun name must be a symbol, got {name!r}")
    params = check_params(args[1])
    fn = Function(params, make_list(args[2:]), name=name.name)
    ctx.symbols.assign(name.name, fn)
    return name.with_quote(False)
