from pico.runtime_context import Context
from pico.types.value import List, Symbol, Value, deep_copy, strip_quote


def quote_form(ctx: Context, args: List) -> Value:
    """(quote x) -> x, unevaluated.

    A form that is itself quoted ('x) comes back as the list (quote x).
    """
    form = args[0]
    if form.quoted:
        return List((Symbol("quote"), strip_quote(form)))
    return deep_copy(form)
