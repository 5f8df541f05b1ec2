"""Built-in functions for the Pico runtime.

Arithmetic, comparison, list processing, predicates, symbol-table access and
output. All of these receive already-evaluated arguments; the special forms
that need their arguments unevaluated live in pico.evaluation.special_forms.
"""
from __future__ import annotations

from pico.builtin.registry import BuiltinDef, register_all
from pico.errors import PicoEvaluationError, PicoTypeError, PicoUserError
from pico.evaluation.apply import apply as apply_engine
from pico.evaluation.evaluator import evaluate
from pico.printer import to_string
from pico.runtime_context import Context
from pico.types.symbol_table import SymbolTable
from pico.types.value import (
    NIL,
    Integer,
    List,
    ParamSpec,
    Procedure,
    String,
    Symbol,
    Value,
    as_bool,
    make_list,
    true_p,
)


def _integers(name: str, args: List) -> list[int]:
    values = []
    for arg in args:
        if not isinstance(arg, Integer):
            raise PicoTypeError(f"All arguments to {name} must be integers, got {to_string(arg)}")
        values.append(arg.value)
    return values


def _expect(name: str, arg: Value, kind: type) -> Value:
    if not isinstance(arg, kind):
        raise PicoTypeError(f"{name} expects a {kind.__name__.lower()}, got {to_string(arg)}")
    return arg


def _truncating_div(n: int, d: int) -> int:
    if d == 0:
        raise PicoEvaluationError("Division by zero")
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


# -------------------------------
# Arithmetic
# -------------------------------
def add(ctx: Context, args: List) -> Value:
    """Return the sum of all arguments; (+) is 0."""
    return Integer(sum(_integers("+", args)))


def sub(ctx: Context, args: List) -> Value:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    values = _integers("-", args)
    if len(values) == 1:
        return Integer(-values[0])
    result = values[0]
    for x in values[1:]:
        result -= x
    return Integer(result)


def mul(ctx: Context, args: List) -> Value:
    """Return the product of all arguments; (*) is 1."""
    result = 1
    for x in _integers("*", args):
        result *= x
    return Integer(result)


def div(ctx: Context, args: List) -> Value:
    """Divide left-to-right, truncating toward zero; one arg gives (/ 1 x)."""
    values = _integers("/", args)
    if len(values) == 1:
        return Integer(_truncating_div(1, values[0]))
    result = values[0]
    for x in values[1:]:
        result = _truncating_div(result, x)
    return Integer(result)


# -------------------------------
# Comparison
# -------------------------------
def num_eq(ctx: Context, args: List) -> Value:
    """Chainable numeric equality."""
    values = _integers("=", args)
    return as_bool(all(a == b for a, b in zip(values, values[1:])))


def lt(ctx: Context, args: List) -> Value:
    """Chainable less-than: t if a0 < a1 < a2 ... holds for all pairs."""
    values = _integers("<", args)
    return as_bool(all(a < b for a, b in zip(values, values[1:])))


def gt(ctx: Context, args: List) -> Value:
    values = _integers(">", args)
    return as_bool(all(a > b for a, b in zip(values, values[1:])))


def lte(ctx: Context, args: List) -> Value:
    values = _integers("<=", args)
    return as_bool(all(a <= b for a, b in zip(values, values[1:])))


def gte(ctx: Context, args: List) -> Value:
    values = _integers(">=", args)
    return as_bool(all(a >= b for a, b in zip(values, values[1:])))


def eq(ctx: Context, args: List) -> Value:
    """Structural equality; quote flags are ignored."""
    a, b = args
    return as_bool(a == b)


def logical_not(ctx: Context, args: List) -> Value:
    return as_bool(not true_p(args[0]))


# -------------------------------
# List operations
# -------------------------------
def car(ctx: Context, args: List) -> Value:
    """First element of a list; nil for the empty list."""
    xs = _expect("car", args[0], List)
    return xs[0] if xs else NIL


def cdr(ctx: Context, args: List) -> Value:
    """All but the first element of a list; nil for empty or single-element lists."""
    xs = _expect("cdr", args[0], List)
    return xs.rest() if xs else NIL


def cons(ctx: Context, args: List) -> Value:
    """Prepend head to a list, non-destructively."""
    head, tail = args
    tail = _expect("cons", tail, List)
    return make_list((head, *tail))


def list_builtin(ctx: Context, args: List) -> Value:
    return args


def length(ctx: Context, args: List) -> Value:
    x = args[0]
    match x:
        case List(items):
            return Integer(len(items))
        case String(text):
            return Integer(len(text))
    raise PicoTypeError(f"length expects a list or string, got {to_string(x)}")


# -------------------------------
# Predicates
# -------------------------------
def atom(ctx: Context, args: List) -> Value:
    """t for anything that is not a non-empty list."""
    x = args[0]
    return as_bool(not (isinstance(x, List) and x))


def null(ctx: Context, args: List) -> Value:
    return as_bool(not true_p(args[0]))


def listp(ctx: Context, args: List) -> Value:
    return as_bool(isinstance(args[0], List))


def symbolp(ctx: Context, args: List) -> Value:
    return as_bool(isinstance(args[0], Symbol))


def stringp(ctx: Context, args: List) -> Value:
    return as_bool(isinstance(args[0], String))


def integerp(ctx: Context, args: List) -> Value:
    return as_bool(isinstance(args[0], Integer))


def functionp(ctx: Context, args: List) -> Value:
    return as_bool(isinstance(args[0], Procedure))


# -------------------------------
# Evaluation
# -------------------------------
def eval_builtin(ctx: Context, args: List) -> Value:
    """(eval form): evaluate an already-evaluated value once more."""
    return evaluate(args[0], ctx)


def apply_builtin(ctx: Context, args: List) -> Value:
    """(apply f args): call f with the elements of args, without re-evaluating them."""
    fn, fn_args = args
    fn_args = _expect("apply", fn_args, List)
    return apply_engine(fn, fn_args.items, ctx, evaluate, evaluate_args=False)


# -------------------------------
# Symbols
# -------------------------------
def set_builtin(ctx: Context, args: List) -> Value:
    """(set 'sym value): like setq, but the symbol is itself evaluated."""
    sym, value = args
    sym = _expect("set", sym, Symbol)
    ctx.assign(sym.name, value)
    return value


def boundp(ctx: Context, args: List) -> Value:
    sym = _expect("boundp", args[0], Symbol)
    return as_bool(ctx.is_bound(sym.name))


def makunbound(ctx: Context, args: List) -> Value:
    """Remove the global value of a symbol, leaving it registered."""
    sym = _expect("makunbound", args[0], Symbol)
    ctx.symbols.unbind(sym.name)
    return sym


def intern(ctx: Context, args: List) -> Value:
    """Register a name in the symbol table (unbound if new) and return its symbol."""
    name = _expect("intern", args[0], String)
    ctx.symbols.lookup(name.text)
    return Symbol(name.text)


# -------------------------------
# Strings and output
# -------------------------------
def _to_text(x: Value) -> str:
    """Strings as their raw text, everything else in printed form."""
    if isinstance(x, String):
        return x.text
    return to_string(x)


def concat(ctx: Context, args: List) -> Value:
    parts = [_expect("concat", arg, String).text for arg in args]
    return String("".join(parts))


def print_builtin(ctx: Context, args: List) -> Value:
    """Print space-separated representations of args followed by newline; returns nil."""
    ctx.output.write(" ".join(to_string(a) for a in args))
    ctx.output.write("\n")
    return NIL


def error_builtin(ctx: Context, args: List) -> Value:
    """(error "message" ...): abort evaluation with a user error."""
    raise PicoUserError(" ".join(_to_text(a) for a in args))


FIXED = ParamSpec.VAR_FIXED
MIN = ParamSpec.VAR_MIN

BUILTINS: list[BuiltinDef] = [
    BuiltinDef("+", MIN, 0, add),
    BuiltinDef("-", MIN, 1, sub),
    BuiltinDef("*", MIN, 0, mul),
    BuiltinDef("/", MIN, 1, div),
    BuiltinDef("=", MIN, 1, num_eq),
    BuiltinDef("<", MIN, 1, lt),
    BuiltinDef(">", MIN, 1, gt),
    BuiltinDef("<=", MIN, 1, lte),
    BuiltinDef(">=", MIN, 1, gte),
    BuiltinDef("eq", FIXED, 2, eq),
    BuiltinDef("not", FIXED, 1, logical_not),
    BuiltinDef("null", FIXED, 1, null),
    BuiltinDef("car", FIXED, 1, car),
    BuiltinDef("cdr", FIXED, 1, cdr),
    BuiltinDef("cons", FIXED, 2, cons),
    BuiltinDef("list", MIN, 0, list_builtin),
    BuiltinDef("length", FIXED, 1, length),
    BuiltinDef("atom", FIXED, 1, atom),
    BuiltinDef("listp", FIXED, 1, listp),
    BuiltinDef("symbolp", FIXED, 1, symbolp),
    BuiltinDef("stringp", FIXED, 1, stringp),
    BuiltinDef("integerp", FIXED, 1, integerp),
    BuiltinDef("functionp", FIXED, 1, functionp),
    BuiltinDef("eval", FIXED, 1, eval_builtin),
    BuiltinDef("apply", FIXED, 2, apply_builtin),
    BuiltinDef("set", FIXED, 2, set_builtin),
    BuiltinDef("boundp", FIXED, 1, boundp),
    BuiltinDef("makunbound", FIXED, 1, makunbound),
    BuiltinDef("intern", FIXED, 1, intern),
    BuiltinDef("concat", MIN, 0, concat),
    BuiltinDef("print", MIN, 0, print_builtin),
    BuiltinDef("error", MIN, 1, error_builtin),
]


def register(symbols: SymbolTable) -> None:
    """Register all builtin functions into the given symbol table."""
    register_all(symbols, BUILTINS)
