"""Runtime values for Pico.

Every value produced by the reader or the evaluator is an instance of one of
seven classes, one per variant:

    - Integer   -> a Python int
    - String    -> a Python str
    - Symbol    -> an (interned) name; resolution happens during evaluation
    - List      -> a tuple of element Values; the empty list is the NIL singleton
    - Function  -> parameter names + cached count + body forms
    - Builtin   -> a native Python callable + ParamSpec + count
    - TrueType  -> the T singleton

Values are not mutated after construction. The `quoted` flag is set by the
reader for forms written with a leading quote and is ignored by equality.
"""

from __future__ import annotations

import enum
import sys
from typing import Any, Callable, Iterable, Iterator

from pico.errors import PicoArityError, PicoTypeError


class Variant(enum.Enum):
    INTEGER = "integer"
    STRING = "string"
    SYMBOL = "symbol"
    LIST = "list"
    FUNCTION = "function"
    BUILTIN = "builtin"
    T_TYPE = "t"


class ParamSpec(enum.IntFlag):
    """How a callable restricts its argument count. Flags are combinable."""

    VAR_FIXED = 0x0001  # exactly numparams arguments
    VAR_MIN = 0x0010  # at least numparams arguments
    VAR_MAX = 0x0100  # at most numparams arguments
    UNEVAL_ARGS = 0x1000  # arguments are passed through unevaluated


class Value:
    __slots__ = ("quoted",)
    variant: Variant

    def __init__(self, quoted: bool = False):
        self.quoted = quoted

    def with_quote(self, quoted: bool) -> Value:
        """Return a copy of this value with the top-level quote flag set to `quoted`."""
        raise NotImplementedError


class Integer(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)
    variant = Variant.INTEGER

    def __init__(self, value: int, quoted: bool = False):
        super().__init__(quoted)
        self.value: int = value

    def with_quote(self, quoted: bool) -> Integer:
        return Integer(self.value, quoted)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Integer) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Integer, self.value))

    def __repr__(self):
        return f"Integer({self.value!r})"


class String(Value):
    __slots__ = ("text",)
    __match_args__ = ("text",)
    variant = Variant.STRING

    def __init__(self, text: str, quoted: bool = False):
        super().__init__(quoted)
        self.text: str = text

    def with_quote(self, quoted: bool) -> String:
        return String(self.text, quoted)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, String) and self.text == other.text

    def __hash__(self) -> int:
        return hash((String, self.text))

    def __repr__(self):
        return f"String({self.text!r})"


class Symbol(Value):
    __slots__ = ("name",)
    __match_args__ = ("name",)
    variant = Variant.SYMBOL

    def __init__(self, name: str, quoted: bool = False):
        super().__init__(quoted)
        # Intern to ensure fast equality/hash
        self.name: str = sys.intern(name)

    def with_quote(self, quoted: bool) -> Symbol:
        return Symbol(self.name, quoted)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash((Symbol, self.name))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class List(Value):
    __slots__ = ("items",)
    __match_args__ = ("items",)
    variant = Variant.LIST

    def __init__(self, items: Iterable[Value] = (), quoted: bool = False):
        super().__init__(quoted)
        self.items: tuple[Value, ...] = tuple(items)

    def with_quote(self, quoted: bool) -> List:
        if not self.items:
            return self
        return List(self.items, quoted)

    @property
    def head(self) -> Value:
        if not self.items:
            raise PicoTypeError("Cannot take the head of an empty list")
        return self.items[0]

    def rest(self) -> List:
        return make_list(self.items[1:])

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, List) and self.items == other.items

    def __hash__(self) -> int:
        return hash((List, self.items))

    def __repr__(self):
        if not self.items:
            return "NIL"
        return f"List({list(self.items)!r})"


class TrueType(Value):
    __slots__ = ()
    variant = Variant.T_TYPE

    def with_quote(self, quoted: bool) -> TrueType:
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TrueType)

    def __hash__(self) -> int:
        return hash(TrueType)

    def __repr__(self):
        return "T"


class Procedure(Value):
    """A value that can sit in the head position of a call.

    Functions and builtins share the same arity descriptor so that the
    evaluator validates both through `check_arity`.
    """

    __slots__ = ("name", "spec", "numparams")

    def __init__(self, name: str | None, spec: ParamSpec, numparams: int):
        super().__init__(False)
        self.name = name
        self.spec = ParamSpec(spec)
        self.numparams = numparams

    def with_quote(self, quoted: bool) -> Procedure:
        return self

    @property
    def uneval_args(self) -> bool:
        return bool(self.spec & ParamSpec.UNEVAL_ARGS)

    def accepts(self, count: int) -> bool:
        if self.spec & ParamSpec.VAR_FIXED and count != self.numparams:
            return False
        if self.spec & ParamSpec.VAR_MIN and count < self.numparams:
            return False
        if self.spec & ParamSpec.VAR_MAX and count > self.numparams:
            return False
        return True

    def check_arity(self, count: int) -> None:
        if self.accepts(count):
            return
        label = self.name or "anonymous function"
        if self.spec & ParamSpec.VAR_FIXED:
            expected = f"exactly {self.numparams}"
        elif self.spec & ParamSpec.VAR_MIN:
            expected = f"at least {self.numparams}"
        else:
            expected = f"at most {self.numparams}"
        raise PicoArityError(f"{label} expects {expected} argument(s), got {count}")

    # Procedures compare by identity
    __eq__ = object.__eq__
    __hash__ = object.__hash__


class Function(Procedure):
    __slots__ = ("params", "forms")
    variant = Variant.FUNCTION

    def __init__(self, params: List, forms: List, name: str | None = None):
        super().__init__(name, ParamSpec.VAR_FIXED, len(params))
        self.params: List = params
        self.forms: List = forms

    @property
    def param_names(self) -> list[str]:
        return [p.name for p in self.params]

    def __repr__(self):
        return f"Function({self.name!r}, {self.param_names!r})"


BuiltinFn = Callable[[Any, List], Value]


class Builtin(Procedure):
    __slots__ = ("func",)
    variant = Variant.BUILTIN

    def __init__(self, name: str, func: BuiltinFn, spec: ParamSpec, numparams: int):
        super().__init__(name, spec, numparams)
        self.func = func

    def __repr__(self):
        return f"Builtin({self.name!r}, {self.spec!r}, {self.numparams})"


class _Sentinel:
    """Marker objects returned at the read/eval boundary. Never a Value."""

    __slots__ = ("label",)

    def __init__(self, label: str):
        self.label = label

    def __bool__(self):
        return False

    def __repr__(self):
        return self.label


T = TrueType()
NIL = List()

# End of input from the reader
EOF = _Sentinel("EOF")
# Returned when a read or eval failed; the reason is in the error channel
FAILURE = _Sentinel("FAILURE")


# -------------------------------
# Construction
# -------------------------------
def make_list(items: Iterable[Value] = (), quoted: bool = False) -> List:
    """Build a List; an empty sequence always yields the NIL singleton."""
    items = tuple(items)
    if not items:
        return NIL
    return List(items, quoted)


_CONSTRUCTORS: dict[Variant, Callable[[Any], Value]] = {
    Variant.INTEGER: Integer,
    Variant.STRING: String,
    Variant.SYMBOL: Symbol,
    Variant.LIST: make_list,
    Variant.FUNCTION: lambda payload: Function(*payload),
    Variant.BUILTIN: lambda payload: Builtin(*payload),
    Variant.T_TYPE: lambda _payload: T,
}


def make_object(variant: Variant, payload: Any = None) -> Value:
    """Construct a Value of `variant` from its payload.

    FUNCTION takes `(params, forms[, name])` and BUILTIN takes
    `(name, func, spec, numparams)`; T_TYPE ignores the payload.
    """
    match variant:
        case Variant.INTEGER if not isinstance(payload, int) or isinstance(payload, bool):
            raise PicoTypeError(f"INTEGER payload must be an int, got {payload!r}")
        case Variant.STRING | Variant.SYMBOL if not isinstance(payload, str):
            raise PicoTypeError(f"{variant.name} payload must be a str, got {payload!r}")
    return _CONSTRUCTORS[variant](payload)


# -------------------------------
# Operations
# -------------------------------
def deep_copy(value: Value) -> Value:
    """Recursively duplicate `value`. Singletons and native builtins are shared."""
    match value:
        case Integer(v):
            return Integer(v, value.quoted)
        case String(text):
            return String(text, value.quoted)
        case Symbol(name):
            return Symbol(name, value.quoted)
        case List(items):
            if not items:
                return NIL
            return List((deep_copy(item) for item in items), value.quoted)
        case Function():
            return Function(deep_copy(value.params), deep_copy(value.forms), value.name)
        case Builtin() | TrueType():
            return value
    raise PicoTypeError(f"Cannot copy non-value {value!r}")


def strip_quote(value: Value) -> Value:
    """Structural copy of a quoted form with only its top-level quote flag cleared."""
    return deep_copy(value).with_quote(False) if value.quoted else value


def list_length(value: Value) -> int:
    if not isinstance(value, List):
        raise PicoTypeError(f"Expected a list, got {value!r}")
    return len(value.items)


def true_p(value: Value) -> bool:
    """Only the empty list is false; Integer 0 and the empty string are true."""
    return not (isinstance(value, List) and not value.items)


def as_bool(flag: bool) -> Value:
    return T if flag else NIL
