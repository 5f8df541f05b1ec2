from pico.types.value import (
    Variant,
    ParamSpec,
    Value,
    Integer,
    String,
    Symbol,
    List,
    Function,
    Builtin,
    Procedure,
    TrueType,
    T,
    NIL,
    EOF,
    FAILURE,
    make_list,
    make_object,
    deep_copy,
    strip_quote,
    list_length,
    true_p,
    as_bool,
)
from pico.types.symbol_table import SymbolEntry, SymbolTable
