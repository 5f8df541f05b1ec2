"""Registration of native functions as Pico builtins."""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple

from pico.types.symbol_table import SymbolTable
from pico.types.value import Builtin, BuiltinFn, ParamSpec

logger = logging.getLogger(__name__)


class BuiltinDef(NamedTuple):
    name: str
    spec: ParamSpec
    numparams: int
    func: BuiltinFn


def define_builtin(
    symbols: SymbolTable,
    name: str,
    spec: ParamSpec | int,
    numparams: int,
    func: BuiltinFn,
) -> Builtin:
    """Wrap `func` as a Builtin and bind it to `name` as a constant.

    `func(ctx, args)` always receives a single List of the (possibly
    unevaluated) arguments and must return a Value. Defining an existing
    name through here replaces it; ordinary assignment cannot.
    """
    if numparams < 0:
        raise ValueError(f"numparams must be >= 0, got {numparams}")
    builtin = Builtin(name, func, ParamSpec(spec), numparams)
    symbols.define_constant(name, builtin)
    logger.debug("Registered builtin %s (%r, %d)", name, builtin.spec, numparams)
    return builtin


def register_all(symbols: SymbolTable, definitions: Iterable[BuiltinDef]) -> None:
    for d in definitions:
        define_builtin(symbols, d.name, d.spec, d.numparams, d.func)
