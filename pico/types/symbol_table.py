"""Global symbol table for Pico.

Maps names to mutable bindings. Entries are created lazily on first
lookup-or-define and live as long as the table. Constant entries (t, nil and
builtins) refuse rebinding through `assign`.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Optional

from pico.errors import PicoConstantViolation, PicoNoSuchSymbol, PicoUnboundSymbol
from pico.types.value import Value

logger = logging.getLogger(__name__)


class SymbolEntry:
    """A named binding: the value may be absent (None) until assigned."""

    __slots__ = ("name", "value", "constant")

    def __init__(self, name: str, value: Optional[Value] = None, constant: bool = False):
        self.name = name
        self.value = value
        self.constant = constant

    @property
    def bound(self) -> bool:
        return self.value is not None

    def __repr__(self):
        flag = " constant" if self.constant else ""
        return f"<SymbolEntry {self.name}={self.value!r}{flag}>"


class SymbolTable:
    """Growable registry of SymbolEntry objects keyed by name."""

    __slots__ = ("_entries", "capacity", "scale_factor")

    def __init__(self, initial_size: int = 100, scale_factor: int = 2):
        self._entries: dict[str, SymbolEntry] = {}
        self.capacity = initial_size
        self.scale_factor = scale_factor

    def find(self, name: str) -> Optional[SymbolEntry]:
        """Return the entry for `name` without creating it."""
        return self._entries.get(name)

    def lookup(self, name: str) -> SymbolEntry:
        """Return the entry for `name`, registering an unbound one if needed."""
        entry = self._entries.get(name)
        if entry is not None:
            return entry
        if len(self._entries) >= self.capacity:
            self.capacity *= self.scale_factor
            logger.debug("Symbol table grown to capacity %d", self.capacity)
        entry = SymbolEntry(name)
        self._entries[name] = entry
        return entry

    def value(self, name: str) -> Value:
        """Fetch the bound value of `name`.

        Raises PicoNoSuchSymbol if the name was never registered and
        PicoUnboundSymbol if it is registered but holds no value.
        """
        entry = self._entries.get(name)
        if entry is None:
            raise PicoNoSuchSymbol(f"No such symbol: {name}")
        if entry.value is None:
            raise PicoUnboundSymbol(f"Symbol's value is void: {name}")
        return entry.value

    def assign(self, name: str, value: Value) -> SymbolEntry:
        """Bind `name` to `value`. Raises PicoConstantViolation for constants."""
        entry = self.lookup(name)
        if entry.constant:
            raise PicoConstantViolation(f"Cannot rebind constant symbol {name}")
        entry.value = value
        return entry

    def define_constant(self, name: str, value: Value) -> SymbolEntry:
        """Bind `name` to `value` and mark it constant, overriding any existing binding."""
        entry = self.lookup(name)
        entry.value = value
        entry.constant = True
        return entry

    def unbind(self, name: str) -> SymbolEntry:
        """Clear the value of `name`, keeping it registered."""
        entry = self._entries.get(name)
        if entry is None:
            raise PicoNoSuchSymbol(f"No such symbol: {name}")
        if entry.constant:
            raise PicoConstantViolation(f"Cannot unbind constant symbol {name}")
        entry.value = None
        return entry

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<SymbolTable {len(self)}/{self.capacity}: ")
            buffer.write(", ".join(self._entries))
            buffer.write(">")
            return buffer.getvalue()
