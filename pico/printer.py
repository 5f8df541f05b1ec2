from __future__ import annotations

from io import StringIO
from typing import TextIO

from pico.types.value import Builtin, Function, Integer, List, String, Symbol, TrueType, Value

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}


def escape_string(text: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in text) + '"'


def _write(value: Value, buffer: StringIO) -> None:
    match value:
        case Integer(v):
            buffer.write(str(v))
        case String(text):
            buffer.write(escape_string(text))
        case Symbol(name):
            buffer.write(name)
        case List(items):
            buffer.write("(")
            for i, item in enumerate(items):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case TrueType():
            buffer.write("t")
        case Function():
            buffer.write("#<function ")
            if value.name:
                buffer.write(value.name + " ")
            _write(value.params, buffer)
            buffer.write(">")
        case Builtin():
            buffer.write(f"#<builtin {value.name}>")
        case _:
            buffer.write(repr(value))


def to_string(value: Value) -> str:
    """Render `value` as text. The quote marker is never emitted."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def print_value(value: Value, stream: TextIO) -> None:
    stream.write(to_string(value))
    stream.write("\n")
