import io

import pytest

from pico.config import Settings
from pico.interpreter import Interpreter
from pico.runtime_context import Context
from pico.builtin import env_builtin
from pico.evaluation import special_forms
from pico.types.value import NIL, T


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def interp(output):
    """Fresh interpreter with default settings, printing into `output`."""
    return Interpreter(Settings(), output=output)


@pytest.fixture
def ctx(output):
    """Bare context with t, nil and all builtins, for calling evaluate() directly."""
    c = Context(Settings(), output)
    c.symbols.define_constant("t", T)
    c.symbols.define_constant("nil", NIL)
    special_forms.register(c.symbols)
    env_builtin.register(c.symbols)
    return c
