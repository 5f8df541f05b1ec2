"""Registry of special forms for the Pico evaluator.

Special forms are builtins flagged UNEVAL_ARGS: the evaluator hands them their
argument forms unevaluated and they decide what to evaluate and when.
"""

from pico.builtin.registry import BuiltinDef, register_all
from pico.evaluation.special_forms.define_form import defun_form
from pico.evaluation.special_forms.do_loop_forms import while_form
from pico.evaluation.special_forms.if_form import if_form
from pico.evaluation.special_forms.lambda_form import lambda_form
from pico.evaluation.special_forms.logic_forms import and_form, or_form
from pico.evaluation.special_forms.progn_form import progn_form
from pico.evaluation.special_forms.quote_forms import quote_form
from pico.evaluation.special_forms.set_form import setq_form
from pico.types.symbol_table import SymbolTable
from pico.types.value import ParamSpec

UNEVAL = ParamSpec.UNEVAL_ARGS
FIXED = ParamSpec.VAR_FIXED
MIN = ParamSpec.VAR_MIN

SPECIAL_FORMS: list[BuiltinDef] = [
    BuiltinDef("quote", FIXED | UNEVAL, 1, quote_form),
    BuiltinDef("if", MIN | UNEVAL, 2, if_form),
    BuiltinDef("progn", MIN | UNEVAL, 0, progn_form),
    BuiltinDef("setq", FIXED | UNEVAL, 2, setq_form),
    BuiltinDef("lambda", MIN | UNEVAL, 1, lambda_form),
    BuiltinDef("defun", MIN | UNEVAL, 2, defun_form),
    BuiltinDef("and", MIN | UNEVAL, 0, and_form),
    BuiltinDef("or", MIN | UNEVAL, 0, or_form),
    BuiltinDef("while", MIN | UNEVAL, 1, while_form),
]


def register(symbols: SymbolTable) -> None:
    """Install every special form into `symbols` as a constant builtin."""
    register_all(symbols, SPECIAL_FORMS)
