import pytest

from pico.evaluation.evaluator import evaluate
from pico.reader.parser import Reader
from pico.types.value import FAILURE, NIL, T, Integer


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(/ -12 3)", -4),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 2)", 0),
        ("(/ 1)", 1),
        ("(- 5)", -5),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*(7*4)
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
    ]
)
def test_lisp_arithmetic(ctx, source, expected):
    result = None
    for expr in Reader(source).read_all():
        result = evaluate(expr, ctx)
    assert result == Integer(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", T),
        ("(< 1 3 2)", NIL),
        ("(> 3 2 1)", T),
        ("(> 1 2)", NIL),
        ("(<= 1 1 2)", T),
        ("(>= 3 3 1)", T),
        ("(>= 1 2)", NIL),
        ("(= 2 2 2)", T),
        ("(= 2 3)", NIL),
        ("(= 4)", T),
    ]
)
def test_comparisons(interp, source, expected):
    assert interp.eval_string(source) is expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("(/ 1 0)", "EvaluationError"),
        ("(/ 0)", "EvaluationError"),
        ('(+ 1 "a")', "TypeError"),
        ("(* 'x 2)", "TypeError"),
        ("(< 1 '(2))", "TypeError"),
        ("(-)", "ArityError"),
        ("(/)", "ArityError"),
        ("(<)", "ArityError"),
    ]
)
def test_arithmetic_errors(interp, source, kind):
    assert interp.eval_string(source) is FAILURE
    assert interp.errors.kind == kind
