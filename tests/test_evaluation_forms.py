import pytest

from pico.types.value import FAILURE, NIL, T, Function, Integer, String, Symbol, make_list


def run(interp, source):
    result = interp.eval_string(source)
    assert not interp.has_error(), interp.get_error()
    return result


def fails_with(interp, source):
    assert interp.eval_string(source) is FAILURE
    return interp.errors.kind


# ------------------ Special forms ------------------

def test_if_else(interp):
    assert run(interp, "(if t 1 2)") == Integer(1)
    assert run(interp, "(if nil 1 2)") == Integer(2)
    assert run(interp, "(if nil 1)") is NIL


def test_if_evaluates_only_the_chosen_branch(interp):
    assert run(interp, "(if t 1 (undefined-function))") == Integer(1)
    assert run(interp, "(if nil (undefined-function) 2)") == Integer(2)


@pytest.mark.parametrize("source", ["(if)", "(if t)", "(if t 1 2 3)"])
def test_if_arity(interp, source):
    assert fails_with(interp, source) == "ArityError"


def test_progn_sequencing(interp):
    assert run(interp, "(progn (setq a 10) (setq b 20) (+ a b))") == Integer(30)
    assert run(interp, "(progn)") is NIL


def test_setq(interp):
    assert run(interp, "(setq x 5)") == Integer(5)
    assert run(interp, "(setq x (+ x 1)) x") == Integer(6)


def test_setq_requires_a_symbol(interp):
    assert fails_with(interp, "(setq 1 2)") == "TypeError"
    assert fails_with(interp, "(setq x)") == "ArityError"


def test_set_evaluates_its_target(interp):
    assert run(interp, "(setq name 'target) (set name 3) target") == Integer(3)
    assert fails_with(interp, "(set 1 2)") == "TypeError"


@pytest.mark.parametrize(
    "source",
    [
        "(setq t 1)",
        "(setq nil 1)",
        "(setq car 1)",
        "(setq setq 1)",
        "(set 'nil 2)",
        "(set 't 2)",
        "(defun car (x) x)",
        "(makunbound 'cdr)",
        "((lambda (t) t) 1)",
        "(defun shadow (+) 1) (shadow 2)",
    ],
)
def test_constant_violation(interp, source):
    assert fails_with(interp, source) == "ConstantViolation"


def test_constants_survive_violation_attempts(interp):
    interp.eval_string("(setq t 1)")
    assert run(interp, "t") is T
    assert run(interp, "(car '(1 2))") == Integer(1)


def test_defun_returns_name_and_binds_globally(interp):
    assert run(interp, "(defun sq (x) (* x x))") == Symbol("sq")
    fn = interp.symbols.value("sq")
    assert isinstance(fn, Function)
    assert fn.name == "sq"
    assert fn.numparams == 1
    assert run(interp, "(sq 9)") == Integer(81)


def test_defun_redefinition(interp):
    run(interp, "(defun f () 1)")
    run(interp, "(defun f () 2)")
    assert run(interp, "(f)") == Integer(2)


def test_lambda(interp):
    assert run(interp, "((lambda (x y) (* x y)) 3 4)") == Integer(12)
    assert run(interp, "(setq double (lambda (x) (+ x x))) (double 21)") == Integer(42)


@pytest.mark.parametrize(
    "source,kind",
    [
        ("(lambda (1) 1)", "TypeError"),
        ("(lambda x x)", "TypeError"),
        ("(lambda (a a) a)", "TypeError"),
        ("(lambda)", "ArityError"),
        ("(defun 5 () 1)", "TypeError"),
        ("(defun f)", "ArityError"),
    ],
)
def test_lambda_errors(interp, source, kind):
    assert fails_with(interp, source) == kind


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and 1 2 3)", Integer(3)),
        ("(and 1 () 3)", NIL),
        ("(and)", T),
        ("(or () 2)", Integer(2)),
        ("(or () ())", NIL),
        ("(or)", NIL),
        ("(or 1 (undefined))", Integer(1)),
        ("(and () (undefined))", NIL),
    ],
)
def test_logic_forms(interp, source, expected):
    assert run(interp, source) == expected


def test_while_loop(interp):
    source = """
    (setq i 0)
    (setq acc 0)
    (while (< i 5)
      (setq acc (+ acc i))
      (setq i (+ i 1)))
    """
    assert run(interp, source) is NIL
    assert run(interp, "acc") == Integer(10)


def test_while_never_entered(interp):
    assert run(interp, "(while nil (undefined))") is NIL


# ------------------ Builtin library ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car '(1 2))", Integer(1)),
        ("(car ())", NIL),
        ("(cdr '(1))", NIL),
        ("(cdr ())", NIL),
        ("(cons 1 '(2))", make_list([Integer(1), Integer(2)])),
        ("(cons 1 nil)", make_list([Integer(1)])),
        ("(list)", NIL),
        ("(list 1 (+ 1 1))", make_list([Integer(1), Integer(2)])),
        ("(length '(1 2 3))", Integer(3)),
        ("(length ())", Integer(0)),
        ('(length "abcd")', Integer(4)),
        ("(eq '(1 (2)) '(1 (2)))", T),
        ("(eq 'a 'b)", NIL),
        ("(eq \"s\" \"s\")", T),
        ("(not nil)", T),
        ("(not 0)", NIL),
        ("(null ())", T),
        ("(atom 'a)", T),
        ("(atom ())", T),
        ("(atom '(1))", NIL),
        ("(listp ())", T),
        ("(listp 1)", NIL),
        ("(symbolp 'a)", T),
        ("(stringp \"a\")", T),
        ("(integerp 3)", T),
        ("(integerp \"3\")", NIL),
        ('(concat "ab" "cd" "")', String("abcd")),
        ("(concat)", String("")),
        ("(intern \"fresh\")", Symbol("fresh")),
        ("(boundp 'car)", T),
    ],
)
def test_builtins(interp, source, expected):
    assert run(interp, source) == expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("(car 5)", "TypeError"),
        ("(cdr \"s\")", "TypeError"),
        ("(cons 1 2)", "TypeError"),
        ("(length 5)", "TypeError"),
        ("(concat \"a\" 1)", "TypeError"),
        ("(intern 'a)", "TypeError"),
        ("(eq 1)", "ArityError"),
        ("(car)", "ArityError"),
        ('(error "boom" 42)', "UserError"),
    ],
)
def test_builtin_errors(interp, source, kind):
    assert fails_with(interp, source) == kind


def test_error_builtin_message(interp):
    interp.eval_string('(error "bad value:" \'(1 2))')
    assert interp.get_error() == "bad value: (1 2)"
