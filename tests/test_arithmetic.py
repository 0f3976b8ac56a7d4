import pytest

from lisplet.builtin.env_builtin import NUMBER, add, is_equal, new_env, type_name, validated
from lisplet.types.errors import (
    LispletArityError,
    LispletDivisionByZero,
    LispletTypeError,
)
from lisplet.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6.0),
        ("(- 10 3 2)", 5.0),
        ("(* 2 3 4)", 24.0),
        ("(/ 12 3)", 4.0),
        ("(/ 1 4)", 0.25),
        ("(+ (* 2 3) (- 10 4))", 12.0),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1.0),
        ("(- -10 -5)", -5.0),
        ("(+)", 0.0),
        ("(*)", 1.0),
        ("(- 4)", -4.0),
        ("(/ 4)", 0.25),
        ("(% 7 3)", 1.0),
        ("(% -7 3)", -1.0),
        ("(% 7.5 2)", 1.5),
        ("(abs -3)", 3.0),
        ("(max 1 5 3)", 5.0),
        ("(min 4 -2 8)", -2.0),
        ("(max 7)", 7.0),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57.0),
    ],
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(<= 2 2)", True),
        ("(> 3 2 1)", True),
        ("(>= 1 2)", False),
        ("(= 2 2)", True),
        ("(= 2 2.0 2)", True),
        ("(= 1 2)", False),
        ('(equal? "a" "a")', True),
        ("(equal? (list 1 (list 2)) (quote (1 (2))))", True),
        ("(equal? (list 1 2) (list 1 3))", False),
        ("(equal? 1 #t)", False),
        ("(equal? (quote a) (quote a))", True),
    ],
)
def test_comparison(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(&& #t #t)", True),
        ("(&& #t #f)", False),
        ("(|| #f #t)", True),
        ("(|| #f #f)", False),
        ("(&&)", True),
        ("(||)", False),
        ("(! #t)", False),
        ("(not #f)", True),
        ("(and #t #t #f)", False),
        ("(or #f #f #t)", True),
    ],
)
def test_boolean_logic(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (list 1 2 3))", 1.0),
        ("(cdr (list 1 2 3))", [2.0, 3.0]),
        ("(cdr (list 1))", []),
        ("(cons 1 (list 2 3))", [1.0, 2.0, 3.0]),
        ("(cons 1 (quote ()))", [1.0]),
        ("(cons 1 2)", [1.0, 2.0]),
        ("(list)", []),
        ('(list 1 "a" #t)', [1.0, "a", True]),
        ("(car (quote (a b)))", Symbol("a")),
    ],
)
def test_list_operations(run, source, expected):
    assert run(source) == expected


def test_cdr_does_not_mutate_its_argument(run):
    run("(define xs (list 1 2 3))")
    run("(cdr xs)")
    assert run("xs") == [1.0, 2.0, 3.0]


@pytest.mark.parametrize(
    "source,received,expected",
    [
        ('(+ 1 "a")', "String", "Number"),
        ("(- #t)", "Boolean", "Number"),
        ("(* 2 (quote x))", "Symbol", "Number"),
        ("(< 1 (list))", "List", "Number"),
        ("(&& #t 1)", "Number", "Boolean"),
        ("(! 0)", "Number", "Boolean"),
        ("(car 5)", "Number", "List"),
        ("(cdr car)", "Procedure", "List"),
        ("(car (quote ()))", "empty List", "non-empty List"),
    ],
)
def test_type_errors(run, source, received, expected):
    with pytest.raises(LispletTypeError) as exc:
        run(source)
    assert exc.value.received == received
    assert exc.value.expected == expected
    assert f"received {received}, expected {expected}" in str(exc.value)


@pytest.mark.parametrize(
    "source",
    ["(-)", "(/)", "(max)", "(min)", "(% 1)", "(< 1)", "(= 1)", "(! #t #f)", "(car)", "(cons 1)"],
)
def test_builtin_arity_errors(run, source):
    with pytest.raises(LispletArityError):
        run(source)


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 0)", "(% 5 0)"])
def test_division_by_zero(run, source):
    with pytest.raises(LispletDivisionByZero):
        run(source)


def test_new_env_installs_required_builtins():
    env = new_env()
    for name in "+ - * / % max min < <= > >= = && || ! car cdr cons list".split():
        assert env.find(Symbol(name)) is env


def test_new_env_returns_independent_environments():
    a, b = new_env(), new_env()
    a.define(Symbol("x"), 1.0)
    assert b.find(Symbol("x")) is None


def test_is_equal_distinguishes_strings_and_symbols():
    assert not is_equal("a", Symbol("a"))
    assert is_equal([1.0, ["x"]], [1.0, ["x"]])


def test_type_name():
    assert type_name(1.0) == "Number"
    assert type_name(True) == "Boolean"
    assert type_name([]) == "List"


def test_validated_checks_every_argument_of_a_variadic_call():
    total = validated("sum", add, NUMBER)
    assert total([1.0, 2.0, 3.0, 4.0, 5.0]) == 15.0
    with pytest.raises(LispletTypeError) as exc:
        total([1.0, 2.0, 3.0, 4.0, "5"])
    assert str(exc.value) == "Type Error: sum: received String, expected Number"
