import pytest

from lisplet.evaluation.special_forms import SPECIAL_FORMS
from lisplet.evaluation.special_forms.if_form import is_truthy
from lisplet.types.errors import LispletSyntaxError
from lisplet.types.nil import Nil
from lisplet.types.symbol import Symbol


def test_registry_holds_exactly_the_core_forms():
    assert set(SPECIAL_FORMS) == {
        Symbol(name) for name in ("quote", "if", "define", "set!", "lambda", "begin")
    }


@pytest.mark.parametrize(
    "source,form",
    [
        ("(quote)", "quote"),
        ("(quote a b)", "quote"),
        ("(if #t 1)", "if"),
        ("(if #t 1 2 3)", "if"),
        ("(define x)", "define"),
        ("(define x 1 2)", "define"),
        ("(set! x)", "set!"),
        ("(lambda (x))", "lambda"),
        ("(lambda (x) x x)", "lambda"),
    ],
)
def test_wrong_arity_is_a_syntax_error_naming_the_form(run, source, form):
    with pytest.raises(LispletSyntaxError) as exc:
        run(source)
    assert f"'{form}'" in str(exc.value)


@pytest.mark.parametrize(
    "source",
    ['(set! "x" 1)', "(set! 3 1)", "(define (f) 1)"],
)
def test_assignment_target_must_be_symbol(run, source):
    with pytest.raises(LispletSyntaxError, match="Cannot assign to a literal"):
        run(source)


@pytest.mark.parametrize("source", ["(lambda (a 1) a)", '(lambda "a" a)', "(lambda 3 3)"])
def test_lambda_parameters_must_be_symbols(run, source):
    with pytest.raises(LispletSyntaxError):
        run(source)


@pytest.mark.parametrize(
    "value,expected",
    [
        (False, False),
        (0.0, False),
        ([], False),
        (Nil, False),
        (True, True),
        (1.0, True),
        (-0.5, True),
        ([0.0], True),
        ("", True),
        ("text", True),
        (Symbol("a"), True),
    ],
)
def test_truthiness(value, expected):
    assert is_truthy(value) is expected


@pytest.mark.parametrize(
    "condition,expected",
    [
        ("#t", "yes"),
        ("#f", "no"),
        ("0", "no"),
        ("1", "yes"),
        ("(quote ())", "no"),
        ("(quote (1))", "yes"),
        ('""', "yes"),
        ("(define unused 1)", "no"),
    ],
)
def test_if_branches_on_truthiness(run, condition, expected):
    assert run(f'(if {condition} "yes" "no")') == expected


def test_if_only_evaluates_the_chosen_branch(run):
    assert run("(if #t 1 (undefined))") == 1.0
    assert run("(if #f (undefined) 2)") == 2.0


def test_quote_does_not_look_up_symbols(run):
    assert run("(quote (undefined also-undefined))") == [
        Symbol("undefined"),
        Symbol("also-undefined"),
    ]


def test_set_returns_nil(run):
    run("(define x 1)")
    assert run("(set! x 2)") is Nil
