from lisplet_lsp.indexer import BUILTIN_SIGNATURES, build_index
from lisplet.builtin.env_builtin import new_env
from lisplet.types.symbol import Symbol


def test_indexes_top_level_definitions():
    text = "(define x 1)\n\n(define square\n  (lambda (n) (* n n)))\n"
    idx = build_index(text)
    assert set(idx.symbols) == {"x", "square"}
    assert idx.symbols["x"].kind == "var"
    assert (idx.symbols["x"].line, idx.symbols["x"].col) == (0, 8)
    assert idx.symbols["square"].kind == "function"
    assert (idx.symbols["square"].line, idx.symbols["square"].col) == (2, 8)
    assert idx.problems == []


def test_nested_defines_are_not_indexed():
    idx = build_index("(define f (lambda () (begin (define inner 1) inner)))")
    assert set(idx.symbols) == {"f"}


def test_syntax_errors_become_problems_with_zero_based_lines():
    idx = build_index("(define x 1)\n(define y\n")
    assert len(idx.problems) == 1
    assert idx.problems[0].line == 1
    assert "missing closing parenthesis" in idx.problems[0].message


def test_unexpected_close_paren_problem():
    idx = build_index("x\n\n)")
    assert idx.problems[0].line == 2


def test_signatures_cover_every_builtin():
    env = new_env()
    assert {Symbol(name) for name in BUILTIN_SIGNATURES} == set(env.vars)
