import pytest

from elysp.errors import ElyspArityError, ElyspTypeError, ElyspZeroDivisionError
from elysp.types.tags import ValueType


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(- 10 3)", 7),
        ("(* 6 7)", 42),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3),
        ("(/ (- 0 7) 2)", -4),  # floor division
        ("(- 3 10)", -7),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(+ 1 (* 2 (- 10 6)))", 9),
        ("(+ 1 #- 2 3)", 4),
        ("(* 123456789 987654321)", 121932631112635269),
    ],
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


def test_arguments_are_evaluated(run):
    run("(define x 5)")
    assert run("(+ x x)") == 10


def test_division_by_zero(run):
    with pytest.raises(ElyspZeroDivisionError):
        run("(/ 1 0)")


@pytest.mark.parametrize("op", ["+", "-", "*", "/"])
@pytest.mark.parametrize("args", ["", "1", "1 2 3"])
def test_binary_arity(run, op, args):
    with pytest.raises(ElyspArityError):
        run(f"({op} {args})")


@pytest.mark.parametrize(
    "source,actual",
    [
        ('(+ 1 "2")', ValueType.STRING),
        ("(- 'a 1)", ValueType.SYMBOL),
        ("(* '(1) 2)", ValueType.PAIR),
        ("(/ 4 nil)", ValueType.NIL),
    ],
)
def test_operands_must_be_numbers(run, source, actual):
    with pytest.raises(ElyspTypeError) as excinfo:
        run(source)
    assert excinfo.value.expected is ValueType.NUM
    assert excinfo.value.actual is actual
    assert "expected type num" in str(excinfo.value)
