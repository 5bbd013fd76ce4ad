from fractions import Fraction

import pytest

from ratcalc.calculator import Calculator, evaluate_expression
from ratcalc.errors import (
    CalculatorError,
    EvalArithmeticError,
    InsufficientOperandsError,
    InvalidExpressionError,
    MismatchedParenthesisError,
    NoResultError,
    NonFiniteValueError,
    NotAFunctionError,
    UnknownSymbolError,
)
from ratcalc.symbols import SymbolTable


@pytest.fixture
def calc(symbols):
    return Calculator(symbols)


@pytest.mark.parametrize("expr,expected", [
    ("1+2*3", Fraction(7)),
    ("(1+2)*3", Fraction(9)),
    ("10-4-3", Fraction(3)),
    ("8/4/2", Fraction(1)),
    ("1/3 + 1/6", Fraction(1, 2)),
    ("0.1 + 0.2", Fraction(3, 10)),
    ("2*(3+4)*5", Fraction(70)),
])
def test_exact_results(calc, expr, expected):
    assert calc.evaluate(expr) == expected


def test_exponent_is_left_associative(calc):
    assert calc.evaluate("2**3**2") == Fraction(64)


@pytest.mark.parametrize("expr,expected", [
    ("1<2", Fraction(1)),
    ("2<1", Fraction(0)),
    ("3>2", Fraction(1)),
    ("1+1>3", Fraction(0)),
])
def test_comparisons(calc, expr, expected):
    assert calc.evaluate(expr) == expected


def test_function_calls(calc):
    assert calc.evaluate("double(1+2)") == Fraction(6)
    assert calc.evaluate("sub(10, 4) * 2") == Fraction(12)
    assert calc.evaluate("1 + mid(1, 2, 3)") == Fraction(3)
    assert calc.evaluate("double(double(1))") == Fraction(4)


@pytest.mark.parametrize("expr", ["1/0", "5/(2-2)", "0/0"])
def test_division_by_zero(calc, expr):
    with pytest.raises(EvalArithmeticError):
        calc.evaluate(expr)


def test_symbol_errors(calc):
    with pytest.raises(UnknownSymbolError):
        calc.evaluate("nothing(1)")
    with pytest.raises(NotAFunctionError):
        calc.evaluate("CONSTANT(1)")


@pytest.mark.parametrize("expr,error", [
    ("", NoResultError),
    ("1+", InsufficientOperandsError),
    ("(1+2", MismatchedParenthesisError),
    ("1+2)", MismatchedParenthesisError),
    ("-3", InsufficientOperandsError),
])
def test_malformed_input_is_reported(calc, expr, error):
    with pytest.raises(error):
        calc.evaluate(expr)


class BrokenSymbols(SymbolTable):
    """Symbol table whose lookups fail with an unexpected exception."""

    def lookup(self, name):
        raise KeyError(name)

    def is_callable(self, handle):
        return True

    def required_argument_count(self, handle):
        return 0

    def apply(self, handle, args):
        return 0.0


def test_unexpected_fault_becomes_invalid_expression():
    calc = Calculator(BrokenSymbols())
    with pytest.raises(InvalidExpressionError) as exc:
        calc.evaluate("f(1)")
    assert exc.value.expression == "f(1)"
    assert "f(1)" in str(exc.value)
    assert isinstance(exc.value.__cause__, KeyError)


def test_evaluate_expression_result_style(symbols):
    value, err = evaluate_expression("1+2*3", symbols)
    assert value == Fraction(7) and err is None

    value, err = evaluate_expression("1/0", symbols)
    assert value is None
    assert isinstance(err, EvalArithmeticError)

    value, err = evaluate_expression("f(1)", BrokenSymbols())
    assert value is None
    assert isinstance(err, InvalidExpressionError)


def test_evaluate_expression_default_symbols():
    value, err = evaluate_expression("fact(5) + 1")
    assert err is None and value == Fraction(121)
    value, err = evaluate_expression("CONSTANT + 1")
    assert isinstance(err, CalculatorError) and isinstance(err, NotAFunctionError)


BIG = "1" + "0" * 2200


def test_huge_exact_values(calc):
    assert calc.evaluate(f"{BIG}*{BIG}") == Fraction(10) ** 4400
    assert calc.evaluate("1" + "0" * 5000 + "/10") == Fraction(10) ** 4999


def test_huge_function_argument_is_non_finite(calc):
    with pytest.raises(NonFiniteValueError):
        calc.evaluate(f"double({BIG}*{BIG})")
