"""Exact-rational infix expression evaluator with host function calls."""

from ratcalc.calculator import Calculator, evaluate_expression
from ratcalc.converter import to_postfix
from ratcalc.errors import (
    CalculatorError,
    ConfigError,
    EvalArithmeticError,
    EvalError,
    FunctionApplicationError,
    InsufficientOperandsError,
    IntegerOverflowError,
    InvalidExpressionError,
    MalformedOperandError,
    MismatchedParenthesisError,
    MissingArgumentListError,
    NoResultError,
    NonFiniteValueError,
    NotAFunctionError,
    ParseError,
    ResidualOperandsError,
    UnknownSymbolError,
    UnknownTokenError,
)
from ratcalc.evaluator import evaluate_postfix
from ratcalc.numeric import (
    float_to_rational,
    format_rational,
    parse_rational,
    rational_to_bigint,
    rational_to_float,
    rational_to_int,
)
from ratcalc.symbols import GlobalSymbolTable, Primitive, SymbolTable, default_symbol_table
from ratcalc.tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    'Calculator', 'evaluate_expression', 'tokenize', 'to_postfix', 'evaluate_postfix',
    'SymbolTable', 'GlobalSymbolTable', 'Primitive', 'default_symbol_table',
    'rational_to_int', 'rational_to_bigint', 'rational_to_float', 'float_to_rational',
    'format_rational', 'parse_rational',
    'CalculatorError', 'ConfigError', 'ParseError', 'EvalError',
    'UnknownSymbolError', 'NotAFunctionError', 'MismatchedParenthesisError',
    'MissingArgumentListError', 'UnknownTokenError', 'MalformedOperandError',
    'InsufficientOperandsError', 'EvalArithmeticError', 'NonFiniteValueError',
    'NoResultError', 'ResidualOperandsError', 'FunctionApplicationError',
    'IntegerOverflowError', 'InvalidExpressionError',
]
