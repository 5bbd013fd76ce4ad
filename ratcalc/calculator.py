"""Top-level evaluation entry point: string -> tokens -> postfix -> rational."""

import logging
from fractions import Fraction
from typing import Optional, Tuple

from ratcalc.converter import to_postfix
from ratcalc.errors import CalculatorError, InvalidExpressionError
from ratcalc.evaluator import evaluate_postfix
from ratcalc.numeric import DEFAULT_FLOAT_DIGITS
from ratcalc.symbols import SymbolTable, default_symbol_table
from ratcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


class Calculator:
    """Evaluates infix expressions against an injected symbol table."""

    def __init__(self, symbols: Optional[SymbolTable] = None,
                 float_digits: int = DEFAULT_FLOAT_DIGITS):
        self.symbols = symbols if symbols is not None else default_symbol_table()
        self.float_digits = float_digits

    def evaluate(self, expr: str) -> Fraction:
        """Evaluate `expr` and return its exact value.

        Pipeline errors propagate unchanged. Any other exception is reported as
        InvalidExpressionError for `expr`, with the original fault as its cause.
        """
        try:
            tokens = tokenize(expr)
            postfix = to_postfix(tokens, self.symbols)
            return evaluate_postfix(postfix, self.symbols, self.float_digits)
        except CalculatorError:
            raise
        except Exception as e:
            logger.error(f"Unexpected error evaluating {expr!r}: {e!r}")
            raise InvalidExpressionError(expr) from e


def evaluate_expression(
    expr: str, symbols: Optional[SymbolTable] = None
) -> Tuple[Optional[Fraction], Optional[CalculatorError]]:
    """Evaluate `expr`, returning (value, None) on success or (None, error)."""
    try:
        return Calculator(symbols).evaluate(expr), None
    except CalculatorError as e:
        return None, e
