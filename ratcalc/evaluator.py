"""Postfix stack machine over exact rationals."""

import logging
import math
from fractions import Fraction
from typing import List

from ratcalc.errors import (
    EvalArithmeticError,
    FunctionApplicationError,
    InsufficientOperandsError,
    MalformedOperandError,
    NoResultError,
    ResidualOperandsError,
    UnknownTokenError,
)
from ratcalc.numeric import (
    DEFAULT_FLOAT_DIGITS,
    float_to_rational,
    parse_rational,
    rational_to_float,
)
from ratcalc.symbols import SymbolTable
from ratcalc.tokenizer import is_identifier, is_number, is_operand, is_operator

logger = logging.getLogger(__name__)

TRUE = Fraction(1)
FALSE = Fraction(0)


class OperandStack:
    """LIFO of rationals; popping an empty stack raises instead of returning a default."""

    def __init__(self):
        self._items: List[Fraction] = []

    def push(self, value: Fraction) -> None:
        self._items.append(value)

    def pop(self, context: str) -> Fraction:
        if not self._items:
            raise InsufficientOperandsError(f"Insufficient operands for {context}")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class PostfixEvaluator:
    """Evaluates a postfix token sequence produced by PostfixConverter."""

    def __init__(self, symbols: SymbolTable, float_digits: int = DEFAULT_FLOAT_DIGITS):
        self.symbols = symbols
        self.float_digits = float_digits

    def _to_float(self, value: Fraction) -> float:
        return rational_to_float(value, self.float_digits)

    def _parse_operand(self, token: str) -> Fraction:
        if not is_number(token):
            raise MalformedOperandError(token)
        return parse_rational(token)

    def _apply_operator(self, op: str, op1: Fraction, op2: Fraction) -> Fraction:
        if op == '+':
            return op1 + op2
        if op == '-':
            return op1 - op2
        if op == '*':
            return op1 * op2
        if op == '/':
            if op2 == 0:
                raise EvalArithmeticError("Division by zero")
            return op1 / op2
        if op == '**':
            # Exponentiation goes through floats; the result is only as exact as a double.
            try:
                result = math.pow(self._to_float(op1), self._to_float(op2))
            except (ValueError, OverflowError) as e:
                raise EvalArithmeticError(f"Error evaluating {op}: {e}") from e
            return float_to_rational(result)
        if op == '<':
            return TRUE if op1 < op2 else FALSE
        if op == '>':
            return TRUE if op1 > op2 else FALSE
        raise UnknownTokenError(op)

    def _call_function(self, name: str, handle, stack: OperandStack) -> Fraction:
        arity = self.symbols.required_argument_count(handle)
        popped = [stack.pop(f"function '{name}'") for _ in range(arity)]
        args = [self._to_float(v) for v in reversed(popped)]
        result = self.symbols.apply(handle, args)
        logger.debug(f"{name}{tuple(args)} -> {result!r}")
        try:
            return float_to_rational(float(result))
        except (TypeError, ValueError) as e:
            raise FunctionApplicationError(name, f"returned non-numeric value {result!r}") from e

    def evaluate(self, postfix: List[str]) -> Fraction:
        stack = OperandStack()
        for token in postfix:
            if is_operand(token):
                stack.push(self._parse_operand(token))
            elif is_operator(token):
                op2 = stack.pop(token)
                op1 = stack.pop(token)
                stack.push(self._apply_operator(token, op1, op2))
            elif is_identifier(token):
                handle = self.symbols.lookup(token)
                if handle is None or not self.symbols.is_callable(handle):
                    raise UnknownTokenError(token)
                stack.push(self._call_function(token, handle, stack))
            else:
                raise UnknownTokenError(token)

        if len(stack) == 0:
            raise NoResultError("Expression produced no result")
        if len(stack) > 1:
            raise ResidualOperandsError(len(stack))
        return stack.pop("result")


def evaluate_postfix(postfix: List[str], symbols: SymbolTable,
                     float_digits: int = DEFAULT_FLOAT_DIGITS) -> Fraction:
    """Evaluate a postfix sequence to a single rational."""
    return PostfixEvaluator(symbols, float_digits).evaluate(postfix)
