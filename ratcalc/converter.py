"""Infix to postfix conversion (shunting-yard) with function calls.

Function names are held on their own stack and emitted right after the closing
parenthesis of their argument list, so `f(1+2)` becomes `1 2 + f`.
"""

import logging
from typing import Dict, List

from ratcalc.errors import (
    MismatchedParenthesisError,
    MissingArgumentListError,
    NotAFunctionError,
    UnknownSymbolError,
)
from ratcalc.symbols import SymbolTable
from ratcalc.tokenizer import is_identifier, is_operand, is_operator

logger = logging.getLogger(__name__)

# '<' and '>' bind loosest.
PRECEDENCE: Dict[str, int] = {
    '<': 0,
    '>': 0,
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '**': 3,
}


def precedence(op: str) -> int:
    return PRECEDENCE[op]


class PostfixConverter:
    """Converts a token list to postfix order, validating function names.

    Every operator is treated as left-associative, `**` included, so
    `2**3**2` converts to `2 3 ** 2 **`.
    """

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols

    def _check_function(self, name: str) -> None:
        handle = self.symbols.lookup(name)
        if handle is None:
            raise UnknownSymbolError(name)
        if not self.symbols.is_callable(handle):
            raise NotAFunctionError(name)

    def convert(self, tokens: List[str]) -> List[str]:
        output: List[str] = []
        operators: List[str] = []
        functions: List[str] = []
        # One entry per open '(' on the operator stack: True when it opened a call.
        groups: List[bool] = []
        awaiting_call = False

        for token in tokens:
            opens_call = awaiting_call
            if opens_call and token != '(':
                raise MissingArgumentListError(functions[-1])
            awaiting_call = False

            if is_identifier(token):
                self._check_function(token)
                functions.append(token)
                awaiting_call = True
            elif token == '(':
                operators.append(token)
                groups.append(opens_call)
            elif token == ')':
                while operators and operators[-1] != '(':
                    output.append(operators.pop())
                if not operators:
                    raise MismatchedParenthesisError("Unmatched ')'")
                operators.pop()
                if groups.pop():
                    output.append(functions.pop())
            elif token == ',':
                pass
            elif is_operator(token):
                while (operators and operators[-1] != '('
                       and precedence(operators[-1]) >= precedence(token)):
                    output.append(operators.pop())
                operators.append(token)
            elif is_operand(token):
                output.append(token)
            else:
                # Left for the evaluator to reject.
                output.append(token)

        if awaiting_call:
            raise MissingArgumentListError(functions[-1])
        while operators:
            op = operators.pop()
            if op == '(':
                raise MismatchedParenthesisError("Unmatched '('")
            output.append(op)

        logger.debug(f"Postfix: {output}")
        return output


def to_postfix(tokens: List[str], symbols: SymbolTable) -> List[str]:
    """Convert infix tokens to a postfix sequence."""
    return PostfixConverter(symbols).convert(tokens)
