"""Splits an expression string into token strings.

Tokens stay plain strings; the predicates below classify them each time a
stage consumes one.
"""

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# Multi-character operators must precede their single-character prefixes.
OPERATORS = ('**', '+', '-', '*', '/', '<', '>')
STRUCTURAL = ('(', ')', ',')

_NUMBER_RX = re.compile(r'\d+(?:\.\d+)?')
_IDENT_RX = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
_SEPARATE_RX = re.compile(
    r'([A-Za-z_][A-Za-z0-9_]*|\d+(?:\.\d+)?|'
    + '|'.join(re.escape(op) for op in OPERATORS + STRUCTURAL)
    + r')'
)
_WHITESPACE_RX = re.compile(r'\s+')


def is_operator(token: str) -> bool:
    return token in OPERATORS


def is_operand(token: str) -> bool:
    """True for anything shaped like a numeric literal (starts with a digit)."""
    return token[:1].isdigit()


def is_number(token: str) -> bool:
    """True only for a well-formed numeric literal."""
    return _NUMBER_RX.fullmatch(token) is not None


def is_identifier(token: str) -> bool:
    return _IDENT_RX.fullmatch(token) is not None


def tokenize(expr: str) -> List[str]:
    """Return the non-empty tokens of `expr`.

    Unrecognised characters are passed through verbatim; later stages reject them.
    """
    spaced = _SEPARATE_RX.sub(r' \1 ', expr)
    stripped = _WHITESPACE_RX.sub(' ', spaced).strip()
    tokens = stripped.split(' ') if stripped else []
    logger.debug(f"Tokenized {expr!r} -> {tokens}")
    return tokens
