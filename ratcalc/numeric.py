"""Conversions between exact rationals and machine numbers.

Integers are truncated toward zero. Floats are produced from a fixed number of
decimal places and read back through their shortest round-trip text.
"""

import math
import sys
from fractions import Fraction

from ratcalc.errors import IntegerOverflowError, NonFiniteValueError

DEFAULT_FLOAT_DIGITS = 10
DEFAULT_INTEGER_BITS = 64

_FLOAT_MAX = Fraction(sys.float_info.max)

# Below the interpreter's int <-> str digit limit (4300 by default on 3.11+).
_CHUNK_DIGITS = 4000
_CHUNK_LIMIT = 10 ** _CHUNK_DIGITS


def _int_to_str(n: int) -> str:
    """str(n) for integers of any size."""
    if n < 0:
        return '-' + _int_to_str(-n)
    if n < _CHUNK_LIMIT:
        return str(n)
    k = int(n.bit_length() * 0.30103) // 2
    high, low = divmod(n, 10 ** k)
    return _int_to_str(high) + _int_to_str(low).zfill(k)


def _str_to_int(digits: str) -> int:
    """int(digits) for digit strings of any length."""
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    mid = len(digits) // 2
    return _str_to_int(digits[:mid]) * 10 ** (len(digits) - mid) + _str_to_int(digits[mid:])


def parse_rational(text: str) -> Fraction:
    """Read a decimal literal such as `12` or `1.25` exactly."""
    whole, _, frac = text.partition('.')
    return Fraction(_str_to_int(whole + frac), 10 ** len(frac))


def rational_to_bigint(r: Fraction) -> int:
    """Truncate toward zero. Always succeeds."""
    return math.trunc(r)


def rational_to_int(r: Fraction, bits: int = DEFAULT_INTEGER_BITS) -> int:
    """Truncate toward zero and check the result fits a signed `bits`-wide integer."""
    value = rational_to_bigint(r)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise IntegerOverflowError(f"Value does not fit in {bits}-bit integer")
    return value


def _decimal_string(r: Fraction, digits: int) -> str:
    # Round half away from zero at the last fractional digit.
    scale = 10 ** digits
    scaled = abs(r) * scale
    units, remainder = divmod(scaled.numerator, scaled.denominator)
    if 2 * remainder >= scaled.denominator:
        units += 1
    sign = '-' if r < 0 and units else ''
    whole, frac = divmod(units, scale)
    if digits == 0:
        return f"{sign}{_int_to_str(whole)}"
    return f"{sign}{_int_to_str(whole)}.{frac:0{digits}d}"


def rational_to_float(r: Fraction, digits: int = DEFAULT_FLOAT_DIGITS) -> float:
    """Render to `digits` decimal places and parse as a float.

    Precision beyond `digits` fractional digits is lost on purpose.
    """
    if abs(r) > _FLOAT_MAX:
        raise NonFiniteValueError("Value is too large to convert to float")
    text = _decimal_string(r, digits)
    value = float(text)
    if not math.isfinite(value):
        raise NonFiniteValueError("Value is too large to convert to float")
    return value


def float_to_rational(f: float) -> Fraction:
    """Parse the shortest round-trip text of `f` as an exact rational."""
    if not math.isfinite(f):
        raise NonFiniteValueError(f"Cannot convert non-finite value {f!r} to a rational")
    return Fraction(repr(float(f)))


def format_rational(r: Fraction) -> str:
    """Render as numerator/denominator, e.g. 7/1. Works for any size."""
    return f"{_int_to_str(r.numerator)}/{_int_to_str(r.denominator)}"
