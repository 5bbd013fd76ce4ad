"""Exception hierarchy for the expression pipeline.

Conversion-stage failures derive from ParseError, evaluation-stage failures from
EvalError. InvalidExpressionError is only produced by the outermost evaluation
boundary when an unexpected fault is recovered.
"""


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class ConfigError(CalculatorError):
    """Raised when settings cannot be loaded or validated."""
    pass


# --------------------------
# Numeric conversion
# --------------------------

class IntegerOverflowError(CalculatorError, OverflowError):
    """Raised when a truncated rational does not fit the target integer width."""
    pass


# --------------------------
# Conversion (infix -> postfix)
# --------------------------

class ParseError(CalculatorError):
    """Raised for errors while converting infix tokens to postfix."""
    pass


class UnknownSymbolError(ParseError):
    """Raised when an identifier is not present in the symbol table."""

    def __init__(self, name: str):
        super().__init__(f"Unknown symbol: {name}")
        self.name = name


class NotAFunctionError(ParseError):
    """Raised when an identifier resolves to a symbol that is not callable."""

    def __init__(self, name: str):
        super().__init__(f"Symbol is not a function: {name}")
        self.name = name


class MismatchedParenthesisError(ParseError):
    """Raised for a ')' without a matching '(', or the reverse."""
    pass


class MissingArgumentListError(ParseError):
    """Raised when a function name is never followed by '(' ... ')'."""

    def __init__(self, name: str):
        super().__init__(f"Function '{name}' must be followed by an argument list")
        self.name = name


# --------------------------
# Evaluation (postfix stack machine)
# --------------------------

class EvalError(CalculatorError):
    """Raised for errors during postfix evaluation."""
    pass


class UnknownTokenError(EvalError):
    """Raised for a postfix token that is neither operand, operator nor function."""

    def __init__(self, token: str):
        super().__init__(f"Unknown token: {token}")
        self.token = token


class MalformedOperandError(EvalError):
    """Raised when a token shaped like a number is not a valid literal."""

    def __init__(self, token: str):
        super().__init__(f"Unable to read numeric literal: {token}")
        self.token = token


class InsufficientOperandsError(EvalError):
    """Raised when the operand stack holds fewer values than an operator needs."""
    pass


class EvalArithmeticError(EvalError, ArithmeticError):
    """Raised for arithmetic failures such as division by zero."""
    pass


class NonFiniteValueError(EvalArithmeticError):
    """Raised when a value crossing the float boundary is not finite or does not fit a double."""
    pass


class NoResultError(EvalError):
    """Raised when evaluation leaves the operand stack empty."""
    pass


class ResidualOperandsError(EvalError):
    """Raised when more than one value is left after evaluation."""

    def __init__(self, depth: int):
        super().__init__(f"Expression left {depth} values on the stack, expected 1")
        self.depth = depth


class FunctionApplicationError(EvalError):
    """Raised when an external function fails or returns a non-numeric value."""

    def __init__(self, name: str, message: str):
        super().__init__(f"Error in function '{name}': {message}")
        self.name = name


# --------------------------
# Top-level boundary
# --------------------------

class InvalidExpressionError(CalculatorError):
    """Catch-all for unexpected faults, always naming the offending input."""

    def __init__(self, expression: str):
        super().__init__(f"Invalid Expression: {expression}")
        self.expression = expression
