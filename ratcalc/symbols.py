"""Host symbol table consulted by the converter and the evaluator.

The pipeline only relies on the abstract SymbolTable interface. GlobalSymbolTable
is an in-memory host with a few registered primitives.
"""

import logging
import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from ratcalc.errors import FunctionApplicationError

logger = logging.getLogger(__name__)


class SymbolTable(ABC):
    """
    Read-only view of a host environment's global symbols
    """
    @abstractmethod
    def lookup(self, name: str) -> Optional[Any]:
        """
        Resolve a name to a handle

        Returns:
            The handle bound to `name`, or None if the name is unbound
        """
        pass

    @abstractmethod
    def is_callable(self, handle: Any) -> bool:
        pass

    @abstractmethod
    def required_argument_count(self, handle: Any) -> int:
        pass

    @abstractmethod
    def apply(self, handle: Any, args: Sequence[float]) -> float:
        """
        Invoke a callable handle

        Args:
            handle: A handle for which is_callable() is true
            args: Arguments in left-to-right call order

        Returns:
            The function's result as a float
        """
        pass


@dataclass
class Primitive:
    """A host function with a fixed arity."""
    name: str
    arity: int
    impl: Callable[..., Any]

    def __repr__(self) -> str:
        return f"<primitive {self.name}/{self.arity}>"


class GlobalSymbolTable(SymbolTable):
    """In-memory symbol table mapping names to primitives or plain values."""

    def __init__(self):
        self._bindings: Dict[str, Any] = {}

    def define_function(self, name: str, arity: int, impl: Callable[..., Any]) -> Primitive:
        if arity < 0:
            raise ValueError(f"arity must be non-negative, got {arity}")
        primitive = Primitive(name, arity, impl)
        self._bindings[name] = primitive
        logger.debug(f"Defined primitive {primitive!r}")
        return primitive

    def bind(self, name: str, value: Any) -> None:
        self._bindings[name] = value
        logger.debug(f"Bound {name} = {value!r}")

    def names(self) -> List[str]:
        return sorted(self._bindings)

    def lookup(self, name: str) -> Optional[Any]:
        return self._bindings.get(name)

    def is_callable(self, handle: Any) -> bool:
        return isinstance(handle, Primitive)

    def required_argument_count(self, handle: Any) -> int:
        return handle.arity

    def apply(self, handle: Any, args: Sequence[float]) -> float:
        if len(args) != handle.arity:
            raise FunctionApplicationError(
                handle.name, f"expected {handle.arity} arguments, got {len(args)}")
        try:
            result = handle.impl(*args)
        except FunctionApplicationError:
            raise
        except (ValueError, OverflowError, ZeroDivisionError, TypeError) as e:
            raise FunctionApplicationError(handle.name, str(e)) from e
        if isinstance(result, bool) or not isinstance(result, numbers.Real):
            raise FunctionApplicationError(
                handle.name, f"expected a numeric result, got {type(result).__name__}")
        return float(result)


# --------------------------
# Default primitives
# --------------------------

def _fact(x: float) -> float:
    """Factorial of the truncated argument; non-positive arguments give 1."""
    n = int(x)
    f = 1
    for i in range(1, n + 1):
        f *= i
    return float(f)


def default_symbol_table() -> GlobalSymbolTable:
    """Return a symbol table preloaded with the standard primitives."""
    table = GlobalSymbolTable()
    table.bind('CONSTANT', 42.0)
    table.define_function('fact', 1, _fact)
    table.define_function('sqrt', 1, math.sqrt)
    table.define_function('sin', 1, math.sin)
    table.define_function('cos', 1, math.cos)
    table.define_function('tan', 1, math.tan)
    table.define_function('exp', 1, math.exp)
    table.define_function('log', 1, math.log)
    table.define_function('abs', 1, abs)
    table.define_function('floor', 1, math.floor)
    table.define_function('ceil', 1, math.ceil)
    table.define_function('min', 2, min)
    table.define_function('max', 2, max)
    table.define_function('pow', 2, math.pow)
    return table
