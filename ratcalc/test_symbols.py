import math

import pytest

from ratcalc.errors import FunctionApplicationError
from ratcalc.symbols import GlobalSymbolTable, Primitive, default_symbol_table


def test_lookup_and_callable():
    table = GlobalSymbolTable()
    table.bind('answer', 42)
    prim = table.define_function('inc', 1, lambda x: x + 1)
    assert table.lookup('inc') is prim
    assert isinstance(prim, Primitive)
    assert table.is_callable(prim)
    assert table.required_argument_count(prim) == 1
    assert not table.is_callable(table.lookup('answer'))
    assert table.lookup('missing') is None
    assert table.names() == ['answer', 'inc']


def test_negative_arity_rejected():
    with pytest.raises(ValueError):
        GlobalSymbolTable().define_function('bad', -1, lambda: 0)


def test_apply_checks_argument_count():
    table = GlobalSymbolTable()
    prim = table.define_function('add', 2, lambda a, b: a + b)
    assert table.apply(prim, [1.0, 2.5]) == 3.5
    with pytest.raises(FunctionApplicationError):
        table.apply(prim, [1.0])


def test_apply_wraps_domain_errors():
    table = default_symbol_table()
    with pytest.raises(FunctionApplicationError) as exc:
        table.apply(table.lookup('sqrt'), [-1.0])
    assert exc.value.name == 'sqrt'
    with pytest.raises(FunctionApplicationError):
        table.apply(table.lookup('exp'), [1000.0])


def test_apply_rejects_non_numeric_results():
    table = GlobalSymbolTable()
    prim = table.define_function('yes', 0, lambda: True)
    with pytest.raises(FunctionApplicationError):
        table.apply(prim, [])


def test_default_table_contents():
    table = default_symbol_table()
    assert table.lookup('CONSTANT') == 42.0
    assert table.apply(table.lookup('fact'), [5.0]) == 120.0
    assert table.apply(table.lookup('fact'), [3.9]) == 6.0
    assert table.apply(table.lookup('fact'), [0.0]) == 1.0
    assert table.apply(table.lookup('max'), [1.0, 2.0]) == 2.0
    assert math.isclose(table.apply(table.lookup('sin'), [0.0]), 0.0)
    assert table.apply(table.lookup('floor'), [2.7]) == 2.0
