import pytest

from ratcalc.symbols import GlobalSymbolTable


@pytest.fixture
def symbols():
    """Small symbol table with one value and functions of arity 0, 1, 2 and 3."""
    table = GlobalSymbolTable()
    table.bind('CONSTANT', 42.0)
    table.define_function('zero', 0, lambda: 0.0)
    table.define_function('double', 1, lambda x: 2 * x)
    table.define_function('sub', 2, lambda a, b: a - b)
    table.define_function('mid', 3, lambda a, b, c: b)
    table.define_function('boom', 1, lambda x: 1 / 0)
    table.define_function('text', 1, lambda x: "not a number")
    return table


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when == "call":
        print(f"TEST: {item.name} - {'PASSED' if report.passed else 'FAILED'}")
