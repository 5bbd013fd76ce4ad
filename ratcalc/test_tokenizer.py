import pytest

from ratcalc.tokenizer import is_identifier, is_number, is_operand, is_operator, tokenize


def test_tokenize_simple_expression():
    assert tokenize("1+2*3") == ['1', '+', '2', '*', '3']


def test_tokenize_decimals_and_parentheses():
    assert tokenize(" (1.25 + 3)/ 4 ") == ['(', '1.25', '+', '3', ')', '/', '4']


def test_double_star_is_one_token():
    assert tokenize("2**3*4") == ['2', '**', '3', '*', '4']
    assert tokenize("2 ** 3") == ['2', '**', '3']


def test_function_call_tokens():
    assert tokenize("max(1,2)") == ['max', '(', '1', ',', '2', ')']
    assert tokenize("log2(8)") == ['log2', '(', '8', ')']


def test_comparison_operators():
    assert tokenize("1<2>0") == ['1', '<', '2', '>', '0']


def test_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_unknown_characters_pass_through():
    assert tokenize("1 @ 2") == ['1', '@', '2']
    assert tokenize("3 % 2") == ['3', '%', '2']


@pytest.mark.parametrize("token,expected", [
    ('**', True), ('+', True), ('<', True), ('(', False), ('x', False), ('***', False),
])
def test_is_operator(token, expected):
    assert is_operator(token) is expected


def test_operand_and_identifier_predicates():
    assert is_operand('12') and is_number('12')
    assert is_operand('1.5') and is_number('1.5')
    assert is_operand('1x') and not is_number('1x')
    assert not is_operand('x1')
    assert is_identifier('x1') and is_identifier('_f')
    assert not is_identifier('1x')
