import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.calculator import calculate, eval_rpn, infix_to_postfix

small = st.integers(min_value=0, max_value=1000)


def test_postfix_order():
    assert infix_to_postfix("1+2*3") == ["1", "2", "3", "*", "+"]


def test_postfix_drops_parentheses():
    assert infix_to_postfix("(1+2)*3") == ["1", "2", "+", "3", "*"]


@given(small, small)
def test_addition_and_product(a, b):
    assert calculate(f"{a} + {b}") == a + b
    assert calculate(f"{a}*{b}") == a * b


@given(small, small, small)
def test_precedence(a, b, c):
    assert calculate(f"{a}-{b}*{c}") == a - b * c
    assert calculate(f"({a}-{b})*{c}") == (a - b) * c


@given(small, small, small, st.sampled_from("+-*"), st.sampled_from("+-*"))
def test_direct_and_postfix_agree(a, b, c, op1, op2):
    expr = f"{a}{op1}({b}{op2}{c})"
    assert calculate(expr) == eval_rpn(infix_to_postfix(expr))


def test_leading_minus():
    assert calculate("-2+3") == 1


@given(small, st.integers(min_value=1, max_value=50))
def test_division_truncates(a, b):
    assert calculate(f"{a}/{b}") == a // b
    assert eval_rpn([str(-a), str(b), "/"]) == -(a // b)


def test_rpn_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -3


@pytest.mark.parametrize("expr", ["", "1+a", "(1+2))", "(1+2", "+"])
def test_malformed_expressions(expr):
    with pytest.raises(ValueError):
        calculate(expr)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("1/0")


@pytest.mark.parametrize("tokens", [["+"], ["x"], []])
def test_bad_rpn(tokens):
    with pytest.raises(ValueError):
        eval_rpn(tokens)