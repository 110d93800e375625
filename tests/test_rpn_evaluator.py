import math

import pytest

from core import RPNEvaluator, Operators


@pytest.mark.parametrize("expression, expected", [
    ("12+34+*", 21.0),
    ("1234+++", 10.0),
    ("19+22/*", 10.0),
    ("11+8+8*", 80.0),
    ("19+5-5*", 25.0),
    ("12-34*+", 11.0),
    ("39*1-7*", 182.0),
    ("7", 7.0),
])
def test_evaluate(expression, expected):
    assert RPNEvaluator.evaluate(expression) == expected


def test_operand_order_for_non_commutative_operators():
    assert RPNEvaluator.evaluate("92-") == 7.0
    assert RPNEvaluator.evaluate("29-") == -7.0
    assert RPNEvaluator.evaluate("82/") == 4.0
    assert RPNEvaluator.evaluate("28/") == 0.25


def test_real_division():
    assert RPNEvaluator.evaluate("34+5/") == pytest.approx(1.4)
    assert RPNEvaluator.evaluate("8115/-/") == pytest.approx(10.0, abs=1e-9)


def test_division_by_zero_is_not_an_exception():
    assert RPNEvaluator.evaluate("911-/") == math.inf
    assert math.isnan(RPNEvaluator.evaluate("11-11-/"))
    # 2 / (3 / 0) = 2 / inf = 0
    assert RPNEvaluator.evaluate("2311-//") == 0.0


def test_zero_digit_is_evaluated():
    assert RPNEvaluator.evaluate("50-") == 5.0


@pytest.mark.parametrize("expression", ["12", "1+", "+", "12+3", "12^"])
def test_precondition_violations_raise(expression):
    with pytest.raises(ValueError):
        RPNEvaluator.evaluate(expression)


def test_evaluate_is_idempotent():
    assert RPNEvaluator.evaluate("8115/-/") == RPNEvaluator.evaluate("8115/-/")


def test_operators_apply():
    assert Operators.apply('+', 2, 3) == 5.0
    assert Operators.apply('-', 2, 3) == -1.0
    assert Operators.apply('*', 2, 3) == 6.0
    assert Operators.apply('/', 3, 2) == 1.5
    assert Operators.apply('/', -1, 0) == -math.inf
    with pytest.raises(ValueError):
        Operators.apply('%', 3, 2)
