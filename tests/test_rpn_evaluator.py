import math

import pytest

from core import (
    Term, RPNEvaluator, Operators, MalformedPostfix, UnknownOperator, InvalidExpression
)


def _num(x):
    return Term.number(str(x))


def _op(symbol):
    return Term.operator(symbol)


def test_operand_order():
    assert RPNEvaluator.evaluate([_num(7), _num(2), _op('-')]) == 5.0
    assert RPNEvaluator.evaluate([_num(8), _num(2), _op('/')]) == 4.0
    assert RPNEvaluator.evaluate([_num(2), _num(10), _op('^')]) == 1024.0


def test_result_is_python_float():
    result = RPNEvaluator.evaluate([_num(1), _num(2), _op('+')])
    assert type(result) is float


def test_ieee_semantics():
    assert RPNEvaluator.evaluate([_num(1), _num(0), _op('/')]) == math.inf
    assert RPNEvaluator.evaluate([_num(-1), _num(0), _op('/')]) == -math.inf
    assert math.isnan(RPNEvaluator.evaluate([_num(0), _num(0), _op('/')]))
    assert math.isnan(RPNEvaluator.evaluate([_num(1), _num(0), _op('%')]))
    assert RPNEvaluator.evaluate([_num(10), _num(400), _op('^')]) == math.inf


def test_modulo_sign_follows_dividend():
    assert Operators.mod(-7.0, 3.0) == -1.0
    assert Operators.mod(7.0, -3.0) == 1.0
    assert Operators.mod(5.5, 2.0) == 1.5


def test_leftover_stack_is_multiplied():
    postfix = [_num(2), _num(3), _num(4)]
    assert RPNEvaluator.evaluate(postfix) == 24.0
    with pytest.raises(MalformedPostfix):
        RPNEvaluator.evaluate(postfix, allow_partial=False)


def test_insufficient_operands():
    with pytest.raises(MalformedPostfix):
        RPNEvaluator.evaluate([_num(1), _op('+')])


def test_empty_postfix():
    with pytest.raises(MalformedPostfix):
        RPNEvaluator.evaluate([])


def test_unknown_operator():
    with pytest.raises(UnknownOperator) as excinfo:
        RPNEvaluator.evaluate([_num(1), _num(2), _op('&')])
    assert excinfo.value.symbol == '&'
    assert isinstance(excinfo.value, InvalidExpression)


def test_parenthesis_in_postfix_is_malformed():
    with pytest.raises(MalformedPostfix):
        RPNEvaluator.evaluate([_num(1), Term.paren('(')])
