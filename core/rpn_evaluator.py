"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import MalformedPostfix, UnknownOperator
from core.token_system import TermType, OPERATOR_DEFINITIONS, format_terms
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀表达式的值"""

    @staticmethod
    def evaluate(postfix, allow_partial=True):
        """
        评估后缀Term序列
        Args:
            postfix: 后缀Term序列
            allow_partial: 栈中剩余多个值时是否把它们相乘作为结果，
                否则抛出 MalformedPostfix
        Returns:
            float结果
        """
        stack = []

        for term in postfix:
            if term.type == TermType.NUMBER:
                if term.value is None:
                    raise MalformedPostfix(f"Unparsable number {term.text!r}")
                stack.append(term.value)
                continue

            if term.type != TermType.OPERATOR:
                raise MalformedPostfix(f"Unexpected term {term.text!r} in postfix sequence")

            definition = OPERATOR_DEFINITIONS.get(term.text)
            op_method = getattr(Operators, definition.name, None) if definition else None
            if op_method is None:
                raise UnknownOperator(term.text)

            if len(stack) < 2:
                raise MalformedPostfix(f"Insufficient operands for {term.text}")
            second = stack.pop()
            first = stack.pop()
            stack.append(op_method(first, second))

        if len(stack) == 0:
            raise MalformedPostfix("Empty stack after evaluation")
        if len(stack) == 1:
            return float(stack[0])

        if not allow_partial:
            raise MalformedPostfix(f"Stack has {len(stack)} elements after evaluation, expected 1")
        logger.debug(f"Partial expression with {len(stack)} stack elements, "
                     f"multiplying them: {format_terms(postfix)}")
        return float(Operators.product(stack))
