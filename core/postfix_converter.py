"""中缀 -> 后缀（调度场算法）"""
from core.errors import MalformedPostfix
from core.token_system import TermType, OPERATOR_DEFINITIONS


class PostfixConverter:

    @staticmethod
    def to_postfix(terms):
        """
        把已通过校验的中缀Term序列转换成后缀（RPN）序列
        Args:
            terms: 中缀Term序列
        Returns:
            后缀Term列表
        """
        stack = []  # 操作符和左括号
        output = []

        for term in terms:
            if term.type == TermType.NUMBER:
                output.append(term)

            elif term.type == TermType.OPERATOR:
                precedence = OPERATOR_DEFINITIONS[term.text].precedence
                # 栈顶操作符结合得不比当前弱时先出栈（左结合）
                while (stack and stack[-1].type == TermType.OPERATOR
                       and OPERATOR_DEFINITIONS[stack[-1].text].precedence >= precedence):
                    output.append(stack.pop())
                stack.append(term)

            elif term.type == TermType.OPEN_PAREN:
                stack.append(term)

            elif term.type == TermType.CLOSE_PAREN:
                while True:
                    if not stack:
                        raise MalformedPostfix("Unmatched closing parenthesis")
                    top = stack.pop()
                    if top.type == TermType.OPEN_PAREN:
                        break
                    output.append(top)

            else:
                raise MalformedPostfix(f"Unexpected term {term.text!r} in infix sequence")

        while stack:
            top = stack.pop()
            if top.type == TermType.OPEN_PAREN:
                raise MalformedPostfix("Unmatched opening parenthesis")
            output.append(top)

        return output
