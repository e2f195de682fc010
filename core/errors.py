"""core/errors.py - 表达式求值的异常类型"""


class InvalidExpression(ValueError):
    """表达式不合法（括号不匹配、无法解析的数字或字符）"""

    def __init__(self, msg, expression=None):
        super().__init__(msg)
        self.msg = msg
        self.expression = expression

    def __str__(self):
        if self.expression is None:
            return self.msg
        return '%s: %r' % (self.msg, self.expression)


class MalformedPostfix(InvalidExpression):
    """后缀序列结构错误：操作数不足、括号嵌套错误、空栈"""


class UnknownOperator(InvalidExpression):
    """求值时遇到操作符表中不存在的符号"""

    def __init__(self, symbol, expression=None):
        super().__init__('Unknown operator %r' % (symbol,), expression)
        self.symbol = symbol
