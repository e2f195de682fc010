"""core/token_system.py"""
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class TermType(Enum):
    NUMBER = "number"  # 数字
    OPERATOR = "operator"  # 操作符
    OPEN_PAREN = "open_paren"  # (
    CLOSE_PAREN = "close_paren"  # )
    UNKNOWN = "unknown"  # 不属于表达式语言的字符，交给校验器拒绝


@dataclass(frozen=True)
class Term:
    type: TermType
    text: str
    value: Optional[float] = None

    @classmethod
    def number(cls, text):
        """数字Term；文本无法解析时 value 为 None，错误推迟到校验阶段"""
        try:
            value = float(text)
        except ValueError:
            value = None
        return cls(TermType.NUMBER, text, value)

    @classmethod
    def operator(cls, symbol):
        return cls(TermType.OPERATOR, symbol)

    @classmethod
    def paren(cls, symbol):
        if symbol == '(':
            return cls(TermType.OPEN_PAREN, symbol)
        return cls(TermType.CLOSE_PAREN, symbol)

    @classmethod
    def unknown(cls, text):
        return cls(TermType.UNKNOWN, text)

    @property
    def is_number(self):
        return self.type == TermType.NUMBER

    def __str__(self):
        if self.type == TermType.NUMBER and self.value is not None:
            return repr(self.value)
        return self.text


@dataclass(frozen=True)
class OperatorSpec:
    symbol: str
    name: str  # Operators 中对应的方法名
    precedence: int  # 越大结合越紧


# 操作符定义字典（同一优先级从左到右结合，包括 ^）
OPERATOR_DEFINITIONS = {
    '-': OperatorSpec('-', 'sub', 0),
    '+': OperatorSpec('+', 'add', 0),
    '%': OperatorSpec('%', 'mod', 1),
    '/': OperatorSpec('/', 'div', 2),
    '*': OperatorSpec('*', 'mul', 2),
    '^': OperatorSpec('^', 'pow', 3),
}

NUMBER_CHARS = frozenset('0123456789.')
SIGN_CHARS = frozenset('+-')
PAREN_CHARS = frozenset('()')


def is_operator(symbol):
    return symbol in OPERATOR_DEFINITIONS


def format_terms(terms):
    """把Term序列格式化成 [a, b, c] 便于日志输出"""
    return '[' + ', '.join(str(t) for t in terms) + ']'


class Tokenizer:
    """逐字符扫描，把中缀字符串切分成Term序列"""

    @staticmethod
    def tokenize(expression: str) -> List[Term]:
        """
        区分加减号与正负号：紧跟数字之后的 +/- 是二元操作符，
        否则并入下一个数字作为符号前缀，例如 1++2 -> [1, +, +2]，2--1 -> [2, -, -1]
        Args:
            expression: 中缀表达式字符串
        Returns:
            Term列表（本身从不抛异常）
        """
        terms = []
        current = []  # 正在累积的数字字符
        previous_was_digit = False

        for ch in expression:
            if ch in NUMBER_CHARS:
                current.append(ch)
                previous_was_digit = True
                continue

            if ch in SIGN_CHARS:
                if previous_was_digit:
                    Tokenizer._flush(current, terms)
                    terms.append(Term.operator(ch))
                else:
                    current.append(ch)
            else:
                Tokenizer._flush(current, terms)
                if ch in OPERATOR_DEFINITIONS:
                    terms.append(Term.operator(ch))
                elif ch in PAREN_CHARS:
                    terms.append(Term.paren(ch))
                else:
                    terms.append(Term.unknown(ch))
            previous_was_digit = False

        Tokenizer._flush(current, terms)
        return terms

    @staticmethod
    def _flush(current, terms):
        """把累积的数字写入terms；单独的 '-' 视为 -1"""
        if not current:
            return
        text = ''.join(current)
        if text == '-':
            text = '-1'
        terms.append(Term.number(text))
        current.clear()


class InfixValidator:

    @staticmethod
    def validate(terms, strict_nesting=True) -> bool:
        """
        检查中缀Term序列：括号数量相等，且非操作符/括号的Term都是合法数字。
        strict_nesting=True 时还要求括号深度从不为负（")(" 不合法）
        """
        opening = 0
        closing = 0

        for term in terms:
            if term.type == TermType.OPEN_PAREN:
                opening += 1
            elif term.type == TermType.CLOSE_PAREN:
                closing += 1
                if strict_nesting and closing > opening:
                    logger.debug("Closing parenthesis without matching opening one")
                    return False
            elif term.type == TermType.OPERATOR and is_operator(term.text):
                continue
            elif term.type == TermType.NUMBER and term.value is not None:
                continue
            else:
                logger.debug(f"Invalid term: {term.text!r}")
                return False

        return opening == closing
