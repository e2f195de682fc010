"""核心模块 - Term系统、中缀转后缀、RPN求值器和操作符"""
from .errors import InvalidExpression, MalformedPostfix, UnknownOperator
from .token_system import (
    TermType, Term, OperatorSpec, OPERATOR_DEFINITIONS,
    Tokenizer, InfixValidator, format_terms
)
from .postfix_converter import PostfixConverter
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'InvalidExpression', 'MalformedPostfix', 'UnknownOperator',
    'TermType', 'Term', 'OperatorSpec', 'OPERATOR_DEFINITIONS',
    'Tokenizer', 'InfixValidator', 'format_terms',
    'PostfixConverter', 'RPNEvaluator', 'Operators'
]
