"""表达式求值模块"""
from .evaluator import ExpressionEvaluator, evaluate

__all__ = ['ExpressionEvaluator', 'evaluate']
