import logging
import threading
from collections import OrderedDict
from typing import Optional

from config.config import EVALUATOR_CONFIG
from core import (
    Tokenizer, InfixValidator, PostfixConverter, RPNEvaluator,
    InvalidExpression, format_terms
)

logger = logging.getLogger(__name__)


def evaluate(expression: str, allow_partial: Optional[bool] = None,
             strict_nesting: Optional[bool] = None) -> float:
    """
    计算中缀表达式的值：分词 -> 校验 -> 转后缀 -> 求值
    Args:
        expression: 例如 "3+4*(2-1)"
        allow_partial: None 时读取 EVALUATOR_CONFIG
        strict_nesting: None 时读取 EVALUATOR_CONFIG
    Returns:
        float结果（除零等返回inf/nan）
    Raises:
        InvalidExpression: 表达式不合法（MalformedPostfix/UnknownOperator 是其子类）
    """
    if allow_partial is None:
        allow_partial = EVALUATOR_CONFIG["allow_partial"]
    if strict_nesting is None:
        strict_nesting = EVALUATOR_CONFIG["strict_nesting"]

    infix = Tokenizer.tokenize(expression)
    if not InfixValidator.validate(infix, strict_nesting=strict_nesting):
        logger.warning(f"Invalid expression: {expression[:50]!r}")
        raise InvalidExpression("Invalid Expression", expression)
    logger.debug(f"Infix: {format_terms(infix)}")

    try:
        postfix = PostfixConverter.to_postfix(infix)
        logger.debug(f"Postfix: {format_terms(postfix)}")
        return RPNEvaluator.evaluate(postfix, allow_partial=allow_partial)
    except InvalidExpression as e:
        if e.expression is None:
            e.expression = expression
        raise


class ExpressionEvaluator:

    def __init__(self, cache_size=None, allow_partial=None, strict_nesting=None):
        self.cache_size = EVALUATOR_CONFIG["cache_size"] if cache_size is None else cache_size
        self.allow_partial = EVALUATOR_CONFIG["allow_partial"] if allow_partial is None else allow_partial
        self.strict_nesting = EVALUATOR_CONFIG["strict_nesting"] if strict_nesting is None else strict_nesting
        # 使用有限大小的OrderedDict实现LRU缓存
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0
        self._lock = threading.Lock()

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最旧的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        with self._lock:
            self._result_cache.clear()
            logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
            self._cache_hits = 0
            self._cache_misses = 0

    def cache_info(self):
        with self._lock:
            return {
                'hits': self._cache_hits,
                'misses': self._cache_misses,
                'size': len(self._result_cache),
                'max_size': self.cache_size,
            }

    def evaluate(self, expression: str) -> float:
        """求值，合法表达式的结果会被缓存；失败直接抛出，不缓存"""
        if self.cache_size <= 0:
            return self._evaluate_impl(expression)

        with self._lock:
            if expression in self._result_cache:
                # 移到末尾（最近使用）
                self._result_cache.move_to_end(expression)
                self._cache_hits += 1
                logger.debug(f"Cache hit for expression: {expression[:50]}...")
                return self._result_cache[expression]
            self._cache_misses += 1

        result = self._evaluate_impl(expression)

        with self._lock:
            self._result_cache[expression] = result
            self._manage_cache()
        return result

    def _evaluate_impl(self, expression):
        return evaluate(expression, allow_partial=self.allow_partial,
                        strict_nesting=self.strict_nesting)
