"""配置文件"""

# 表达式求值参数
EVALUATOR_CONFIG = {
    "allow_partial": True,  # 栈中残留多个值时相乘作为结果（如 2(3) -> 6）
    "strict_nesting": True,  # 括号深度不能为负，")(" 视为非法
    "cache_size": 1000,  # ExpressionEvaluator 的LRU缓存大小，0表示不缓存
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(EVALUATOR_CONFIG["allow_partial"], bool), "allow_partial 必须是布尔值"
    assert isinstance(EVALUATOR_CONFIG["strict_nesting"], bool), "strict_nesting 必须是布尔值"
    assert EVALUATOR_CONFIG["cache_size"] >= 0, "cache_size 不能为负"
    return True
