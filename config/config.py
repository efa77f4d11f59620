"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 词法分析参数
TOKENIZER_CONFIG = {
    "conflict_policy": "strict",  # strict: 同一位置多个匹配直接报错；priority: 按优先级取一个
    "reject_unknown_characters": True,  # 未被任何规则覆盖的字符视为语法错误
}

# 调度场(shunting-yard)参数
PARSER_CONFIG = {
    "respect_associativity": False,  # False 时 ^ 为左结合（2^3^2 = 64）
}

# 求根参数
ROOT_FINDER_CONFIG = {
    "max_iterations": 100,
    "tolerance": 1e-10,  # |f(m)| <= tolerance 即停止
    "decimals": 10,  # 返回值保留的小数位
    "method": "regula_falsi",
}

# 采样/制表参数
SAMPLING_CONFIG = {
    "num_points": 201,
}

CONFLICT_POLICIES = ("strict", "priority")
ROOT_METHODS = ("regula_falsi", "bisection", "brentq")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert TOKENIZER_CONFIG["conflict_policy"] in CONFLICT_POLICIES, "未知的冲突处理策略"
    assert ROOT_FINDER_CONFIG["max_iterations"] > 0, "迭代次数必须为正"
    assert ROOT_FINDER_CONFIG["tolerance"] > 0, "容差必须为正"
    assert ROOT_FINDER_CONFIG["decimals"] >= 0, "小数位不能为负"
    assert ROOT_FINDER_CONFIG["method"] in ROOT_METHODS, "未知的求根方法"
    assert SAMPLING_CONFIG["num_points"] >= 2, "采样点至少为2"
    logger.info("Configuration validated successfully!")
