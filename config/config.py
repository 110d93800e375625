"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 谜题参数
PUZZLE_CONFIG = {
    "num_operands": 4,  # 4个数字
    "num_operators": 3,  # 3个二元操作符
    "expression_length": 7,
    "allowed_digits": "123456789",  # 不允许0
    "operators": "+-*/",
    "target": 10,
    "tolerance": 1e-9,  # 链式除法累积的浮点误差
}

# 输出字符串（对外契约，不可修改大小写/标点）
RESULT_MESSAGES = {
    "invalid": "Invalid input",
    "not_integer": "Not an integer",
    "not_target": "Not 10",
    "target": "10",
}

# 骨架占位符
SKELETON_CONFIG = {
    "operand_symbol": "x",
    "operator_symbol": "o",
    "unknown_symbol": "?",
}

# 中缀转后缀参数
ENCODER_CONFIG = {
    "precedence": {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
    },
}

# 无法凑出10的数字组合（已排序）
COMBINATION_CONFIG = {
    "impossible_combinations": [
        "1111", "1112", "1113", "1122", "1159", "1169", "1177", "1178", "1179", "1188",
        "1399", "1444", "1499", "1666", "1667", "1677", "1699", "1777", "2257", "3444",
        "3669", "3779", "3999", "4444", "4459", "4477", "4558", "4899", "4999", "5668",
        "5788", "5799", "5899", "6666", "6667", "6677", "6777", "6778", "6888", "6899",
        "6999", "7777", "7788", "7789", "7799", "7888", "7999", "8899",
    ],
}

# 命令行参数
CLI_CONFIG = {
    "output_path": "check_results.csv",
    "log_level": "WARNING",
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert PUZZLE_CONFIG["num_operators"] == PUZZLE_CONFIG["num_operands"] - 1, "二元操作符数量必须比操作数少1"
    assert PUZZLE_CONFIG["expression_length"] == (
        PUZZLE_CONFIG["num_operands"] + PUZZLE_CONFIG["num_operators"]
    ), "表达式长度必须等于操作数与操作符数量之和"
    assert "0" not in PUZZLE_CONFIG["allowed_digits"], "数字只能是1-9"
    assert set(ENCODER_CONFIG["precedence"]) == set(PUZZLE_CONFIG["operators"]), "优先级表必须覆盖全部操作符"
    assert len(set(RESULT_MESSAGES.values())) == len(RESULT_MESSAGES), "输出字符串不能重复"
    for combo in COMBINATION_CONFIG["impossible_combinations"]:
        assert len(combo) == PUZZLE_CONFIG["num_operands"] and combo == "".join(sorted(combo)), \
            f"组合必须是已排序的4位数字: {combo}"
    logger.info("Configuration validated successfully!")
