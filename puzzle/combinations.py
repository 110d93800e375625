"""puzzle/combinations.py"""
import logging

from config.config import PUZZLE_CONFIG, COMBINATION_CONFIG

logger = logging.getLogger(__name__)

IMPOSSIBLE_COMBINATIONS = frozenset(COMBINATION_CONFIG["impossible_combinations"])


def extract_digits(expression):
    """按出现顺序提取1-9的数字（0和其他字符忽略）"""
    return [int(char) for char in expression if char in PUZZLE_CONFIG["allowed_digits"]]


def combination_key(digits):
    """排序后拼成字符串，如 [8, 1, 5, 1] -> "1158" """
    return "".join(str(d) for d in sorted(digits))


def is_impossible_combination(digits):
    """这4个数字无论怎么排列都凑不出10"""
    if len(digits) != PUZZLE_CONFIG["num_operands"]:
        return False
    if any(not 1 <= d <= 9 for d in digits):
        logger.warning(f"Digits out of range 1-9: {digits}")
        return False
    return combination_key(digits) in IMPOSSIBLE_COMBINATIONS
