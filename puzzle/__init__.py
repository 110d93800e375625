"""谜题模块 - 结果判定和数字组合"""
from .checker import PuzzleChecker, ResultType, classify_result
from .combinations import (
    IMPOSSIBLE_COMBINATIONS, extract_digits, combination_key, is_impossible_combination
)

__all__ = [
    'PuzzleChecker', 'ResultType', 'classify_result',
    'IMPOSSIBLE_COMBINATIONS', 'extract_digits', 'combination_key', 'is_impossible_combination'
]
