"""puzzle/checker.py - 判定后缀表达式能否凑出10"""
import logging
from enum import Enum

import numpy as np
import pandas as pd

from config.config import PUZZLE_CONFIG, RESULT_MESSAGES
from core import RPNDecoder, RPNEncoder, RPNEvaluator, RPNValidator

logger = logging.getLogger(__name__)


class ResultType(Enum):
    INVALID = RESULT_MESSAGES["invalid"]
    NOT_INTEGER = RESULT_MESSAGES["not_integer"]
    NOT_TARGET = RESULT_MESSAGES["not_target"]
    TARGET = RESULT_MESSAGES["target"]


def classify_result(value, target=PUZZLE_CONFIG["target"], tolerance=PUZZLE_CONFIG["tolerance"]):
    """
    取最近整数 n，|value - n| < tolerance 视为整数 n，否则不是整数。
    inf/nan 一律归为不是整数。
    """
    if not np.isfinite(value):
        return ResultType.NOT_INTEGER

    rounded = np.rint(value)
    if abs(value - rounded) >= tolerance:
        return ResultType.NOT_INTEGER
    return ResultType.TARGET if int(rounded) == target else ResultType.NOT_TARGET


class PuzzleChecker:
    """无状态：每次调用都只依赖输入"""

    @staticmethod
    def is_target(value):
        """严格判断结果是否等于10"""
        return bool(abs(value - PUZZLE_CONFIG["target"]) < PUZZLE_CONFIG["tolerance"])

    @staticmethod
    def check(line):
        """
        Args:
            line: 一行输入（允许带换行符和首尾空白）
        Returns:
            "Invalid input" / "Not an integer" / "Not 10" / "10" 之一
        """
        if not isinstance(line, str):
            return ResultType.INVALID.value
        expression = line.strip()

        if not RPNValidator.is_valid(expression):
            return ResultType.INVALID.value

        # 结构已校验，栈不会下溢，结束时恰好剩一个值
        value = RPNEvaluator.evaluate(expression)
        result = classify_result(value)
        logger.debug(f"{expression} -> {value!r} -> {result.value}")
        return result.value

    @staticmethod
    def evaluate_infix(infix):
        """
        中缀表达式 -> 后缀 -> 结构校验 -> 求值。
        Raises:
            ValueError: 非法字符、括号不匹配、多位数，或转换后的后缀不是4个数字3个操作符的合法形状
        """
        postfix = RPNEncoder.encode(infix)
        if not RPNValidator.is_valid(postfix):
            logger.error(f"Infix expression {infix!r} encodes to invalid postfix {postfix!r}")
            raise ValueError(f"not a valid make-10 expression: {infix!r}")
        return RPNEvaluator.evaluate(postfix)

    @staticmethod
    def check_infix(infix):
        """与 check 相同的四种输出，输入为中缀表达式"""
        if not isinstance(infix, str):
            return ResultType.INVALID.value
        try:
            value = PuzzleChecker.evaluate_infix(infix)
        except ValueError:
            return ResultType.INVALID.value
        return classify_result(value).value

    @staticmethod
    def check_batch(lines):
        """
        批量检查，返回 DataFrame，列为 expression, valid, value, result, infix。
        非法输入（包括非字符串）的 value 和 infix 为 NaN。
        """
        rows = []
        for line in lines:
            expression = line.strip() if isinstance(line, str) else line
            valid = RPNValidator.is_valid(expression)
            if valid:
                value = RPNEvaluator.evaluate(expression)
                result = classify_result(value)
                infix = RPNDecoder.decode(expression)
            else:
                value = np.nan
                result = ResultType.INVALID
                infix = np.nan
            rows.append({
                'expression': expression,
                'valid': valid,
                'value': value,
                'result': result.value,
                'infix': infix,
            })

        df = pd.DataFrame(rows, columns=['expression', 'valid', 'value', 'result', 'infix'])
        logger.info(f"Checked {len(df)} expressions, {int((df['result'] == ResultType.TARGET.value).sum())} make 10")
        return df
