"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TokenType, tokenize
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(expression):
        """
        单遍扫描 + 值栈求值后缀表达式。
        Args:
            expression: 后缀字符串，每个字符是一位数字或 + - * /
        Returns:
            float结果；除以0得到 inf/nan，不抛异常
        Raises:
            ValueError: 未知字符、操作数不足、或结束时栈中不止一个值。
                这些属于调用方的前置条件（应先经过 RPNValidator），这里只报错不修补。
        """
        stack = []

        for token in tokenize(expression):
            if token.type == TokenType.OPERAND:
                stack.append(token.value)
                continue

            if len(stack) < 2:
                logger.error(f"Insufficient operands for {token.name} in {expression!r}")
                raise ValueError(f"insufficient operands for {token.name!r}")

            # 先弹出的是右操作数
            second = stack.pop()
            first = stack.pop()
            stack.append(Operators.apply(token.name, first, second))

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1: {expression!r}")
            raise ValueError(f"expected exactly one value on the stack, got {len(stack)}")

        return float(stack[0])
