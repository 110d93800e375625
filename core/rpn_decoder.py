"""core/rpn_decoder.py - 后缀表达式还原为中缀表达式"""
import logging

from core.token_system import TokenType, tokenize

logger = logging.getLogger(__name__)

# 含有这些字符的子式在某些位置需要加括号
ADDITIVE_SYMBOLS = ('+', '-')
# 左操作数需要括号的操作符
WRAP_LEFT_OPERATORS = ('*', '/')
# 右操作数需要括号的操作符
WRAP_RIGHT_OPERATORS = ('-', '*', '/')


def _contains_additive(expression):
    return any(symbol in expression for symbol in ADDITIVE_SYMBOLS)


class RPNDecoder:
    """把后缀表达式还原为最少括号的中缀表达式"""

    @staticmethod
    def wrap_operands(symbol, first, second):
        """
        括号规则：
        - 左操作数含 + 或 -，且当前操作符是 * 或 / 时加括号
        - 右操作数含 + 或 -，且当前操作符是 - * / 时加括号
        只做子串查找，不区分括号内外的 +/-，
        所以 "12+3*4*" 会得到 "((1 + 2) * 3) * 4"。
        """
        if symbol in WRAP_LEFT_OPERATORS and _contains_additive(first):
            first = f"({first})"
        if symbol in WRAP_RIGHT_OPERATORS and _contains_additive(second):
            second = f"({second})"
        return first, second

    @staticmethod
    def decode(expression):
        """
        Args:
            expression: 后缀字符串（不做谜题结构校验）
        Returns:
            中缀字符串，操作符两侧各一个空格，如 "(1 + 2) * 3"
        Raises:
            ValueError: 未知字符、操作数不足、或结束时栈中不止一个子式
        """
        stack = []

        for token in tokenize(expression):
            if token.type == TokenType.OPERAND:
                stack.append(token.name)
                continue

            if len(stack) < 2:
                logger.error(f"Insufficient operands for {token.name} in {expression!r}")
                raise ValueError(f"insufficient operands for {token.name!r}")

            second = stack.pop()
            first = stack.pop()
            first, second = RPNDecoder.wrap_operands(token.name, first, second)
            stack.append(f"{first} {token.name} {second}")

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} sub-expressions after decoding, expected 1: {expression!r}")
            raise ValueError(f"expected exactly one expression on the stack, got {len(stack)}")

        return stack[0]
