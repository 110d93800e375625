"""core/rpn_encoder.py - 中缀表达式转后缀表达式（调度场算法）"""
import logging
import re

from config.config import ENCODER_CONFIG

logger = logging.getLogger(__name__)

_ALLOWED_PATTERN = re.compile(r'^[0-9+\-*/()]*$')


class RPNEncoder:
    """把带括号的中缀表达式编码为无空格的后缀字符串"""

    @staticmethod
    def is_operator(char):
        return char in ENCODER_CONFIG["precedence"]

    @staticmethod
    def is_balanced(infix):
        """括号是否配对：深度全程不为负且最终为0；空串视为不合法"""
        if not infix:
            return False
        depth = 0
        for char in infix:
            if char == '(':
                depth += 1
            elif char == ')':
                depth -= 1
                if depth < 0:
                    return False
        return depth == 0

    @staticmethod
    def encode(infix):
        """
        Args:
            infix: 中缀表达式，如 "(1 + 2) * (3 + 4)"，空白会被忽略
        Returns:
            后缀字符串，如 "12+34+*"
        Raises:
            ValueError: 含非法字符、括号不匹配、或出现多位数
        """
        precedence = ENCODER_CONFIG["precedence"]
        expr = re.sub(r'\s+', '', infix)

        if not _ALLOWED_PATTERN.match(expr):
            logger.error(f"Invalid characters in infix expression: {infix!r}")
            raise ValueError(f"invalid characters in expression {infix!r}")

        output = []
        operators = []

        for i, char in enumerate(expr):
            if char.isdigit():
                if i > 0 and expr[i - 1].isdigit():
                    logger.error(f"Multi-digit operand in infix expression: {infix!r}")
                    raise ValueError(f"multi-digit operands are not supported: {infix!r}")
                output.append(char)
            elif char == '(':
                operators.append(char)
            elif char == ')':
                # 弹出到 '(' 为止
                while operators and operators[-1] != '(':
                    output.append(operators.pop())
                if not operators:
                    logger.error(f"Unbalanced parentheses: {infix!r}")
                    raise ValueError(f"unbalanced parentheses in {infix!r}")
                operators.pop()
            else:
                # 左结合：栈顶优先级 >= 当前 时先输出
                while (operators and RPNEncoder.is_operator(operators[-1])
                       and precedence[operators[-1]] >= precedence[char]):
                    output.append(operators.pop())
                operators.append(char)

        while operators:
            op = operators.pop()
            if op == '(':
                logger.error(f"Unbalanced parentheses: {infix!r}")
                raise ValueError(f"unbalanced parentheses in {infix!r}")
            output.append(op)

        return ''.join(output)
