"""core/token_system.py"""
from enum import Enum
import logging

from config.config import PUZZLE_CONFIG, SKELETON_CONFIG

logger = logging.getLogger(__name__)


class TokenType(Enum):
    OPERAND = "operand"  # 操作数（单个数字字符）
    OPERATOR = "operator"  # 二元操作符


class Token:
    def __init__(self, token_type, name, value=None, arity=0):
        self.type = token_type
        self.name = name
        self.value = value
        self.arity = arity

    def __repr__(self):
        return f"Token({self.type.value}, {self.name!r})"


# Token定义字典
TOKEN_DEFINITIONS = {
    # 操作数 - 单个数字；0 只用于一般的求值/解码，谜题校验不允许
    **{str(d): Token(TokenType.OPERAND, str(d), value=float(d)) for d in range(10)},

    # 二元操作符
    '+': Token(TokenType.OPERATOR, '+', arity=2),
    '-': Token(TokenType.OPERATOR, '-', arity=2),
    '*': Token(TokenType.OPERATOR, '*', arity=2),
    '/': Token(TokenType.OPERATOR, '/', arity=2),
}


def tokenize(expression):
    """把后缀字符串拆成Token序列，遇到未定义字符抛出ValueError"""
    tokens = []
    for position, char in enumerate(expression):
        token = TOKEN_DEFINITIONS.get(char)
        if token is None:
            logger.error(f"Unknown token {char!r} at position {position} in {expression!r}")
            raise ValueError(f"unknown token {char!r} at position {position}")
        tokens.append(token)
    return tokens


def enumerate_skeletons(num_operands):
    """
    推导 num_operands 个叶子的满二叉树的全部后缀骨架。
    左子树取 k 个叶子，右子树取其余叶子，骨架 = 左 + 右 + 操作符。
    """
    operand = SKELETON_CONFIG["operand_symbol"]
    operator = SKELETON_CONFIG["operator_symbol"]
    if num_operands < 1:
        return []
    if num_operands == 1:
        return [operand]

    skeletons = []
    for left_size in range(1, num_operands):
        for left in enumerate_skeletons(left_size):
            for right in enumerate_skeletons(num_operands - left_size):
                skeletons.append(left + right + operator)
    return sorted(set(skeletons))


# 4个叶子 -> 5种骨架（Catalan(3)）
VALID_SKELETONS = tuple(enumerate_skeletons(PUZZLE_CONFIG["num_operands"]))


class RPNValidator:
    """谜题表达式的结构校验：长度、字符集、数字个数、骨架"""

    @staticmethod
    def skeleton(expression):
        """数字替换为x，操作符替换为o，其他字符替换为?"""
        symbols = []
        for char in expression:
            if char in PUZZLE_CONFIG["allowed_digits"]:
                symbols.append(SKELETON_CONFIG["operand_symbol"])
            elif char in PUZZLE_CONFIG["operators"]:
                symbols.append(SKELETON_CONFIG["operator_symbol"])
            else:
                symbols.append(SKELETON_CONFIG["unknown_symbol"])
        return "".join(symbols)

    @staticmethod
    def is_valid(expression):
        """
        谜题输入是否结构合法。任何失败都直接返回False，不抛异常。
        依次检查：
        1. 长度为7
        2. 每个字符都是1-9或+-*/
        3. 恰好4个数字
        4. 骨架属于 VALID_SKELETONS
        """
        if not isinstance(expression, str):
            return False

        if len(expression) != PUZZLE_CONFIG["expression_length"]:
            logger.debug(f"Invalid length {len(expression)}: {expression!r}")
            return False

        allowed = PUZZLE_CONFIG["allowed_digits"] + PUZZLE_CONFIG["operators"]
        if any(char not in allowed for char in expression):
            logger.debug(f"Invalid character in {expression!r}")
            return False

        digit_count = sum(1 for char in expression if char in PUZZLE_CONFIG["allowed_digits"])
        if digit_count != PUZZLE_CONFIG["num_operands"]:
            logger.debug(f"Expected {PUZZLE_CONFIG['num_operands']} digits, got {digit_count}: {expression!r}")
            return False

        pattern = RPNValidator.skeleton(expression)
        if pattern not in VALID_SKELETONS:
            logger.debug(f"Skeleton {pattern} not allowed: {expression!r}")
            return False

        return True

    @staticmethod
    def calculate_stack_size(expression):
        """计算扫描完后栈中的元素数量（不检查中途是否为负）"""
        stack_size = 0
        for token in tokenize(expression):
            if token.type == TokenType.OPERAND:
                stack_size += 1
            else:
                stack_size = stack_size - token.arity + 1
        return stack_size

    @staticmethod
    def is_stack_balanced(expression):
        """栈深度从0开始，全程不为负，最后恰好为1"""
        stack_size = 0
        for char in expression:
            token = TOKEN_DEFINITIONS.get(char)
            if token is None:
                return False
            if token.type == TokenType.OPERAND:
                stack_size += 1
            else:
                if stack_size < token.arity:
                    return False
                stack_size = stack_size - token.arity + 1
        return stack_size == 1
