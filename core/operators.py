"""core/operators.py"""
import numpy as np
import logging

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """
        实数除法。除数为0时按IEEE 754得到 ±inf 或 nan，不做特殊处理，
        由下游的取整/容差判断来归类。
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            result = np.true_divide(np.float64(operand1), np.float64(operand2))
        if not np.isfinite(result):
            logger.debug(f"Non-finite division result: {operand1} / {operand2} = {result}")
        return result

    @staticmethod
    def apply(symbol, operand1, operand2):
        """按操作符字符调用对应方法"""
        op_method = OPERATOR_METHODS.get(symbol)
        if op_method is None:
            logger.error(f"Unknown binary operator: {symbol!r}")
            raise ValueError(f"unknown binary operator {symbol!r}")
        return op_method(operand1, operand2)


OPERATOR_METHODS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
}
