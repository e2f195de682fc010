"""core/operators.py"""
import numpy as np


class Operators:
    """所有二元算术操作符的静态方法集合

    操作数统一为 float64 标量；除零、溢出等按 IEEE-754 返回 inf/nan，不抛异常。
    """

    @staticmethod
    def _as_float(operand):
        return np.float64(operand)

    @staticmethod
    def pow(first, second):
        """幂运算 first ** second"""
        with np.errstate(all='ignore'):
            return np.power(Operators._as_float(first), Operators._as_float(second))

    @staticmethod
    def mul(first, second):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(first) * Operators._as_float(second)

    @staticmethod
    def div(first, second):
        """除法操作符：除零得到 ±inf 或 nan"""
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return np.divide(Operators._as_float(first), Operators._as_float(second))

    @staticmethod
    def mod(first, second):
        """浮点取余，符号跟随被除数（不同于 Python 的 %）"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.fmod(Operators._as_float(first), Operators._as_float(second))

    @staticmethod
    def add(first, second):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(first) + Operators._as_float(second)

    @staticmethod
    def sub(first, second):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(first) - Operators._as_float(second)

    @staticmethod
    def product(values):
        """栈中残留多个值时的兜底：全部相乘"""
        with np.errstate(all='ignore'):
            return np.prod(np.asarray(values, dtype=np.float64))
