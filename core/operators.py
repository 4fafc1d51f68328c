"""core/operators.py"""
from core.errors import ArithmeticOverflow, DivisionByZero, NonPositiveModulus
from core.token_system import INT64_MIN, INT64_MAX, Operator


class Operators:
    """五个二元操作符的静态方法集合，结果都做int64溢出检查"""

    @staticmethod
    def check_int64(value):
        if value < INT64_MIN or value > INT64_MAX:
            raise ArithmeticOverflow()
        return value

    @staticmethod
    def add(x, y):
        return Operators.check_int64(x + y)

    @staticmethod
    def sub(x, y):
        return Operators.check_int64(x - y)

    @staticmethod
    def mul(x, y):
        return Operators.check_int64(x * y)

    @staticmethod
    def div(x, y):
        """整数除法，向零截断"""
        if y == 0:
            raise DivisionByZero()
        # 唯一的有符号除法溢出: MIN / -1
        if x == INT64_MIN and y == -1:
            raise ArithmeticOverflow()
        quotient = abs(x) // abs(y)
        if (x < 0) != (y < 0):
            quotient = -quotient
        return quotient

    @staticmethod
    def mod(x, y):
        """截断取余，符号跟随x；除数必须为正"""
        if y <= 0:
            raise NonPositiveModulus(y)
        remainder = abs(x) % y
        return -remainder if x < 0 else remainder

    @staticmethod
    def apply(op, x, y):
        if op is Operator.ADD:
            return Operators.add(x, y)
        elif op is Operator.SUB:
            return Operators.sub(x, y)
        elif op is Operator.MUL:
            return Operators.mul(x, y)
        elif op is Operator.DIV:
            return Operators.div(x, y)
        elif op is Operator.MOD:
            return Operators.mod(x, y)
        raise ValueError(f"Unknown operator: {op!r}")
