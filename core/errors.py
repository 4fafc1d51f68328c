"""core/errors.py - 求值器和中缀渲染器共用的错误类型"""


class RPNError(Exception):
    """所有RPN错误的基类，带可选的token位置"""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position


# 两个组件的失败类型（同一套分类）
EvalError = RPNError
RenderError = RPNError


class ArithmeticOverflow(RPNError, ArithmeticError):
    def __init__(self, message="overflow"):
        super().__init__(message)


class DivisionByZero(RPNError, ArithmeticError):
    def __init__(self, message="division by zero"):
        super().__init__(message)


class NonPositiveModulus(RPNError, ArithmeticError):
    """取模的除数必须为正数"""

    def __init__(self, divisor):
        if divisor == 0:
            message = "division by zero (modulus must be positive)"
        else:
            message = "division by negative"
        super().__init__(message)
        self.divisor = divisor


class InvalidToken(RPNError):
    def __init__(self, position, token=None):
        super().__init__(f"invalid token at {position}", position)
        self.token = token


class InsufficientOperands(RPNError):
    def __init__(self, position):
        super().__init__(f"invalid syntax at {position}", position)


class MalformedResult(RPNError):
    """结束时栈中元素个数不为1"""

    def __init__(self, stack_size):
        super().__init__("invalid syntax")
        self.stack_size = stack_size
