"""核心模块 - Token系统、RPN求值器、中缀渲染器和操作符"""
from .token_system import (
    TokenType, Token, Operator, OPERATOR_SYMBOLS, INT64_MIN, INT64_MAX,
    parse_literal, parse_token, tokenize, RPNValidator
)
from .errors import (
    RPNError, EvalError, RenderError, ArithmeticOverflow, DivisionByZero,
    NonPositiveModulus, InvalidToken, InsufficientOperands, MalformedResult
)
from .operators import Operators
from .rpn_evaluator import RPNEvaluator
from .infix_renderer import InfixRenderer

__all__ = [
    'TokenType', 'Token', 'Operator', 'OPERATOR_SYMBOLS', 'INT64_MIN', 'INT64_MAX',
    'parse_literal', 'parse_token', 'tokenize', 'RPNValidator',
    'RPNError', 'EvalError', 'RenderError', 'ArithmeticOverflow', 'DivisionByZero',
    'NonPositiveModulus', 'InvalidToken', 'InsufficientOperands', 'MalformedResult',
    'Operators', 'RPNEvaluator', 'InfixRenderer'
]
