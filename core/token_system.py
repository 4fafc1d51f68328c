"""core/token_system.py"""
import re
from enum import Enum
from typing import List, Optional

import numpy as np

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

_LITERAL_RE = re.compile(r'-?[0-9]+')
_INT64_DIGITS = len(str(INT64_MAX))  # 19


class TokenType(Enum):
    OPERAND = "operand"  # 整数字面量
    OPERATOR = "operator"  # 操作符


class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'

    @property
    def precedence(self):
        if self in (Operator.ADD, Operator.SUB):
            return 1
        return 2

    @property
    def arity(self):
        return 2

    @classmethod
    def from_symbol(cls, symbol):
        """符号 -> Operator，不认识的符号返回None"""
        try:
            return cls(symbol)
        except ValueError:
            return None


OPERATOR_SYMBOLS = tuple(op.value for op in Operator)


class Token:
    def __init__(self, token_type, text, value=None, operator=None):
        self.type = token_type
        self.text = text
        self.value = value
        self.operator = operator

    @property
    def is_valid(self):
        return self.type == TokenType.OPERAND or self.operator is not None

    def __repr__(self):
        return f"Token({self.type.value}, {self.text!r})"


def parse_literal(text: str) -> Optional[int]:
    """
    解析64位有符号整数字面量
    Args:
        text: token文本，形如 -?[0-9]+
    Returns:
        整数值；不符合语法或超出int64范围时返回None
    """
    if not _LITERAL_RE.fullmatch(text):
        return None
    # 先去掉符号和前导0，超过19位的数字不可能在int64范围内，也不交给int()
    digits = text.lstrip('-').lstrip('0')
    if len(digits) > _INT64_DIGITS:
        return None
    value = int(digits or '0')
    if text.startswith('-'):
        value = -value
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_token(text: str) -> Token:
    value = parse_literal(text)
    if value is not None:
        return Token(TokenType.OPERAND, text, value=value)
    return Token(TokenType.OPERATOR, text, operator=Operator.from_symbol(text))


def tokenize(rpn: str) -> List[str]:
    """按空白切分RPN字符串"""
    return rpn.split()


class RPNValidator:
    """供枚举公式的上层使用：只看栈深度，不计算数值"""

    @staticmethod
    def calculate_stack_size(tokens):
        """计算当前栈中的元素数量（操作数+1，操作符-1）"""
        stack_size = 0
        for text in tokens:
            if parse_literal(text) is not None:
                stack_size += 1
            else:
                stack_size -= 1
        return stack_size

    @staticmethod
    def is_valid_partial_expression(tokens):
        """每个操作符出现时栈里至少有两个元素，且所有token都合法"""
        stack_size = 0
        for text in tokens:
            token = parse_token(text)
            if not token.is_valid:
                return False
            if token.type == TokenType.OPERAND:
                stack_size += 1
            else:
                if stack_size < token.operator.arity:
                    return False
                stack_size -= 1
        return True

    @staticmethod
    def can_terminate(tokens):
        if not tokens:
            return False
        return (RPNValidator.is_valid_partial_expression(tokens)
                and RPNValidator.calculate_stack_size(tokens) == 1)

    @staticmethod
    def get_valid_next_tokens(tokens, operands):
        """
        返回当前状态下所有合法的下一个token
        Args:
            tokens: 已有的token序列（假定为合法的部分表达式）
            operands: 可用的操作数文本
        """
        valid_tokens = [text for text in operands if parse_literal(text) is not None]
        stack_size = RPNValidator.calculate_stack_size(tokens)
        for op in Operator:
            if op.arity <= stack_size:
                valid_tokens.append(op.value)
        return valid_tokens
