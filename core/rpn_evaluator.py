"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import CALCULATOR_CONFIG
from core.errors import RPNError, InvalidToken, InsufficientOperands, MalformedResult
from core.operators import Operators
from core.token_system import parse_literal, tokenize, Operator

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值（64位有符号整数）"""

    def __init__(self, trace=None, sink=None):
        """
        Args:
            trace: 是否在每一步之后输出剩余token和栈内容，默认取CALCULATOR_CONFIG
            sink: 接收trace行的函数，默认print（标准输出）
        """
        self.trace = CALCULATOR_CONFIG['trace'] if trace is None else trace
        self.sink = sink if sink is not None else print

    def evaluate(self, tokens):
        """
        评估RPN表达式
        Args:
            tokens: token文本序列；传入字符串时按空白切分
        Returns:
            int结果
        Raises:
            RPNError: 溢出、除零、非法token、操作数不足、结束时栈不为1
        """
        if isinstance(tokens, str):
            tokens = tokenize(tokens)
        tokens = list(tokens)
        stack = []

        for pos, token in enumerate(tokens, start=1):
            value = parse_literal(token)
            if value is not None:
                stack.append(value)
            elif len(stack) >= 2:
                y = stack.pop()
                x = stack.pop()
                op = Operator.from_symbol(token)
                if op is None:
                    logger.debug(f"Invalid token {token!r} at position {pos}")
                    raise InvalidToken(pos, token)
                try:
                    stack.append(Operators.apply(op, x, y))
                except RPNError as e:
                    logger.debug(f"{e.message}: {x} {token} {y} at position {pos}")
                    raise
            else:
                logger.debug(f"Insufficient operands for {token!r} at position {pos}")
                raise InsufficientOperands(pos)

            if self.trace:
                self.sink(f"{tokens[pos:]} {stack}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedResult(len(stack))

        return stack[0]
