"""core/infix_renderer.py - RPN转中缀表达式，只在必要处加括号"""
import logging

from config.config import RENDER_CONFIG
from core.errors import InvalidToken, InsufficientOperands, MalformedResult
from core.token_system import parse_literal, tokenize, Operator

logger = logging.getLogger(__name__)


class InfixRenderer:

    def __init__(self):
        self.paren_operators = tuple(Operator(s) for s in RENDER_CONFIG['paren_operators'])

    @staticmethod
    def needs_parentheses(fragment):
        """
        片段F被乘/除时，判断F的开头和末尾是否需要括号。
        从左往右扫描，遇到 + / - 之前先遇到 '(' 则左侧已被括起来；
        反向扫描时以 ')' 作为提前结束条件。
        """
        for char in fragment:
            if char in '+-':
                return True
            if char == '(':
                break
        for char in reversed(fragment):
            if char in '+-':
                return True
            if char == ')':
                break
        return False

    def render(self, rpn):
        """
        RPN字符串 -> 中缀字符串
        注意：错误位置是0起始的（求值器是1起始）；token之间允许任意空白
        """
        infix = []
        for pos, token in enumerate(tokenize(rpn)):
            if parse_literal(token) is not None:
                infix.append(token)
                continue

            if len(infix) < 2:
                logger.debug(f"Insufficient fragments for {token!r} at position {pos}")
                raise InsufficientOperands(pos)

            op = Operator.from_symbol(token)
            if op is None:
                logger.debug(f"Invalid token {token!r} at position {pos}")
                raise InvalidToken(pos, token)

            y = infix.pop()
            x = infix.pop()
            if op in self.paren_operators:
                if self.needs_parentheses(x):
                    x = f"({x})"
                if self.needs_parentheses(y):
                    y = f"({y})"
            infix.append(f"{x} {op.value} {y}")

        if len(infix) != 1:
            logger.debug(f"{len(infix)} fragments left after rendering, expected 1")
            raise MalformedResult(len(infix))

        return infix[0]
