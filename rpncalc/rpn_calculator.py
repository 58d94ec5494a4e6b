"""RPN计算器 - 持有操作数栈和操作符注册表，逐token求值"""
import logging

from rpncalc.errors import EmptyStack, ParsingError
from rpncalc.operators import OperatorRegistry, default_registry

logger = logging.getLogger(__name__)


class RPNCalculator:
    """
    逐行求值RPN表达式，栈在多次 evaluate 之间保持
    """

    def __init__(self, operators=None):
        """
        Args:
            operators: 操作符注册表（或dict）；为None时使用 default_registry()
                       传入的注册表会被复制，之后的修改只影响本计算器
        """
        self.stack = []
        if operators is None:
            self.operators = default_registry()
        else:
            self.operators = OperatorRegistry(operators)

    @classmethod
    def with_operators(cls, operators):
        """使用调用方提供的操作符创建计算器（可扩展或完全替换默认操作符）"""
        return cls(operators)

    def top(self):
        """返回栈顶值，不修改栈；空栈时抛出 EmptyStack"""
        if not self.stack:
            raise EmptyStack()
        return self.stack[-1]

    def evaluate(self, line):
        """
        求值一行输入
        遇到第一个失败的token立即停止并抛出异常，之前已处理的token保留在栈上
        Args:
            line: 以空白分隔的token字符串
        """
        tokens = line.split()
        logger.debug(f"Evaluating {len(tokens)} token(s): {tokens}")

        for position, token in enumerate(tokens):
            try:
                self._evaluate_token(token)
            except Exception as e:
                logger.debug(f"Token #{position} {token!r} failed: {type(e).__name__}: {e}")
                raise

    def _evaluate_token(self, token):
        operator = self.operators.lookup(token)
        if operator is not None:
            operator(self.stack)
        else:
            self._parse_and_push(token)

    def _parse_and_push(self, token):
        # float() 接受下划线分组（如 1_000），这里不作为合法字面量
        if '_' in token:
            raise ParsingError(token)
        try:
            value = float(token)
        except ValueError:
            raise ParsingError(token) from None
        self.stack.append(value)

    # ================== 辅助方法 ==================

    @property
    def depth(self):
        return len(self.stack)

    def snapshot(self):
        """栈的只读快照（栈底在前）"""
        return tuple(self.stack)

    def clear(self):
        self.stack.clear()

    def __len__(self):
        return len(self.stack)
