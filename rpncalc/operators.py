"""rpncalc/operators.py"""
import logging

import numpy as np

from rpncalc.errors import NotEnoughOperands, Quit

logger = logging.getLogger(__name__)


class Operator:
    """操作符基类：对计算器栈做一次变换，失败时抛出RPNCalculatorError"""

    def __init__(self, name=None):
        self.name = name

    def __call__(self, stack):
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class FixedArityOperator(Operator):
    """
    固定元数操作符
    从栈顶取 arity 个操作数（按栈顶到栈底的顺序作为位置参数传给 func），压入一个结果
    操作数不足时抛出 NotEnoughOperands，且不修改栈
    """

    def __init__(self, arity, func, name=None):
        super().__init__(name)
        if arity < 0:
            raise ValueError(f"arity must be non-negative, got {arity}")
        self.arity = arity
        self.func = func

    def __call__(self, stack):
        available = len(stack)
        if available < self.arity:
            raise NotEnoughOperands(self.name, self.arity, available)

        # 先计算再出栈：func 失败时栈保持原样
        start = available - self.arity
        operands = stack[start:][::-1]
        result = float(self.func(*operands))

        del stack[start:]
        stack.append(result)


class RawOperator(Operator):
    """直接操作栈的操作符 元数由操作符自己负责检查"""

    def __init__(self, func, name=None):
        super().__init__(name)
        self.func = func

    def __call__(self, stack):
        self.func(stack)


class Arithmetic:
    """四则运算 参数顺序为 (栈顶 y, 次栈顶 x)，结果为 x OP y"""

    @staticmethod
    def _binary(func, y, x):
        # IEEE-754 语义：除零得到 inf/nan，不抛异常
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(func(np.float64(x), np.float64(y)))

    @staticmethod
    def add(y, x):
        return Arithmetic._binary(np.add, y, x)

    @staticmethod
    def sub(y, x):
        return Arithmetic._binary(np.subtract, y, x)

    @staticmethod
    def mul(y, x):
        return Arithmetic._binary(np.multiply, y, x)

    @staticmethod
    def div(y, x):
        return Arithmetic._binary(np.true_divide, y, x)


class StackOperators:
    """栈操作原语（RawOperator）"""

    @staticmethod
    def _require(stack, symbol, required):
        if len(stack) < required:
            raise NotEnoughOperands(symbol, required, len(stack))

    @staticmethod
    def drop(stack):
        StackOperators._require(stack, 'drop', 1)
        stack.pop()

    @staticmethod
    def dup(stack):
        StackOperators._require(stack, 'dup', 1)
        stack.append(stack[-1])

    @staticmethod
    def swap(stack):
        StackOperators._require(stack, 'swap', 2)
        stack[-1], stack[-2] = stack[-2], stack[-1]

    @staticmethod
    def clear(stack):
        stack.clear()


class OperatorRegistry:
    """符号到操作符的映射，后插入的同名符号覆盖之前的"""

    def __init__(self, operators=None):
        self._operators = {}
        if operators is not None:
            self.merge(operators)

    def insert(self, symbol, operator):
        """
        添加或替换 symbol 对应的操作符；普通可调用对象按 RawOperator 处理
        未命名的操作符以 symbol 命名，错误信息中才能带上符号
        非可调用对象抛出 TypeError
        """
        if not isinstance(operator, Operator):
            if not callable(operator):
                raise TypeError(f"Operator for {symbol!r} must be callable")
            operator = RawOperator(operator, name=symbol)
        elif operator.name is None:
            operator.name = symbol

        if not symbol:
            logger.warning("Empty symbol can never be matched by a token")
        elif any(ch.isspace() for ch in symbol):
            logger.warning(f"Symbol {symbol!r} contains whitespace and can never be matched")
        if symbol in self._operators:
            logger.debug(f"Overriding operator {symbol!r}")
        self._operators[symbol] = operator

    def merge(self, other):
        """合并另一个注册表（或dict），冲突时以 other 为准"""
        items = other.items()
        for symbol, operator in items:
            self.insert(symbol, operator)

    def lookup(self, symbol):
        return self._operators.get(symbol)

    def operator(self, symbol, arity=None):
        """
        装饰器：注册一个函数为操作符
        Args:
            symbol: 操作符符号
            arity: 给定时注册为 FixedArityOperator，否则注册为 RawOperator
        """
        def decorator(func):
            if arity is None:
                op = RawOperator(func, name=symbol)
            else:
                op = FixedArityOperator(arity, func, name=symbol)
            self.insert(symbol, op)
            return func
        return decorator

    def copy(self):
        return OperatorRegistry(self)

    def symbols(self):
        return set(self._operators)

    def items(self):
        return list(self._operators.items())

    def __contains__(self, symbol):
        return symbol in self._operators

    def __len__(self):
        return len(self._operators)

    def __iter__(self):
        return iter(list(self._operators))

    def __repr__(self):
        return f"OperatorRegistry({sorted(self._operators)})"


def insert(registry, symbol, operator):
    registry.insert(symbol, operator)


def merge(registry, other):
    registry.merge(other)


def lookup(registry, symbol):
    return registry.lookup(symbol)


def default_registry():
    """默认操作符：+ - * /，均为二元，计算 次栈顶 OP 栈顶"""
    registry = OperatorRegistry()
    registry.insert('+', FixedArityOperator(2, Arithmetic.add, name='+'))
    registry.insert('-', FixedArityOperator(2, Arithmetic.sub, name='-'))
    registry.insert('*', FixedArityOperator(2, Arithmetic.mul, name='*'))
    registry.insert('/', FixedArityOperator(2, Arithmetic.div, name='/'))
    return registry


def stack_registry():
    """栈操作：drop dup swap clear"""
    registry = OperatorRegistry()
    for symbol in ('drop', 'dup', 'swap', 'clear'):
        registry.insert(symbol, RawOperator(getattr(StackOperators, symbol), name=symbol))
    return registry


def quit_registry(symbol='q'):
    """只含退出操作符的注册表 该操作符总是抛出 Quit"""
    def _quit(stack):
        raise Quit(symbol)

    registry = OperatorRegistry()
    registry.insert(symbol, RawOperator(_quit, name=symbol))
    return registry
