"""核心模块 - 操作符注册表、RPN计算器和错误类型"""
from .errors import (
    RPNCalculatorError, ParsingError, NotEnoughOperands, EmptyStack, Quit
)
from .operators import (
    Operator, FixedArityOperator, RawOperator, OperatorRegistry,
    Arithmetic, StackOperators,
    default_registry, stack_registry, quit_registry, insert, merge, lookup
)
from .rpn_calculator import RPNCalculator

__all__ = [
    'RPNCalculatorError', 'ParsingError', 'NotEnoughOperands', 'EmptyStack', 'Quit',
    'Operator', 'FixedArityOperator', 'RawOperator', 'OperatorRegistry',
    'Arithmetic', 'StackOperators',
    'default_registry', 'stack_registry', 'quit_registry', 'insert', 'merge', 'lookup',
    'RPNCalculator'
]
