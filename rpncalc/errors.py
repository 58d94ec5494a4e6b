"""rpncalc/errors.py - 计算器的错误类型"""


class RPNCalculatorError(Exception):
    """所有计算器错误的基类"""


class ParsingError(RPNCalculatorError):
    """token既不是已注册的操作符，也不是合法的浮点数"""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Cannot parse token {token!r}")


class NotEnoughOperands(RPNCalculatorError):
    """栈中的操作数不足"""

    def __init__(self, symbol=None, required=None, available=None):
        self.symbol = symbol
        self.required = required
        self.available = available
        if symbol is None:
            message = "Not enough operands on the stack"
        else:
            message = (f"Operator {symbol!r} needs {required} operand(s), "
                       f"stack has {available}")
        super().__init__(message)


class EmptyStack(RPNCalculatorError):
    """对空栈调用top()"""

    def __init__(self):
        super().__init__("Stack is empty")


class Quit(RPNCalculatorError):
    """
    退出信号 不是真正的错误
    由专门注册的操作符（如 "q"）抛出，调用方捕获后结束输入循环，不显示错误信息
    """

    def __init__(self, symbol=None):
        self.symbol = symbol
        super().__init__("Quit requested")
