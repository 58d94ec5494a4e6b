"""主程序入口 - 交互式RPN计算器"""
import argparse
import io
import logging
import sys

from config.config import *
from rpncalc import (
    RPNCalculator, RPNCalculatorError, EmptyStack, Quit,
    default_registry, stack_registry, quit_registry
)
from utils.formatting import format_value, format_stack, describe_error

# 设置日志
logging.basicConfig(
    level=LOGGING_CONFIG['level'],
    format=LOGGING_CONFIG['format']
)
logger = logging.getLogger(__name__)


def build_calculator(quit_symbol=CALCULATOR_CONFIG['quit_symbol'],
                     enable_stack_operators=CALCULATOR_CONFIG['enable_stack_operators']):
    """默认操作符 + 栈操作 + 退出操作符"""
    operators = default_registry()
    if enable_stack_operators:
        operators.merge(stack_registry())
    if quit_symbol:
        operators.merge(quit_registry(quit_symbol))
    logger.debug(f"Registered operators: {sorted(operators.symbols())}")
    return RPNCalculator.with_operators(operators)


def repl_step(calculator, line, precision=REPL_CONFIG['display_precision'],
              show_stack=REPL_CONFIG['show_stack']):
    """
    求值一行并返回要输出的文本（栈顶，或 show_stack 时整个栈）
    计算器错误（包括 Quit）直接抛给调用方
    """
    calculator.evaluate(line)
    if show_stack and len(calculator):
        return format_stack(calculator.snapshot(), precision)
    try:
        return format_value(calculator.top(), precision)
    except EmptyStack:
        return REPL_CONFIG['empty_stack_message']


def run_repl(calculator, input_stream, output_stream,
             prompt=REPL_CONFIG['prompt'],
             precision=REPL_CONFIG['display_precision'],
             stop_on_error=CALCULATOR_CONFIG['stop_on_error'],
             show_stack=REPL_CONFIG['show_stack']):
    """
    读取输入直到EOF或退出操作符
    Returns:
        进程退出码：0 正常结束，1 因错误停止
    """
    if precision is not None and precision <= 0:
        raise ValueError(f"Precision must be positive, got {precision}")

    line_number = 0
    while True:
        if prompt:
            output_stream.write(prompt)
            output_stream.flush()

        line = input_stream.readline()
        if not line:
            logger.info("End of input")
            return 0
        line_number += 1

        try:
            output = repl_step(calculator, line, precision, show_stack)
        except Quit:
            logger.info(f"Quit requested at line {line_number}")
            return 0
        except RPNCalculatorError as e:
            logger.warning(f"Line {line_number} failed: {describe_error(e)}")
            output_stream.write(f"Error: {describe_error(e)}\n")
            if stop_on_error:
                return 1
            continue

        output_stream.write(output + "\n")


# ================== 命令行参数 ==================

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def positive_int(value):
    """argparse 类型：正整数"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def operator_symbol(value):
    """argparse 类型：非空且不含空白的符号"""
    if not value or any(ch.isspace() for ch in value):
        raise argparse.ArgumentTypeError(f"symbol must be non-empty without whitespace: {value!r}")
    return value


def validate_args(args):
    """检查 main() 实际使用的参数；直接构造 Namespace 调用 main 时同样生效"""
    if args.log_level.upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {args.log_level}")
    if args.precision is not None and args.precision <= 0:
        raise ValueError(f"Precision must be positive, got {args.precision}")
    if not args.quit_symbol or any(ch.isspace() for ch in args.quit_symbol):
        raise ValueError(f"Invalid quit symbol: {args.quit_symbol!r}")


def main(args, input_stream=None, output_stream=None):
    validate_args(args)
    validate_config()
    logging.getLogger().setLevel(args.log_level.upper())

    calculator = build_calculator(
        quit_symbol=args.quit_symbol,
        enable_stack_operators=not args.no_stack_operators
    )

    output_stream = output_stream or sys.stdout
    if args.expression:
        # 非交互模式：依次求值给定的表达式
        input_stream = io.StringIO("\n".join(args.expression) + "\n")
        prompt = ''
    else:
        input_stream = input_stream or sys.stdin
        prompt = args.prompt if input_stream.isatty() else ''

    return run_repl(
        calculator,
        input_stream,
        output_stream,
        prompt=prompt,
        precision=args.precision,
        stop_on_error=args.stop_on_error,
        show_stack=args.show_stack
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive RPN calculator")

    parser.add_argument(
        "-e", "--expression",
        type=str,
        action="append",
        help="Evaluate this line instead of reading stdin (can be repeated)"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=REPL_CONFIG['prompt'],
        help="Prompt shown before each line in interactive mode"
    )
    parser.add_argument(
        "--precision",
        type=positive_int,
        default=REPL_CONFIG['display_precision'],
        help="Significant digits used when printing the top of the stack"
    )
    parser.add_argument(
        "--show_stack",
        action="store_true",
        default=REPL_CONFIG['show_stack'],
        help="Print the whole stack (bottom first) after each line"
    )
    parser.add_argument(
        "--quit_symbol",
        type=operator_symbol,
        default=CALCULATOR_CONFIG['quit_symbol'],
        help="Symbol that ends the session"
    )
    parser.add_argument(
        "--stop_on_error",
        action="store_true",
        default=CALCULATOR_CONFIG['stop_on_error'],
        help="Stop reading input after the first failing line"
    )
    parser.add_argument(
        "--no_stack_operators",
        action="store_true",
        help="Do not register drop/dup/swap/clear"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOGGING_CONFIG['level'],
        help="Logging level"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    sys.exit(main(args))
