"""工具模块"""
from .formatting import format_value, format_stack, describe_error

__all__ = ['format_value', 'format_stack', 'describe_error']
