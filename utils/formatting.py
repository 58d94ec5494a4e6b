"""utils/formatting.py"""
import numpy as np


def format_value(value, precision=None):
    """栈顶值的显示格式；整数值不带小数点，inf/nan 原样显示"""
    value = float(value)
    if np.isnan(value):
        return 'nan'
    if np.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if precision is not None:
        return f"{value:.{precision}g}"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_stack(values, precision=None):
    return ' '.join(format_value(v, precision) for v in values)


def describe_error(exc):
    return f"{type(exc).__name__}: {exc}"
