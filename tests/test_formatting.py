# tests/test_formatting.py
from utils.formatting import format_value, format_stack, describe_error
from rpncalc import EmptyStack


def test_integral_values_drop_fraction():
    assert format_value(4.0) == "4"
    assert format_value(-12.0) == "-12"


def test_fractional_values_use_repr():
    assert format_value(5.7) == "5.7"
    assert format_value(0.1 + 0.2) == repr(0.1 + 0.2)


def test_precision():
    assert format_value(85.29744186046511, precision=6) == "85.2974"


def test_special_values():
    assert format_value(float('inf')) == "inf"
    assert format_value(float('-inf')) == "-inf"
    assert format_value(float('nan')) == "nan"


def test_format_stack():
    assert format_stack([1.0, 2.5]) == "1 2.5"


def test_describe_error():
    assert describe_error(EmptyStack()) == "EmptyStack: Stack is empty"
