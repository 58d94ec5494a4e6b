# tests/test_operators.py
import pytest

from rpncalc import (
    OperatorRegistry, FixedArityOperator, RawOperator, Arithmetic,
    NotEnoughOperands, Quit,
    default_registry, stack_registry, quit_registry, insert, merge, lookup
)


def _apply(registry, symbol, stack):
    lookup(registry, symbol)(stack)
    return stack


def test_default_registry_symbols():
    assert default_registry().symbols() == {'+', '-', '*', '/'}


def test_default_registry_is_idempotent():
    first = default_registry()
    second = default_registry()
    assert first is not second
    assert first.symbols() == second.symbols()
    for symbol in first:
        assert _apply(first, symbol, [6.0, 2.0]) == _apply(second, symbol, [6.0, 2.0])


def test_arithmetic_takes_top_first():
    # 参数顺序：栈顶在前
    assert Arithmetic.sub(2.0, 6.0) == 4.0
    assert Arithmetic.div(2.0, 6.0) == 3.0


def test_fixed_arity_pops_and_pushes_one():
    registry = default_registry()
    assert _apply(registry, '-', [1.0, 6.0, 2.0]) == [1.0, 4.0]


def test_fixed_arity_receives_top_to_bottom_order():
    seen = []
    op = FixedArityOperator(3, lambda *args: seen.extend(args) or 0.0, name='t')
    stack = [1.0, 2.0, 3.0]
    op(stack)
    assert seen == [3.0, 2.0, 1.0]
    assert stack == [0.0]


def test_fixed_arity_underflow_leaves_stack():
    op = FixedArityOperator(2, Arithmetic.add, name='+')
    stack = [5.0]
    with pytest.raises(NotEnoughOperands) as exc_info:
        op(stack)
    assert exc_info.value.symbol == '+'
    assert stack == [5.0]


def test_zero_arity_operator_pushes():
    op = FixedArityOperator(0, lambda: 10.0)
    stack = [1.0]
    op(stack)
    assert stack == [1.0, 10.0]


def test_negative_arity_rejected():
    with pytest.raises(ValueError):
        FixedArityOperator(-1, lambda: 0.0)


def test_insert_replaces_existing_symbol():
    registry = default_registry()
    insert(registry, '+', FixedArityOperator(2, lambda y, x: x * 100 + y))
    assert _apply(registry, '+', [1.0, 2.0]) == [102.0]
    assert len(registry) == 4


def test_insert_wraps_plain_callable_as_raw():
    registry = OperatorRegistry()
    registry.insert('push1', lambda s: s.append(1.0))
    assert isinstance(registry.lookup('push1'), RawOperator)
    assert _apply(registry, 'push1', []) == [1.0]


def test_insert_rejects_non_callable():
    with pytest.raises(TypeError):
        OperatorRegistry().insert('x', 42)


def test_merge_overrides_on_conflict():
    registry = default_registry()
    other = OperatorRegistry()
    other.insert('-', FixedArityOperator(2, lambda y, x: y - x))
    other.insert('neg', FixedArityOperator(1, lambda x: -x))
    merge(registry, other)

    assert registry.symbols() == {'+', '-', '*', '/', 'neg'}
    assert _apply(registry, '-', [6.0, 2.0]) == [-4.0]
    assert _apply(registry, 'neg', [3.0]) == [-3.0]


def test_merge_accepts_dict():
    registry = OperatorRegistry({'dup': lambda s: s.append(s[-1])})
    assert 'dup' in registry


def test_lookup_missing_returns_none():
    assert lookup(default_registry(), '%') is None


def test_copy_is_independent():
    registry = default_registry()
    clone = registry.copy()
    clone.insert('?', lambda s: None)
    assert '?' not in registry


def test_stack_primitives():
    registry = stack_registry()
    assert _apply(registry, 'drop', [1.0, 2.0]) == [1.0]
    assert _apply(registry, 'dup', [1.0, 2.0]) == [1.0, 2.0, 2.0]
    assert _apply(registry, 'swap', [1.0, 2.0]) == [2.0, 1.0]
    assert _apply(registry, 'clear', [1.0, 2.0]) == []


@pytest.mark.parametrize("symbol, stack", [
    ('drop', []),
    ('dup', []),
    ('swap', [1.0]),
])
def test_stack_primitives_underflow(symbol, stack):
    before = list(stack)
    with pytest.raises(NotEnoughOperands):
        _apply(stack_registry(), symbol, stack)
    assert stack == before


def test_quit_operator_always_raises():
    registry = quit_registry('bye')
    stack = [1.0]
    with pytest.raises(Quit) as exc_info:
        _apply(registry, 'bye', stack)
    assert exc_info.value.symbol == 'bye'
    assert stack == [1.0]


def test_insert_names_unnamed_operator_after_symbol():
    registry = OperatorRegistry()
    registry.insert('neg', FixedArityOperator(1, lambda x: -x))
    with pytest.raises(NotEnoughOperands) as exc_info:
        _apply(registry, 'neg', [])
    assert exc_info.value.symbol == 'neg'
    assert 'neg' in str(exc_info.value)


def test_insert_keeps_existing_operator_name():
    op = FixedArityOperator(1, lambda x: -x, name='negate')
    OperatorRegistry().insert('neg', op)
    assert op.name == 'negate'


def test_insert_warns_on_unmatchable_symbols(caplog):
    registry = OperatorRegistry()
    with caplog.at_level('WARNING', logger='rpncalc.operators'):
        registry.insert('', lambda s: None)
        registry.insert('a b', lambda s: None)
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Empty symbol can never be matched by a token"
    assert 'whitespace' in messages[1]
    # 插入本身不失败
    assert '' in registry and 'a b' in registry
