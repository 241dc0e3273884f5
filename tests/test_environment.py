import pytest

from simplesem.environment import Environment
from simplesem.errors import UnboundVariable
from simplesem.types import Boolean, Number


def test_update_leaves_original_untouched():
    empty = Environment.empty()
    one = empty.update('x', Number(1))
    two = one.update('x', Number(2))
    assert 'x' not in empty
    assert one.lookup('x') == Number(1)
    assert two.lookup('x') == Number(2)
    assert len(empty) == 0 and len(one) == 1 and len(two) == 1


def test_lookup_of_unbound_name_fails():
    env = Environment.empty().update('x', Number(1))
    with pytest.raises(UnboundVariable) as info:
        env.lookup('y')
    assert info.value.variable == 'y'
    assert str(info.value) == 'UnboundVariable: undefined variable y'


def test_bindings_is_a_copy():
    env = Environment({'x': Number(1)})
    bindings = env.bindings
    bindings['x'] = Number(99)
    assert env.lookup('x') == Number(1)


def test_render_is_sorted_and_deterministic():
    env = Environment.empty().update('b', Boolean(True)).update('a', Number(1))
    assert env.render() == '{ a=1, b=true }'
    assert env.inspect() == '«{ a=1, b=true }»'
    assert Environment.empty().render() == '{}'


def test_equality_ignores_insertion_order():
    first = Environment.empty().update('x', Number(1)).update('y', Number(2))
    second = Environment.empty().update('y', Number(2)).update('x', Number(1))
    assert first == second
    assert hash(first) == hash(second)
    assert first != first.update('x', Number(3))
