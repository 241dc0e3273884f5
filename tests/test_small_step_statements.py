import pytest

from simplesem.ast import (
    Add, Assign, DoNothing, If, LessThan, Sequence, While,
    boolean, number, variable,
)
from simplesem.environment import Environment
from simplesem.errors import NotReducible, TypeMismatch
from simplesem.small_step import does_nothing, is_reducible, reduce, reduce_statement
from simplesem.types import Number


EMPTY = Environment.empty()


def test_do_nothing_is_terminal():
    assert not is_reducible(DoNothing())
    assert does_nothing(DoNothing())
    assert not does_nothing(Assign('x', number(1)))
    with pytest.raises(NotReducible):
        reduce(DoNothing(), EMPTY)


def test_assign_reduces_expression_first():
    stmt, env = reduce(Assign('x', Add(number(3), number(5))), EMPTY)
    assert stmt == Assign('x', number(8))
    assert env is EMPTY


def test_assign_with_value_updates_environment():
    stmt, env = reduce(Assign('x', number(8)), EMPTY)
    assert stmt == DoNothing()
    assert env.lookup('x') == Number(8)
    assert 'x' not in EMPTY


def test_if_reduces_condition_and_keeps_branches():
    consequence = Assign('x', number(1))
    alternative = Assign('y', number(2))
    env = EMPTY.update('c', Number(0))
    stmt, new_env = reduce(If(LessThan(variable('c'), number(1)), consequence, alternative), env)
    assert stmt.condition == LessThan(number(0), number(1))
    assert stmt.consequence is consequence
    assert stmt.alternative is alternative
    assert new_env is env


def test_if_picks_branch():
    consequence = Assign('x', number(1))
    alternative = Assign('y', number(2))
    assert reduce(If(boolean(True), consequence, alternative), EMPTY) == (consequence, EMPTY)
    assert reduce(If(boolean(False), consequence, alternative), EMPTY) == (alternative, EMPTY)


def test_if_requires_boolean_condition():
    with pytest.raises(TypeMismatch):
        reduce(If(number(1), DoNothing(), DoNothing()), EMPTY)


def test_sequence_hands_off_when_first_is_done():
    second = Assign('y', number(2))
    stmt, env = reduce(Sequence(DoNothing(), second), EMPTY)
    assert stmt is second
    assert env is EMPTY


def test_sequence_steps_first_and_threads_environment():
    second = Assign('y', variable('x'))
    stmt, env = reduce_statement(Sequence(Assign('x', number(1)), second), EMPTY)
    assert stmt == Sequence(DoNothing(), second)
    assert stmt.second is second
    assert env.lookup('x') == Number(1)


def test_while_unrolls_into_if_and_sequence():
    condition = LessThan(variable('x'), number(5))
    body = Assign('x', Add(variable('x'), number(2)))
    loop = While(condition, body)
    env = EMPTY.update('x', Number(0))
    stmt, new_env = reduce(loop, env)
    assert stmt == If(condition, Sequence(body, loop), DoNothing())
    assert stmt.condition is condition
    assert stmt.consequence.first is body
    assert stmt.consequence.second is loop
    assert new_env is env
