"""Both semantics must leave every program in the same final environment."""

import pytest

from simplesem.big_step import evaluate
from simplesem.environment import Environment
from simplesem.programs import PROGRAMS, loop_until
from simplesem.small_step import Machine
from simplesem.types import Boolean, Number


def run_small_step(program):
    return Machine(program).run(observer=lambda state: None)


@pytest.mark.parametrize('name', [name for name in PROGRAMS if name != 'big_loop'])
def test_program_agreement(name):
    program = PROGRAMS[name]
    assert run_small_step(program) == evaluate(program, Environment.empty())


@pytest.mark.parametrize('limit', range(0, 12))
def test_loop_agreement(limit):
    program = loop_until(limit, step=3)
    assert run_small_step(program) == evaluate(program)


def test_expected_results():
    assert run_small_step(PROGRAMS['assign']) == Environment({'x': Number(8)})
    assert run_small_step(PROGRAMS['conditional']) == Environment({'y': Number(2)})
    assert run_small_step(PROGRAMS['loop']) == Environment({'x': Number(6)})
    assert run_small_step(PROGRAMS['arithmetic']) == Environment({'x': Number(14), 'y': Boolean(True)})
    assert run_small_step(PROGRAMS['factorial']) == Environment({'f': Number(120), 'i': Number(6)})
