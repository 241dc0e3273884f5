"""Hand-built SIMPLE programs used by the command line driver and the tests.

There is no parser; every program is assembled from AST nodes.
"""

from __future__ import annotations

from typing import Dict

from .ast import (
    Add, Assign, If, LessThan, Multiply, Sequence, Statement, While,
    Expression, boolean, number, variable,
)


def loop_until(limit: int, step: int = 2) -> Statement:
    """x = 0; while (x < limit) { x = x + step }"""
    return Sequence(
        Assign('x', number(0)),
        While(
            LessThan(variable('x'), number(limit)),
            Assign('x', Add(variable('x'), number(step))),
        ),
    )


# x = 3 + 5
ASSIGN = Assign('x', Add(number(3), number(5)))

# if (false) { x = 1 } else { y = 2 }
CONDITIONAL = If(boolean(False), Assign('x', number(1)), Assign('y', number(2)))

LOOP = loop_until(5)

# x = 1 * 2 + 3 * 4; y = x < 20
ARITHMETIC = Sequence(
    Assign('x', Add(Multiply(number(1), number(2)), Multiply(number(3), number(4)))),
    Assign('y', LessThan(variable('x'), number(20))),
)

# f = 1; i = 1; while (i < 6) { f = f * i; i = i + 1 }
FACTORIAL = Sequence(
    Assign('f', number(1)),
    Sequence(
        Assign('i', number(1)),
        While(
            LessThan(variable('i'), number(6)),
            Sequence(
                Assign('f', Multiply(variable('f'), variable('i'))),
                Assign('i', Add(variable('i'), number(1))),
            ),
        ),
    ),
)

BIG_LOOP = loop_until(60_001)

PROGRAMS: Dict[str, Statement] = {
    'assign': ASSIGN,
    'conditional': CONDITIONAL,
    'loop': LOOP,
    'arithmetic': ARITHMETIC,
    'factorial': FACTORIAL,
    'big_loop': BIG_LOOP,
}

COMPARISONS: Dict[str, Expression] = {
    '5 < 8': LessThan(number(5), number(8)),
    '2 < 2': LessThan(number(2), number(2)),
    '18 < 2': LessThan(number(18), number(2)),
}
