# SIMPLE semantics package
# Big-step and small-step operational semantics for a tiny imperative language.
from .ast import (
    Add, Assign, DoNothing, If, LessThan, Literal, Multiply, Sequence,
    Variable, While, boolean, number, variable,
)
from .big_step import Evaluator, evaluate
from .environment import Environment
from .errors import NotReducible, SimpleError, TypeMismatch, UnboundVariable
from .small_step import Machine, State, does_nothing, is_reducible, reduce
from .types import Boolean, Number

__all__ = [
    'Add', 'Assign', 'DoNothing', 'If', 'LessThan', 'Literal', 'Multiply',
    'Sequence', 'Variable', 'While', 'boolean', 'number', 'variable',
    'Evaluator', 'evaluate',
    'Environment',
    'NotReducible', 'SimpleError', 'TypeMismatch', 'UnboundVariable',
    'Machine', 'State', 'does_nothing', 'is_reducible', 'reduce',
    'Boolean', 'Number',
]
