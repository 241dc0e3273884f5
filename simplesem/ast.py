"""Abstract Syntax Tree (AST) definitions for the SIMPLE language.

Nodes are frozen dataclasses. A tree is never modified once built;
reduction builds new parent nodes around the children that did not
change, so one subtree may be referenced from many trees at once.

Expressions: Literal, Add, Multiply, LessThan, Variable.
Statements: DoNothing, Assign, If, Sequence, While.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .types import Boolean, Number, Printable, Value


@dataclass(frozen=True)
class Node(Printable):
    """Base class for all AST nodes."""


@dataclass(frozen=True)
class Expression(Node):
    """Base class for expression nodes."""


@dataclass(frozen=True)
class Statement(Node):
    """Base class for statement nodes."""


###############################################################################
# Expressions
###############################################################################

@dataclass(frozen=True)
class Literal(Expression):
    value: Value

    def render(self) -> str:
        return self.value.render()


@dataclass(frozen=True)
class BinaryOp(Expression):
    left: Expression
    right: Expression
    symbol: ClassVar[str] = '?'

    def render(self) -> str:
        return f"{self.left.render()} {self.symbol} {self.right.render()}"


@dataclass(frozen=True)
class Add(BinaryOp):
    symbol: ClassVar[str] = '+'


@dataclass(frozen=True)
class Multiply(BinaryOp):
    symbol: ClassVar[str] = '*'


@dataclass(frozen=True)
class LessThan(BinaryOp):
    symbol: ClassVar[str] = '<'


@dataclass(frozen=True)
class Variable(Expression):
    name: str

    def render(self) -> str:
        return self.name


###############################################################################
# Statements
###############################################################################

@dataclass(frozen=True)
class DoNothing(Statement):
    def render(self) -> str:
        return 'do-nothing'


@dataclass(frozen=True)
class Assign(Statement):
    name: str
    expression: Expression

    def render(self) -> str:
        return f"{self.name} = {self.expression.render()}"


@dataclass(frozen=True)
class If(Statement):
    condition: Expression
    consequence: Statement
    alternative: Statement

    def render(self) -> str:
        return (f"if ({self.condition.render()}) {{ {self.consequence.render()} }}"
                f" else {{ {self.alternative.render()} }}")


@dataclass(frozen=True)
class Sequence(Statement):
    first: Statement
    second: Statement

    def render(self) -> str:
        return f"{self.first.render()}; {self.second.render()}"


@dataclass(frozen=True)
class While(Statement):
    condition: Expression
    body: Statement

    def render(self) -> str:
        return f"while ({self.condition.render()}) {{ {self.body.render()} }}"


# Convenience constructors
def number(value: int) -> Literal:
    return Literal(Number(value))


def boolean(value: bool) -> Literal:
    return Literal(Boolean(value))


def variable(name: str) -> Variable:
    return Variable(name)
