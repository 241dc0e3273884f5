"""Small-step (structural operational) semantics for SIMPLE.

`reduce` performs exactly one rewrite of a term. Expressions reduce
leftmost-innermost; a rewritten node keeps its untouched children by
reference. Statements reduce together with the environment, giving a
new (statement, environment) pair per step.

`Machine` holds the current pair and keeps stepping until the statement
is `DoNothing`. Loops never recurse: `while (c) { b }` rewrites to
`if (c) { b; while (c) { b } } else { do-nothing }` and the machine
simply keeps going, so an iteration costs driver steps, not stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple, Union

from .ast import (
    Assign, BinaryOp, DoNothing, Expression, If, Literal, Node, Sequence,
    Statement, Variable, While,
)
from .debugging import DebugLog
from .environment import Environment
from .errors import NotReducible
from .operators import apply_binary_op, require_boolean


def is_reducible(node: Node) -> bool:
    if isinstance(node, (Literal, DoNothing)):
        return False
    if isinstance(node, (Expression, Statement)):
        return True
    raise NotImplementedError(f"is_reducible: unexpected node type {type(node)}")


def does_nothing(node: Statement) -> bool:
    """Structural check used by `Sequence` to hand over to its second half."""
    return isinstance(node, DoNothing)


def reduce_expression(node: Expression, env: Environment) -> Expression:
    if isinstance(node, Literal):
        raise NotReducible(node)
    if isinstance(node, Variable):
        return Literal(env.lookup(node.name))
    if isinstance(node, BinaryOp):
        cls = type(node)
        if is_reducible(node.left):
            return cls(reduce_expression(node.left, env), node.right)
        if is_reducible(node.right):
            return cls(node.left, reduce_expression(node.right, env))
        return Literal(apply_binary_op(node, node.left.value, node.right.value))
    raise NotImplementedError(f"reduce: unexpected node type {type(node)}")


def reduce_statement(node: Statement, env: Environment) -> Tuple[Statement, Environment]:
    if isinstance(node, DoNothing):
        raise NotReducible(node)
    if isinstance(node, Assign):
        if is_reducible(node.expression):
            return Assign(node.name, reduce_expression(node.expression, env)), env
        return DoNothing(), env.update(node.name, node.expression.value)
    if isinstance(node, If):
        if is_reducible(node.condition):
            return If(reduce_expression(node.condition, env), node.consequence, node.alternative), env
        if require_boolean(node.condition.value, 'if'):
            return node.consequence, env
        return node.alternative, env
    if isinstance(node, Sequence):
        if does_nothing(node.first):
            return node.second, env
        first, new_env = reduce_statement(node.first, env)
        return Sequence(first, node.second), new_env
    if isinstance(node, While):
        return If(node.condition, Sequence(node.body, node), DoNothing()), env
    raise NotImplementedError(f"reduce: unexpected node type {type(node)}")


def reduce(node: Node, env: Environment) -> Union[Expression, Tuple[Statement, Environment]]:
    """Perform one step on an expression or a statement."""
    if isinstance(node, Expression):
        return reduce_expression(node, env)
    if isinstance(node, Statement):
        return reduce_statement(node, env)
    raise NotImplementedError(f"reduce: unexpected node type {type(node)}")


@dataclass(frozen=True)
class State:
    """One configuration of the machine."""
    statement: Statement
    environment: Environment

    @property
    def is_terminal(self) -> bool:
        return not is_reducible(self.statement)

    def render(self) -> str:
        return f"{self.statement.inspect()}, {self.environment.render()}"


def print_state(state: State):
    print(state.render())


class Machine:
    """Drives a statement to `DoNothing` one reduction at a time.

    The machine has no step limit: a program that never reaches
    `DoNothing` keeps it running forever.
    """
    def __init__(self, statement: Statement, environment: Optional[Environment] = None,
                 debug_level: int = 0, debug_file: Optional[str] = None):
        self.statement = statement
        self.environment = environment if environment is not None else Environment.empty()
        self.steps = 0
        self.log = DebugLog(debug_level, debug_file)

    @property
    def state(self) -> State:
        return State(self.statement, self.environment)

    def step(self):
        if not is_reducible(self.statement):
            raise NotReducible(self.statement)
        statement, environment = reduce_statement(self.statement, self.environment)
        self.steps += 1
        if self.log.enabled(2):
            self.log.debug(f"step {self.steps}: {self.statement.inspect()} -> {statement.inspect()}", 2)
            if environment is not self.environment:
                self.log.debug(f"  environment {environment.render()}", 3)
        self.statement = statement
        self.environment = environment

    def trace(self) -> Iterator[State]:
        """Yield every state, from the current one up to and including the terminal one."""
        while is_reducible(self.statement):
            yield self.state
            self.step()
        yield self.state

    def run(self, observer: Callable[[State], None] = print_state) -> Environment:
        self.log.debug(f"small-step run {self.statement.inspect()}")
        try:
            for state in self.trace():
                observer(state)
            self.log.debug(f"halted after {self.steps} steps with {self.environment.render()}")
            return self.environment
        finally:
            self.log.close()
