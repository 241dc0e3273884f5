"""Big-step (natural) semantics for SIMPLE.

The evaluator maps an expression straight to its value and a statement
straight to the environment it leaves behind. No intermediate terms are
built. `While` is run with a Python loop rather than by recursing into
itself, so the iteration count is not limited by the interpreter stack.
"""

from __future__ import annotations

from typing import Optional, Union

from .ast import (
    Assign, BinaryOp, DoNothing, Expression, If, Literal, Node, Sequence,
    Statement, Variable, While,
)
from .debugging import DebugLog
from .environment import Environment
from .operators import apply_binary_op, require_boolean
from .types import Value


class Evaluator:
    """Evaluates SIMPLE terms to their final result in one descent."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = None):
        self.log = DebugLog(debug_level, debug_file)

    def evaluate(self, node: Node, env: Environment) -> Union[Value, Environment]:
        if isinstance(node, Expression):
            return self.evaluate_expression(node, env)
        if isinstance(node, Statement):
            return self.execute(node, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def execute(self, node: Statement, env: Environment) -> Environment:
        if isinstance(node, DoNothing):
            return env
        if isinstance(node, Assign):
            value = self.evaluate_expression(node.expression, env)
            self.log.debug(f"assign {node.name} = {value.render()}", 2)
            return env.update(node.name, value)
        if isinstance(node, If):
            cond = self.evaluate_expression(node.condition, env)
            truthy = require_boolean(cond, 'if')
            self.log.debug(f"if condition {node.condition.render()} -> {cond.render()}", 3)
            if truthy:
                return self.execute(node.consequence, env)
            return self.execute(node.alternative, env)
        if isinstance(node, Sequence):
            return self.execute(node.second, self.execute(node.first, env))
        if isinstance(node, While):
            iterations = 0
            while True:
                cond = self.evaluate_expression(node.condition, env)
                if not require_boolean(cond, 'while'):
                    break
                env = self.execute(node.body, env)
                iterations += 1
            self.log.debug(f"while {node.condition.render()} finished after {iterations} iterations", 2)
            return env
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate_expression(self, node: Expression, env: Environment) -> Value:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Variable):
            return env.lookup(node.name)
        if isinstance(node, BinaryOp):
            left = self.evaluate_expression(node.left, env)
            right = self.evaluate_expression(node.right, env)
            result = apply_binary_op(node, left, right)
            self.log.debug(f"{left.render()} {node.symbol} {right.render()} -> {result.render()}", 3)
            return result
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def run(self, program: Statement, env: Optional[Environment] = None) -> Environment:
        """Execute a whole program, starting from the empty environment by default."""
        if env is None:
            env = Environment.empty()
        self.log.debug(f"big-step run {program.inspect()}")
        try:
            result = self.execute(program, env)
            self.log.debug(f"big-step result {result.render()}")
            return result
        finally:
            self.log.close()


def evaluate(node: Node, env: Optional[Environment] = None) -> Union[Value, Environment]:
    """Convenience function: evaluate an expression or statement with a fresh evaluator."""
    if env is None:
        env = Environment.empty()
    return Evaluator().evaluate(node, env)
