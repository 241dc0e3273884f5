"""Primitive operations shared by the big-step and small-step semantics."""

from __future__ import annotations

from .ast import Add, BinaryOp, LessThan, Multiply
from .errors import TypeMismatch
from .types import Boolean, Number, Value, type_name


def apply_binary_op(node: BinaryOp, a: Value, b: Value) -> Value:
    """Combine two fully evaluated operands of `node`.

    Only numbers take part in arithmetic and comparison; anything else
    is a type mismatch.
    """
    if not isinstance(a, Number) or not isinstance(b, Number):
        raise TypeMismatch(f'unsupported {node.symbol} for {type_name(a)} and {type_name(b)}')
    if isinstance(node, Add):
        return Number(a.value + b.value)
    if isinstance(node, Multiply):
        return Number(a.value * b.value)
    if isinstance(node, LessThan):
        return Boolean(a.value < b.value)
    raise NotImplementedError(f"apply_binary_op: unexpected node type {type(node)}")


def require_boolean(value: Value, context: str) -> bool:
    if not isinstance(value, Boolean):
        raise TypeMismatch(f'{context} condition must be Boolean, got {type_name(value)}')
    return value.value
