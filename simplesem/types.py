"""Value definitions and the rendering capability for SIMPLE.

Every term of the language (values, expressions, statements) and the
environment share the `Printable` capability: `render` produces the
literal syntax and `inspect` wraps it in guillemets so that traces can
tell terms apart from the surrounding text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


class Printable:
    """Mixin for anything that can be shown in a reduction trace."""

    def render(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not implement render")

    def inspect(self) -> str:
        return f"«{self.render()}»"


@dataclass(frozen=True)
class Number(Printable):
    """An integer value."""
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(Printable):
    """A truth value. Rendered the way the language spells it."""
    value: bool

    def render(self) -> str:
        return 'true' if self.value else 'false'


Value = Union[Number, Boolean]


def type_name(value: Any) -> str:
    """Return the SIMPLE type name of a runtime value."""
    if isinstance(value, Number):
        return 'Number'
    if isinstance(value, Boolean):
        return 'Boolean'
    return type(value).__name__
