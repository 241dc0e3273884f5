from typing import Dict, Iterator, Optional, Tuple

from simplesem.errors import UnboundVariable
from simplesem.types import Printable, Value


class Environment(Printable):
    """Persistent mapping from variable names to values.

    An environment is never changed after construction: `update` copies
    the bindings into a new instance, so every term in a trace can keep
    holding the environment it was reduced against.
    """

    def __init__(self, bindings: Optional[Dict[str, Value]] = None):
        self._bindings: Dict[str, Value] = dict(bindings) if bindings else {}

    @classmethod
    def empty(cls) -> 'Environment':
        return cls()

    @property
    def bindings(self) -> Dict[str, Value]:
        # a copy, so callers cannot reach into a shared environment
        return dict(self._bindings)

    def lookup(self, name: str) -> Value:
        try:
            return self._bindings[name]
        except KeyError:
            raise UnboundVariable(name) from None

    def update(self, name: str, value: Value) -> 'Environment':
        new_bindings = self._bindings.copy()
        new_bindings[name] = value
        return Environment(new_bindings)

    def items(self) -> Iterator[Tuple[str, Value]]:
        for name in sorted(self._bindings):
            yield name, self._bindings[name]

    def render(self) -> str:
        if not self._bindings:
            return '{}'
        pairs = ', '.join(f"{name}={value.render()}" for name, value in self.items())
        return '{ ' + pairs + ' }'

    def __contains__(self, name: str) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._bindings == other._bindings

    def __hash__(self) -> int:
        return hash(frozenset(self._bindings.items()))

    def __repr__(self) -> str:
        return f"Environment({self._bindings})"
