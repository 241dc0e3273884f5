from typing import Any


class SimpleError(Exception):
    """Root of the errors raised while evaluating or reducing a program."""
    name = 'SimpleError'

    def __init__(self, message: str):
        super().__init__(f"{self.name}: {message}")
        self.message = message


class UnboundVariable(SimpleError):
    """Lookup of a name the environment does not bind."""
    name = 'UnboundVariable'

    def __init__(self, variable: str):
        super().__init__(f'undefined variable {variable}')
        self.variable = variable


class TypeMismatch(SimpleError):
    """An operator or condition received a value of the wrong kind."""
    name = 'TypeMismatch'


class NotReducible(SimpleError):
    """`reduce` was called on a term that has no further step."""
    name = 'NotReducible'

    def __init__(self, term: Any):
        rendered = term.inspect() if hasattr(term, 'inspect') else repr(term)
        super().__init__(f'cannot reduce {rendered}')
        self.term = term
