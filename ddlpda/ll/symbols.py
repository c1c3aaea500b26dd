"""Stack symbols for the LL(1) automaton."""
from __future__     import annotations
from dataclasses    import dataclass
from typing         import Any, Union

from ..errors       import name_of


@dataclass(frozen=True)
class Term:
    """A terminal the automaton must match against the lookahead."""
    value: Any

    def __str__(self) -> str:
        return name_of(self.value)


@dataclass(frozen=True)
class State:
    """A nonterminal obligation, expanded through the parse table."""
    value: Any

    def __str__(self) -> str:
        return name_of(self.value)


class _Empty:
    """Right-hand side of an ε-production. Popping it is a no-op."""
    _inst = None

    def __new__(cls):
        if cls._inst is None:
            cls._inst = super().__new__(cls)
        return cls._inst

    def __repr__(self) -> str:
        return "EMPTY"

    def __str__(self) -> str:
        return "ε"

    def __reduce__(self):
        return (_Empty, ())


EMPTY = _Empty()

StackSymbol = Union[Term, State, _Empty]


def is_stack_symbol(x: Any) -> bool:
    return isinstance(x, (Term, State, _Empty))


def describe(sym: StackSymbol) -> str:
    return str(sym)
