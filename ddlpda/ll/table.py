# table.py
"""LL(1) parse table: (state, lookahead terminal) -> right-hand side to push."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from .symbols import StackSymbol, Term, is_stack_symbol, EMPTY
from ..errors import NoTableEntry, name_of


@dataclass
class ParseTable:
    """
    ParseTable
    ==========
    Container for the predictive parsing table the stack automaton interprets.

    Fields
    ------
    - entries: (state, terminal) -> tuple of StackSymbol
        * RHS in match order: the first symbol is matched/expanded first
        * an ε-production is `(EMPTY,)`
    - start      : state pushed (on top of the end marker) when a run begins
    - end_marker : terminal the automaton appends to every input word
    - default_productions:
        when a state has exactly one entry and its RHS starts with Term(key),
        `predict` uses it for any lookahead. The mismatch is then reported by
        that terminal (UnexpectedTerminal) instead of NoTableEntry. An ε row,
        or one starting with a State or another terminal, is never a default.

    Usage
    -----
    - The table is plain data; it is read-only once built and may be shared
      across any number of runs.
    - The expected set in error messages is every terminal t with an entry
      (state, t).
    """
    entries: Mapping[Tuple[Any, Any], Sequence[StackSymbol]]
    start: Any
    end_marker: Any
    default_productions: bool = True
    _by_state: Dict[Any, List[Tuple[Any, Tuple[StackSymbol, ...]]]] = field(
        init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        frozen: Dict[Tuple[Any, Any], Tuple[StackSymbol, ...]] = {}
        by_state: Dict[Any, List[Tuple[Any, Tuple[StackSymbol, ...]]]] = {}
        for key, rhs in self.entries.items():
            try:
                state, term = key
            except (TypeError, ValueError):
                raise ValueError(f"Parse table key must be (state, terminal), got {key!r}") from None
            rhs = tuple(rhs)
            for s in rhs:
                if not is_stack_symbol(s):
                    raise ValueError(
                        f"Entry ({name_of(state)}, {name_of(term)}) holds {s!r}; "
                        "expected Term, State or EMPTY")
            frozen[(state, term)] = rhs
            by_state.setdefault(state, []).append((term, rhs))
        self.entries = frozen
        self._by_state = by_state

    # ----- lookup -----
    def lookup(self, state: Any, lookahead: Any) -> Optional[Tuple[StackSymbol, ...]]:
        return self.entries.get((state, lookahead))

    def predict(self, state: Any, lookahead: Any) -> Tuple[StackSymbol, ...]:
        """RHS to push for `state` on `lookahead`; raises NoTableEntry."""
        rhs = self.lookup(state, lookahead)
        if rhs is not None:
            return rhs
        rows = self._by_state.get(state, [])
        if self.default_productions and len(rows) == 1:
            key_term, only = rows[0]
            # the leading terminal is the row key, so it rejects `lookahead` itself
            if only and isinstance(only[0], Term) and only[0].value == key_term:
                return only
        raise NoTableEntry(state, lookahead, self.expected(state))

    def expected(self, state: Any) -> List[Any]:
        return [t for (t, _rhs) in self._by_state.get(state, [])]

    def states(self) -> List[Any]:
        return list(self._by_state)

    def pretty(self, name: Callable[[Any], str] = name_of) -> str:
        """One line per entry: `state, terminal -> rhs`."""
        if not self.entries:
            return "(empty table)"
        lines: List[str] = []
        for (st, term), rhs in self.entries.items():
            body = " ".join(str(s) for s in rhs) if rhs and rhs != (EMPTY,) else "ε"
            lines.append(f"{name(st)}, {name(term)} -> {body}")
        return "\n".join(lines)
