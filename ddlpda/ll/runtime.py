# ddlpda/ll/runtime.py
"""LL(1) parser runtime (stack automaton).

- Takes a `ParseTable` and a terminal sequence and decides **accept/reject**.
- The automaton keeps its own explicit stack of pending obligations; there is
  no recursion, so depth is bounded by memory only.
- On failure a typed `ParseError` is raised, naming the expected and the
  actual terminal (or state), as the table sees them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .symbols import Term, State, EMPTY, StackSymbol, describe
from .table import ParseTable
from ..errors import UnexpectedTerminal, UnconsumedObligations, UnconsumedInput, name_of


@dataclass(frozen=True)
class TraceRecord:
    """Snapshot after one stack mutation.

    stack     : bottom → top
    remaining : terminals not yet consumed (end marker included)
    """
    stack: Tuple[StackSymbol, ...]
    remaining: Tuple[Any, ...]

    def render(self) -> str:
        stack = "".join(describe(s) for s in self.stack)
        rest = "".join(name_of(t) for t in self.remaining)
        return f"{stack:<20} \t {rest}"


class StackAutomaton:
    """
    StackAutomaton
    ==============
    Predictive pushdown automaton interpreting a `ParseTable`.

    Initial stack (bottom → top): `[Term(end_marker), State(start)]`.
    A caller-supplied word may end with the end marker; one anywhere else is
    reported as UnconsumedInput before the run starts.

    Step relation, repeated while input (end marker included) remains:
      - stack empty            → UnconsumedInput
      - pop EMPTY              → no-op
      - pop Term(t)            → must equal the lookahead, which is consumed
          * t is the end marker but the lookahead is not → UnconsumedInput
          * lookahead is the end marker but t is not     → UnconsumedObligations
          * otherwise                                    → UnexpectedTerminal
      - pop State(s)           → push table.predict(s, lookahead) reversed
    Once the word is consumed, anything but EMPTY left on the stack is an
    UnconsumedObligations error.
    """

    def __init__(self, table: ParseTable):
        self.table = table

    def steps(self, terminals: Iterable[Any]) -> Iterator[TraceRecord]:
        """Run the automaton, yielding a `TraceRecord` after every mutation."""
        end = self.table.end_marker
        word: List[Any] = list(terminals)
        if word and word[-1] == end:
            word.pop()
        # only a final end marker is allowed
        for j, t in enumerate(word):
            if t == end:
                raise UnconsumedInput(word[j:])
        word.append(end)

        stack: List[StackSymbol] = [Term(end), State(self.table.start)]
        i = 0
        yield TraceRecord(tuple(stack), tuple(word[i:]))

        while i < len(word):
            if not stack:
                raise UnconsumedInput(word[i:-1] or word[i:])
            top = stack.pop()
            look = word[i]

            if top is EMPTY:
                pass
            elif isinstance(top, Term):
                if top.value != look:
                    if top.value == end:
                        raise UnconsumedInput(word[i:-1])
                    if look == end:
                        raise UnconsumedObligations(self._pending(top, stack))
                    raise UnexpectedTerminal(top.value, look)
                i += 1
            elif isinstance(top, State):
                rhs = self.table.predict(top.value, look)
                stack.extend(reversed(rhs))
            else:
                raise TypeError(f"Unknown stack symbol: {top!r}")

            yield TraceRecord(tuple(stack), tuple(word[i:]))

        leftover = [s for s in stack if s is not EMPTY]
        if leftover:
            raise UnconsumedObligations(list(reversed(leftover)))

    def analyze(self, terminals: Iterable[Any], trace: Optional[List[TraceRecord]] = None) -> bool:
        """Accept (True) or raise a ParseError.

        Parameters
        ----------
        terminals : Iterable
            Word produced by the terminal mapper (no end marker needed).
        trace : list, optional
            When given, every `TraceRecord` is appended to it, including the
            ones leading up to a failure.
        """
        for rec in self.steps(terminals):
            if trace is not None:
                trace.append(rec)
        return True

    def _pending(self, top: StackSymbol, stack: List[StackSymbol]) -> List[StackSymbol]:
        """Obligations still open, top first, without ε and the end marker."""
        end = self.table.end_marker
        out = [top] + list(reversed(stack))
        return [s for s in out if s is not EMPTY and s != Term(end)]


def analyze(terminals: Iterable[Any], table: ParseTable,
            trace: Optional[List[TraceRecord]] = None) -> bool:
    return StackAutomaton(table).analyze(terminals, trace)
