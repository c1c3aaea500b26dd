"""Table-driven LL(1) engine: stack symbols, parse table, terminal mapper and
the stack automaton that interprets the table.

Nothing in this package knows about a particular grammar; terminals and
states are whatever hashable values the supplied table uses.
"""

from .symbols import Term, State, EMPTY, StackSymbol, describe
from .table import ParseTable
from .mapper import TerminalMapper
from .runtime import StackAutomaton, TraceRecord, analyze
