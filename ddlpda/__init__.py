"""ddlpda - pattern tokenizer + table-driven LL(1) stack automaton.

Pipeline::

    text ──tokenize──▶ [LexicalSymbol] ──map_terminals──▶ [Terminal] ──analyze──▶ accept / ParseError

Every stage takes its configuration as an argument and falls back to the
`ALTER TABLE <id> DROP COLUMN <id>` grammar in `ddlpda.grammar.ddl`.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Optional

from .errors import (
    RecognitionError, LexError, NoLexicalMatch,
    TerminalMappingError, UnmappedKeyword, UnsupportedSymbolKind,
    ParseError, UnexpectedTerminal, NoTableEntry, UnconsumedObligations, UnconsumedInput,
)
from .lex import SymbolKind, LexicalSymbol, Pattern, PatternTable, Tokenizer
from .ll import Term, State, EMPTY, ParseTable, TerminalMapper, StackAutomaton, TraceRecord
from .grammar import ddl as _ddl


def tokenize(source: str, patterns: Optional[PatternTable] = None) -> List[LexicalSymbol]:
    return Tokenizer(_ddl.DDL_PATTERNS if patterns is None else patterns).tokenize(source)

def map_terminals(symbols: Iterable[LexicalSymbol],
                  mapper: Optional[TerminalMapper] = None) -> List[Any]:
    return (_ddl.build_mapper() if mapper is None else mapper).map(symbols)

def analyze(terminals: Iterable[Any], table: Optional[ParseTable] = None,
            trace: Optional[List[TraceRecord]] = None) -> bool:
    return StackAutomaton(_ddl.DDL_TABLE if table is None else table).analyze(terminals, trace)

def recognize(source: str, trace: Optional[List[TraceRecord]] = None) -> bool:
    """Full DDL pipeline: tokenize, map, analyze. Raises a RecognitionError on reject."""
    return analyze(map_terminals(tokenize(source)), trace=trace)
