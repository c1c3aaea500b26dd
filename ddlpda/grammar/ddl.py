# ddlpda/grammar/ddl.py
"""`ALTER TABLE <id> DROP COLUMN <id>` - pattern table, keyword map, parse table.

This module is data only. The same lexer and automaton run any other grammar
given a different `PatternTable`, keyword map and `ParseTable`.
"""

from __future__     import annotations
from enum           import Enum

from ..lex          import PatternTable, SymbolKind, Tokenizer
from ..ll.symbols   import Term, State, EMPTY
from ..ll.table     import ParseTable
from ..ll.mapper    import TerminalMapper
from ..ll.runtime   import StackAutomaton


class Terminal(Enum):
    ALTER_TABLE = "<ALTER TABLE>"
    DROP_COLUMN = "<DROP COLUMN>"
    IDENTIFIER = "<id>"
    END_MARKER = "$"


class ParserState(Enum):
    START = "<S>"
    # ALT/EMP only appear in the two ε rows below; nothing pushes them yet.
    ALT = "<ALT>"
    EMP = "<EMP>"


# Priority order matters: KEYWORD must precede IDENTIFIER.
DDL_PATTERNS = PatternTable.from_pairs([
    (SymbolKind.KEYWORD,    r"\b(alter table|drop column)\b"),
    (SymbolKind.IDENTIFIER, r"[A-Za-z][A-Za-z0-9\._]*"),
    (SymbolKind.NUMBER,     r"[0-9]+"),
    (SymbolKind.OPERATOR,   r"[=\(\)\*,]"),
    (SymbolKind.STRING,     r"'[^']*'"),
    (SymbolKind.WHITESPACE, r"\s+"),
], flags="i")

DDL_KEYWORDS = {
    "ALTER TABLE": Terminal.ALTER_TABLE,
    "DROP COLUMN": Terminal.DROP_COLUMN,
}

DDL_KINDS = {
    SymbolKind.IDENTIFIER: Terminal.IDENTIFIER,
}

DDL_TABLE = ParseTable(
    entries={
        (ParserState.START, Terminal.ALTER_TABLE): (
            Term(Terminal.ALTER_TABLE),
            Term(Terminal.IDENTIFIER),
            Term(Terminal.DROP_COLUMN),
            Term(Terminal.IDENTIFIER),
        ),
        (ParserState.ALT, Terminal.END_MARKER): (EMPTY,),
        (ParserState.EMP, Terminal.IDENTIFIER): (EMPTY,),
    },
    start=ParserState.START,
    end_marker=Terminal.END_MARKER,
)


def build_tokenizer() -> Tokenizer:
    return Tokenizer(DDL_PATTERNS)

def build_mapper() -> TerminalMapper:
    return TerminalMapper(DDL_KEYWORDS, DDL_KINDS)

def build_automaton() -> StackAutomaton:
    return StackAutomaton(DDL_TABLE)
