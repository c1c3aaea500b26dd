# ddlpda/errors.py
"""Recognition errors.

All failures derive from `SyntaxError` so a driver can catch one type and show
a friendly message. Each error keeps enough structured context (offset, kind,
state, terminal) for callers that want more than the text.

    RecognitionError
    ├── LexError
    │   └── NoLexicalMatch
    ├── TerminalMappingError
    │   ├── UnmappedKeyword
    │   └── UnsupportedSymbolKind
    └── ParseError
        ├── UnexpectedTerminal
        ├── NoTableEntry
        ├── UnconsumedObligations
        └── UnconsumedInput
"""

from __future__ import annotations
from typing import Any, Sequence, Tuple


def name_of(v: Any) -> str:
    """Enum members show their value (e.g. '<ALTER TABLE>'), anything else str()."""
    return str(getattr(v, "value", v))


class RecognitionError(SyntaxError):
    pass


# ---- lex ----

class LexError(RecognitionError):
    pass


class NoLexicalMatch(LexError):
    def __init__(self, offset: int, snippet: str = ""):
        msg = f"Lexing error: no pattern matches at offset {offset}"
        if snippet:
            msg += "\n" + snippet
        super().__init__(msg)
        self.offset = offset


# ---- mapping ----

class TerminalMappingError(RecognitionError):
    pass


class UnmappedKeyword(TerminalMappingError):
    def __init__(self, text: str, symbol: Any = None):
        where = f" at offset {symbol.start}" if symbol is not None else ""
        super().__init__(f"Keyword {text!r}{where} has no terminal")
        self.text = text
        self.symbol = symbol


class UnsupportedSymbolKind(TerminalMappingError):
    def __init__(self, kind: Any, symbol: Any = None):
        where = f" ({symbol.text!r} at offset {symbol.start})" if symbol is not None else ""
        super().__init__(f"Symbol kind {name_of(kind)}{where} is not used by this grammar")
        self.kind = kind
        self.symbol = symbol


# ---- parse ----

class ParseError(RecognitionError):
    pass


class UnexpectedTerminal(ParseError):
    def __init__(self, expected: Any, found: Any):
        super().__init__(f"Parse error: should be {name_of(expected)}, got {name_of(found)}")
        self.expected = expected
        self.found = found


class NoTableEntry(ParseError):
    def __init__(self, state: Any, lookahead: Any, expected: Sequence[Any] = ()):
        msg = f"Parse error: no table entry for {name_of(state)} on {name_of(lookahead)}"
        if expected:
            msg += ", expected one of {" + ", ".join(name_of(t) for t in expected) + "}"
        super().__init__(msg)
        self.state = state
        self.lookahead = lookahead
        self.expected: Tuple[Any, ...] = tuple(expected)


class UnconsumedObligations(ParseError):
    def __init__(self, pending: Sequence[Any]):
        shown = " ".join(str(s) for s in pending)
        super().__init__(f"Parse error at end of input: still expecting {shown}")
        self.pending: Tuple[Any, ...] = tuple(pending)


class UnconsumedInput(ParseError):
    def __init__(self, remaining: Sequence[Any]):
        shown = " ".join(name_of(t) for t in remaining)
        super().__init__(f"Parse error: input left over after the statement: {shown}")
        self.remaining: Tuple[Any, ...] = tuple(remaining)
