"""Projects lexical symbols onto the parser's terminal alphabet."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping

from ..lex import LexicalSymbol, SymbolKind
from ..errors import UnmappedKeyword, UnsupportedSymbolKind


class TerminalMapper:
    """
    TerminalMapper
    ==============
    - KEYWORD symbols: exact (case-sensitive) text lookup in `keywords`
      → missing text is an UnmappedKeyword error
    - kinds listed in `kinds` (e.g. IDENTIFIER): mapped uniformly, the lexeme
      is dropped; the automaton only looks at the terminal
    - anything else is rejected with UnsupportedSymbolKind, never dropped

    Order is preserved. The end marker is *not* appended here; the automaton
    adds it when a run starts.
    """

    def __init__(self,
            keywords: Mapping[str, Any],
            kinds: Mapping[SymbolKind, Any]):
        if SymbolKind.KEYWORD in kinds:
            raise ValueError("KEYWORD symbols are mapped by text, not by kind")
        self._keywords: Dict[str, Any] = dict(keywords)
        self._kinds: Dict[SymbolKind, Any] = dict(kinds)

    def map_symbol(self, sym: LexicalSymbol) -> Any:
        if sym.kind is SymbolKind.KEYWORD:
            try:
                return self._keywords[sym.text]
            except KeyError:
                raise UnmappedKeyword(sym.text, sym) from None
        try:
            return self._kinds[sym.kind]
        except KeyError:
            raise UnsupportedSymbolKind(sym.kind, sym) from None

    def map(self, symbols: Iterable[LexicalSymbol]) -> List[Any]:
        return [self.map_symbol(s) for s in symbols]
