# ddlpda/lex/__init__.py
"""ddlpda tokenizer(runtime) - a small lexer driven by an ordered pattern table.

Features
--------
- Every `SymbolKind` owns exactly one pattern; the table is an **ordered** list
- Patterns are anchored at the current scan position (match, never search)
- The **first** kind whose pattern matches wins, not the longest match
  → keyword patterns must come before the identifier pattern
- Skipped kinds (WHITESPACE by default) advance the position but are not emitted


Matching order:
  1) try each pattern of the table in declaration order on the unconsumed suffix
  2) an empty match counts as no match (every step consumes ≥ 1 char)
  3) no pattern matches → NoLexicalMatch(offset)


API
---
- `LexicalSymbol(kind, text, start)` - one emitted symbol
- `PatternTable([...Pattern])`    - immutable, shareable between runs
- `Tokenizer(table).tokenize(text) -> List[LexicalSymbol]`
- `Tokenizer(table).scan(text)`      - every match incl. skipped ones
- `format_symbols(symbols)`          - token/lexeme/start/length listing
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional, Tuple, FrozenSet
import regex as re

from ..errors import NoLexicalMatch


class SymbolKind(Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "ID"
    NUMBER = "NUM"
    OPERATOR = "OPERATOR"
    STRING = "STRING"
    WHITESPACE = "SPACE"

    def __str__(self) -> str:
        return self.value


# --------- Public datatypes ---------

@dataclass(frozen=True)
class LexicalSymbol:
    kind: SymbolKind
    text: str    # raw lexeme
    start: int   # 0-based offset into the source

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def end(self) -> int:
        """Offset where the next scan begins."""
        return self.start + len(self.text)

    def row(self) -> str:
        return f"{str(self.kind):<10} {self.text:<20} {self.start:<8}{self.length:<8}"


# --------- Helpers ---------

_FLAG_MAP = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
    'A': re.ASCII,
}

def _compile_regex(pat: str, flags: str) -> Any:
    f = 0
    for ch in flags:
        if ch not in _FLAG_MAP:
            raise ValueError(f"Unknown pattern flag {ch!r} in {flags!r}")
        f |= _FLAG_MAP[ch]
    return re.compile(pat, f)

def _caret_snippet(src: str, pos: int) -> str:
    """Line containing absolute offset `pos`, with a caret (^) under it."""
    start = src.rfind("\n", 0, pos)
    start = 0 if start < 0 else start + 1
    end = src.find("\n", pos)
    end = len(src) if end < 0 else end
    return f"{src[start:end]}\n{' ' * (pos - start)}^"


# --------- Pattern table ---------

@dataclass(frozen=True)
class Pattern:
    kind: SymbolKind
    source: str       # regex text as declared
    flags: str = ""
    compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", _compile_regex(self.source, self.flags))


class PatternTable:
    """
    PatternTable
    ============
    Ordered (SymbolKind, Pattern) pairs. The position in the list *is* the
    priority; ties between kinds are broken by it and nothing else.

    - One pattern per kind; declaring a kind twice raises ValueError.
    - Read-only after construction, so one table can serve any number of
      tokenizers and runs.
    """

    def __init__(self, patterns: Iterable[Pattern]):
        self._patterns: Tuple[Pattern, ...] = tuple(patterns)
        seen = set()
        for p in self._patterns:
            if p.kind in seen:
                raise ValueError(f"Symbol kind {p.kind} declared twice in pattern table")
            seen.add(p.kind)
        if not self._patterns:
            raise ValueError("Pattern table is empty")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[SymbolKind, str]], flags: str = "") -> "PatternTable":
        return cls(Pattern(kind, src, flags) for kind, src in pairs)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    @property
    def kinds(self) -> List[SymbolKind]:
        return [p.kind for p in self._patterns]

    def match(self, rest: str) -> Optional[Tuple[SymbolKind, str]]:
        """First kind whose pattern matches at offset 0 of `rest`, or None."""
        for p in self._patterns:
            m = p.compiled.match(rest)
            if m and m.end() > 0:
                return p.kind, m.group(0)
        return None


# --------- Core implementation ---------

class Tokenizer:
    """Drives a `PatternTable` over a whole string, left to right from offset 0."""

    def __init__(self,
            patterns: PatternTable,
            skip: Iterable[SymbolKind] = (SymbolKind.WHITESPACE,)):
        self._patterns = patterns
        self._skip: FrozenSet[SymbolKind] = frozenset(skip)

    @property
    def patterns(self) -> PatternTable:
        return self._patterns

    def next_match(self, text: str, pos: int) -> Optional[Tuple[SymbolKind, str]]:
        return self._patterns.match(text[pos:])

    def scan(self, text: str) -> Iterator[LexicalSymbol]:
        """Yield every match in order, skipped kinds included.

        Concatenating the yielded texts rebuilds `text` exactly.
        """
        pos = 0
        while pos < len(text):
            hit = self.next_match(text, pos)
            if hit is None:
                raise NoLexicalMatch(pos, _caret_snippet(text, pos))
            kind, lexeme = hit
            yield LexicalSymbol(kind, lexeme, pos)
            pos += len(lexeme)

    def tokenize(self, text: str) -> List[LexicalSymbol]:
        return [s for s in self.scan(text) if s.kind not in self._skip]


def format_symbols(symbols: Iterable[LexicalSymbol]) -> str:
    lines = [f"{'Token':<10} {'Lexeme':<20} {'Start':<8}{'Length':<8}"]
    lines.extend(s.row() for s in symbols)
    return "\n".join(lines)
