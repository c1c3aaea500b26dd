from __future__ import annotations
import pytest

from ddlpda.lex import SymbolKind, LexicalSymbol, Pattern, PatternTable, Tokenizer, format_symbols
from ddlpda.grammar.ddl import DDL_PATTERNS, build_tokenizer
from ddlpda.errors import NoLexicalMatch, LexError

K, I, N, O, S, W = (SymbolKind.KEYWORD, SymbolKind.IDENTIFIER, SymbolKind.NUMBER,
                    SymbolKind.OPERATOR, SymbolKind.STRING, SymbolKind.WHITESPACE)


def _kt(symbols):
    return [(s.kind, s.text) for s in symbols]


def test_scenario_a_symbols():
    syms = build_tokenizer().tokenize("ALTER TABLE Table1 DROP COLUMN Email")
    assert _kt(syms) == [
        (K, "ALTER TABLE"), (I, "Table1"), (K, "DROP COLUMN"), (I, "Email"),
    ]
    assert [s.start for s in syms] == [0, 12, 19, 31]
    assert [s.length for s in syms] == [11, 6, 11, 5]


def test_keyword_wins_over_identifier():
    syms = build_tokenizer().tokenize("ALTER TABLE")
    assert _kt(syms) == [(K, "ALTER TABLE")]


def test_keyword_requires_word_boundary():
    syms = build_tokenizer().tokenize("ALTER TABLES")
    assert _kt(syms) == [(I, "ALTER"), (I, "TABLES")]


def test_keyword_match_is_case_insensitive():
    syms = build_tokenizer().tokenize("alter table t")
    assert _kt(syms) == [(K, "alter table"), (I, "t")]


def test_leading_digit_is_number_then_identifier():
    syms = build_tokenizer().tokenize("1Table")
    assert _kt(syms) == [(N, "1"), (I, "Table")]


def test_other_kinds():
    syms = build_tokenizer().tokenize("x = 'a b', (42)*")
    assert _kt(syms) == [
        (I, "x"), (O, "="), (S, "'a b'"), (O, ","), (O, "("), (N, "42"), (O, ")"), (O, "*"),
    ]


def test_identifier_allows_dots_and_underscores():
    syms = build_tokenizer().tokenize("db.tbl_1")
    assert _kt(syms) == [(I, "db.tbl_1")]


@pytest.mark.parametrize("text", [
    "ALTER TABLE Table1 DROP COLUMN Email",
    "  ALTER TABLE\tT \n DROP COLUMN   c  ",
    "x='y'  , 12 ",
    "",
])
def test_scan_rebuilds_source(text):
    tk = build_tokenizer()
    pieces = list(tk.scan(text))
    assert "".join(p.text for p in pieces) == text
    pos = 0
    for p in pieces:
        assert p.start == pos
        pos = p.end
    assert pos == len(text)


def test_whitespace_not_emitted_but_advances():
    text = "   ALTER TABLE    t"
    tk = build_tokenizer()
    syms = tk.tokenize(text)
    assert all(s.kind is not W for s in syms)
    assert syms[0].start == 3
    assert syms[1].start == 18
    assert any(s.kind is W and s.length == 4 for s in tk.scan(text))


def test_no_lexical_match_reports_offset():
    with pytest.raises(NoLexicalMatch) as ei:
        build_tokenizer().tokenize("ALTER TABLE Table1 DROP COLUMN Email;")
    assert ei.value.offset == 36
    assert "offset 36" in str(ei.value)
    assert "^" in str(ei.value)
    assert isinstance(ei.value, LexError)
    assert isinstance(ei.value, SyntaxError)


def test_empty_matches_are_ignored():
    table = PatternTable([
        Pattern(SymbolKind.NUMBER, r"[0-9]*"),
        Pattern(SymbolKind.IDENTIFIER, r"[a-z]+"),
    ])
    syms = Tokenizer(table, skip=()).tokenize("ab12")
    assert _kt(syms) == [(I, "ab"), (N, "12")]


def test_priority_order_is_configurable():
    # identifier first: the keyword can never be produced
    table = PatternTable.from_pairs([
        (I, r"[A-Za-z]+"),
        (K, r"ALTER TABLE"),
        (W, r"\s+"),
    ])
    syms = Tokenizer(table).tokenize("ALTER TABLE")
    assert _kt(syms) == [(I, "ALTER"), (I, "TABLE")]


def test_pattern_table_rejects_duplicate_kind():
    with pytest.raises(ValueError):
        PatternTable.from_pairs([(I, "a"), (I, "b")])


def test_pattern_table_rejects_empty_and_bad_flags():
    with pytest.raises(ValueError):
        PatternTable([])
    with pytest.raises(ValueError):
        Pattern(I, "a", flags="q")


def test_ddl_pattern_order():
    assert DDL_PATTERNS.kinds == [K, I, N, O, S, W]
    assert len(DDL_PATTERNS) == 6


def test_format_symbols():
    out = format_symbols([LexicalSymbol(I, "Email", 31)])
    header, row = out.splitlines()
    assert header.split() == ["Token", "Lexeme", "Start", "Length"]
    assert row.split() == ["ID", "Email", "31", "5"]
