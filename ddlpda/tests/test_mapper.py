from __future__ import annotations
import pytest

from ddlpda.lex import SymbolKind, LexicalSymbol
from ddlpda.ll.mapper import TerminalMapper
from ddlpda.grammar.ddl import Terminal, build_mapper, build_tokenizer
from ddlpda.errors import UnmappedKeyword, UnsupportedSymbolKind, TerminalMappingError


def _word(text):
    return build_mapper().map(build_tokenizer().tokenize(text))


def test_scenario_a_terminals():
    assert _word("ALTER TABLE Table1 DROP COLUMN Email") == [
        Terminal.ALTER_TABLE, Terminal.IDENTIFIER, Terminal.DROP_COLUMN, Terminal.IDENTIFIER,
    ]


def test_scenario_b_terminals():
    assert _word("DROP COLUMN Email") == [Terminal.DROP_COLUMN, Terminal.IDENTIFIER]


def test_scenario_c_number_is_unsupported():
    with pytest.raises(UnsupportedSymbolKind) as ei:
        _word("ALTER TABLE 1Table DROP COLUMN Email")
    assert ei.value.kind is SymbolKind.NUMBER
    assert ei.value.symbol.start == 12
    assert isinstance(ei.value, TerminalMappingError)


@pytest.mark.parametrize("text,kind", [
    ("ALTER TABLE t = x", SymbolKind.OPERATOR),
    ("ALTER TABLE 'quoted'", SymbolKind.STRING),
])
def test_other_kinds_are_rejected(text, kind):
    with pytest.raises(UnsupportedSymbolKind) as ei:
        _word(text)
    assert ei.value.kind is kind


def test_keyword_lookup_is_case_sensitive():
    with pytest.raises(UnmappedKeyword) as ei:
        _word("alter table t drop column c")
    assert ei.value.text == "alter table"
    assert "alter table" in str(ei.value)


def test_empty_sequence_maps_to_empty_word():
    assert build_mapper().map([]) == []


def test_custom_mapping():
    mapper = TerminalMapper({"GO": "go"}, {SymbolKind.NUMBER: "num"})
    syms = [
        LexicalSymbol(SymbolKind.KEYWORD, "GO", 0),
        LexicalSymbol(SymbolKind.NUMBER, "7", 3),
    ]
    assert mapper.map(syms) == ["go", "num"]
    with pytest.raises(UnsupportedSymbolKind):
        mapper.map([LexicalSymbol(SymbolKind.IDENTIFIER, "x", 0)])


def test_keyword_kind_cannot_be_mapped_uniformly():
    with pytest.raises(ValueError):
        TerminalMapper({}, {SymbolKind.KEYWORD: "kw"})
