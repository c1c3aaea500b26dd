# ddlpda/ddlc.py
"""ddlc – ddlpda CLI

Usage)
    $ python -m ddlpda.ddlc lex   --text "ALTER TABLE Table1 DROP COLUMN Email"
    $ python -m ddlpda.ddlc check --text "ALTER TABLE Table1 DROP COLUMN Email" -D
    $ python -m ddlpda.ddlc check --input stmt.sql
    $ python -m ddlpda.ddlc table

Commands
--------
- lex   : tokenize the statement and print the symbol table
- check : tokenize → map to terminals → run the stack automaton
- table : print the parse table of the DDL grammar

With debug mode (-D/--debug) `check` also writes the symbol table, the
terminal word and the automaton trace (stack / remaining input) to stderr.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

# ------------------------------
# Helpers
# ------------------------------

_RULE = "-------------------------------------"

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_source(args) -> str:
    if args.text is not None:
        return args.text
    from .grammar.loader import load_statement_text
    return load_statement_text(args.input)


def _add_source(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="statement text")
    src_group.add_argument("--input", help="path of a file holding the statement")

# ------------------------------
# Commands
# ------------------------------

def cmd_lex(args) -> int:
    from .grammar.ddl import build_tokenizer
    from .lex import format_symbols
    try:
        text = _read_source(args)
        symbols = build_tokenizer().tokenize(text)
    except SyntaxError as e:
        _eprint("[LEX ERROR]", str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2
    print(format_symbols(symbols))
    return 0


def cmd_check(args) -> int:
    from .grammar.ddl import build_tokenizer, build_mapper, build_automaton
    from .lex import format_symbols
    from .ll.runtime import TraceRecord

    trace: List[TraceRecord] = []
    try:
        text = _read_source(args)
        if args.debug:
            _eprint(text)
            _eprint(_RULE)
        symbols = build_tokenizer().tokenize(text)
        if args.debug:
            _eprint(format_symbols(symbols))
            _eprint(_RULE)
        word = build_mapper().map(symbols)
        if args.debug:
            _eprint("".join(t.value for t in word))
            _eprint(_RULE)
        build_automaton().analyze(word, trace)
    except SyntaxError as e:
        if args.debug:
            for rec in trace:
                _eprint(rec.render())
        _eprint("[REJECT]", type(e).__name__)
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

    if args.debug:
        for rec in trace:
            _eprint(rec.render())
    print(f"[ACCEPT] terminals={len(word)} steps={len(trace)}")
    return 0


def cmd_table(args) -> int:
    from .grammar.ddl import DDL_TABLE
    print(f"start={DDL_TABLE.start.value} end={DDL_TABLE.end_marker.value}")
    print(DDL_TABLE.pretty())
    return 0

# ------------------------------
# Entry point
# ------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="ddlc", description="ALTER TABLE ... DROP COLUMN recognizer")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_lex = sub.add_parser("lex", help="tokenize the statement and print the symbol table")
    _add_source(p_lex)
    p_lex.set_defaults(func=cmd_lex)

    p_check = sub.add_parser("check", help="run the full recognizer on the statement")
    _add_source(p_check)
    p_check.add_argument("-D", "--debug", action="store_true", help="print symbols, terminals and the automaton trace")
    p_check.set_defaults(func=cmd_check)

    p_table = sub.add_parser("table", help="print the parse table")
    p_table.set_defaults(func=cmd_table)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
