"""Statement file loader for `ddlc --input`."""

from __future__ import annotations
from pathlib    import Path


def load_statement_text(path: str) -> str:
    """
    Read one DDL statement (e.g. `ALTER TABLE t DROP COLUMN c`) from a UTF-8
    file. CRLF/CR become '\\n'; the tokenizer treats them as whitespace.
    Nothing else is stripped, so a trailing ';' still reaches the tokenizer
    and is reported as NoLexicalMatch.
    """
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")
