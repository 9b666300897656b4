import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from monkey import lex_cli  # noqa: E402


def test_lexes_file(tmp_path, capsys):
    src = tmp_path / "prog.mk"
    src.write_text("let five = 5;\n", encoding="utf-8")
    assert lex_cli.main([str(src)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "LET\t'let'",
        "IDENT\t'five'",
        "ASSIGN\t'='",
        "INT\t'5'",
        "SEMICOLON\t';'",
        "EOF\t''",
    ]


def test_missing_file(tmp_path, capsys):
    assert lex_cli.main([str(tmp_path / "nope.mk")]) == 1
    assert "[monkey-lex:error] file not found" in capsys.readouterr().out


def test_illegal_character_is_a_token_by_default(tmp_path, capsys):
    src = tmp_path / "bad.mk"
    src.write_text("x @ y", encoding="utf-8")
    assert lex_cli.main([str(src)]) == 0
    assert "ILLEGAL\t''" in capsys.readouterr().out


def test_strict_rejects_illegal_character(tmp_path, capsys):
    src = tmp_path / "bad.mk"
    src.write_text("x @ y", encoding="utf-8")
    assert lex_cli.main([str(src), "--strict"]) == 1
    out = capsys.readouterr().out
    assert "lexer error: Illegal character '@' at offset 2" in out


def test_verbose_progress(tmp_path, capsys):
    src = tmp_path / "prog.mk"
    src.write_text("1 + 2", encoding="utf-8")
    assert lex_cli.main([str(src), "-v"]) == 0
    out = capsys.readouterr().out
    assert "[monkey-lex] lexing" in out
    assert "[monkey-lex] 4 tokens..." in out
