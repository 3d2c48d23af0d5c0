from cdlcompiler.cli import main
from cdlcompiler.generator import generate_js
from cdlcompiler.lexer import tokenize
from cdlcompiler.parser import parse

PROGRAM = "BEGIN\n  a = 1;\n  b = a + 2;\n  PRINT b;\nEND\n"


def test_compiles_source_to_output_file(tmp_path, capsys):
    src = tmp_path / "prog.cdl"
    src.write_text(PROGRAM)
    out = tmp_path / "out.js"
    assert main([str(src), "-o", str(out)]) == 0
    assert out.read_text() == generate_js(parse(tokenize(PROGRAM)))
    printed = capsys.readouterr().out
    assert "-------------------- Token Table --------------------" in printed
    assert out.read_text() in printed


def test_prints_token_table_and_ast(tmp_path, capsys):
    src = tmp_path / "prog.cdl"
    src.write_text(PROGRAM)
    assert main([str(src), "-o", str(tmp_path / "out.js")]) == 0
    printed = capsys.readouterr().out
    assert "Token: BEGIN      Lexeme: BEGIN" in printed
    assert "Assign Statement: Variable: a, Expression: [{NUMBER 1}]" in printed
    assert "Print Statement: Variable: , Expression: [{IDENTIFIER b}]" in printed


def test_missing_source_fails(tmp_path, capsys):
    out = tmp_path / "out.js"
    assert main([str(tmp_path / "missing.cdl"), "-o", str(out)]) == 1
    assert "error opening the file" in capsys.readouterr().err
    assert not out.exists()


def test_parse_failure_fails_without_output(tmp_path, capsys):
    src = tmp_path / "bad.cdl"
    src.write_text("a = 1;\n")
    out = tmp_path / "out.js"
    assert main([str(src), "-o", str(out)]) == 1
    captured = capsys.readouterr()
    assert "Expected BEGIN" in captured.out
    assert "Failed to parse source code" in captured.err
    assert not out.exists()