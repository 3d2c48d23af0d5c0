"""Command-line driver running every compiler stage in turn."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .generator import generate_js
from .lexer import Lexer
from .parser import AssignStatement, ParseError, Parser, PrintStatement
from .reader import SourceReadError, read_file
from .semantic import SemanticAnalyzer

DEFAULT_SOURCE = "example/source.cdl"
DEFAULT_OUTPUT = "index.js"


def _format_tokens(tokens) -> str:
    return "[" + " ".join(str(tok) for tok in tokens) + "]"


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compile a CDL program to JavaScript.")
    parser.add_argument("source", nargs="?", default=DEFAULT_SOURCE, help="source file")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="output file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compile a source file, print each stage and write the JavaScript."""
    args = _build_arg_parser().parse_args(argv)

    try:
        text = read_file(args.source)
    except SourceReadError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("-------------------- Source Code --------------------")
    print(text)

    print("Running lexical analysis...")
    tokens = Lexer(text).tokenize()

    print("-------------------- Token Table --------------------")
    for tok in tokens:
        print(f"Token: {tok.type.value:<10} Lexeme: {tok.lexeme}")

    print("\nRunning syntactic analysis...")
    try:
        ast = Parser(tokens).parse_program()
    except ParseError as exc:
        print(exc)
        print("Failed to parse source code", file=sys.stderr)
        return 1

    print("-------------------- Abstract Syntax Tree (AST) --------------------")
    for stmt in ast:
        expression = _format_tokens(stmt.expression_tokens)
        if isinstance(stmt, AssignStatement):
            print(f"Assign Statement: Variable: {stmt.var_name}, Expression: {expression}")
        elif isinstance(stmt, PrintStatement):
            print(f"Print Statement: Variable: {stmt.var_name}, Expression: {expression}")
        else:
            print("Unknown statement type in AST")

    print("\nRunning semantic analysis...")
    SemanticAnalyzer(ast).analyze()

    print("\nGenerating JavaScript code...")
    compiled = generate_js(ast)
    print("-------------------- Compiled Code --------------------")
    print(compiled)

    Path(args.output).write_text(compiled, encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())