"""Code generation: emit JavaScript for a list of statements."""

from __future__ import annotations

from typing import Iterable

from .parser import AssignStatement, PrintStatement, Statement


def generate_js(statements: Iterable[Statement]) -> str:
    """Return JavaScript source, one line per statement."""
    lines = []
    for stmt in statements:
        expression = " ".join(tok.lexeme for tok in stmt.expression_tokens)
        if isinstance(stmt, AssignStatement):
            lines.append(f"let {stmt.var_name} = {expression};\n")
        elif isinstance(stmt, PrintStatement):
            lines.append(f"console.log({expression});\n")
    return "".join(lines)