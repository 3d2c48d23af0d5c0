"""Semantic analysis: track declared and used variables."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from .parser import AssignStatement, PrintStatement, Statement
from .tokens import TokenType


@dataclass
class Variable:
    """What the analyzer knows about one variable name."""

    name: str
    declared: bool = False
    used: bool = False


class SemanticAnalyzer:
    """Checks that variables are declared before use and used once declared."""

    def __init__(self, statements: Iterable[Statement]) -> None:
        self.statements: list[Statement] = list(statements)
        self.variables: dict[str, Variable] = {}
        self.errors: list[str] = []

    def analyze(self) -> list[str]:
        """Walk all statements, collect errors and return them."""
        for stmt in self.statements:
            if isinstance(stmt, AssignStatement):
                self._handle_assignment(stmt)
            elif isinstance(stmt, PrintStatement):
                self._handle_usage(stmt.var_name)
        self._check_unused()
        return list(self.errors)

    def _handle_assignment(self, stmt: AssignStatement) -> None:
        variable = self.variables.setdefault(stmt.var_name, Variable(stmt.var_name))
        variable.declared = True
        for tok in stmt.expression_tokens:
            if tok.type is TokenType.IDENTIFIER:
                self._handle_usage(tok.lexeme)

    def _handle_usage(self, name: str) -> None:
        variable = self.variables.get(name)
        if variable is None:
            self.errors.append(f"Variable '{name}' used before declaration")
            self.variables[name] = Variable(name, used=True)
        else:
            variable.used = True

    def _check_unused(self) -> None:
        self.errors.extend(
            f"Variable '{v.name}' declared but never used"
            for v in self.variables.values()
            if v.declared and not v.used
        )

    def has_errors(self) -> bool:
        """Whether any semantic error was found."""
        return bool(self.errors)

    def report_errors(self, file: Optional[TextIO] = None) -> None:
        """Write every error on its own line."""
        out = sys.stdout if file is None else file
        for msg in self.errors:
            print("Semantic Error:", msg, file=out)