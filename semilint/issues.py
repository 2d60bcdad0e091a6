"""Issue data model for check findings."""

from __future__ import annotations

from dataclasses import dataclass

from .syntax import SyntaxNode


@dataclass(frozen=True)
class Issue:
    """Structured representation of a detected violation."""

    kind: str
    line: int
    col: int
    message: str

    def format(self, path: str = "") -> str:
        prefix = f"{path}:" if path else ""
        return f"{prefix}{self.line}:{self.col}: {self.message} [{self.kind}]"


def make_issue(kind: str, node: SyntaxNode, message: str) -> Issue:
    """Create an Issue anchored at the node's (already 1-based) position."""
    return Issue(kind=kind, line=node.line, col=node.column, message=message)
