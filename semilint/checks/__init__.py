"""Registry of analysis checks."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

from ..errors import UnknownCheckError
from ..issues import Issue
from ..syntax import NodeKind, SyntaxNode

from . import unnecessary_semicolon


class Check(Protocol):
    """A check module: the node kinds it visits and its visitor."""

    NAME: str
    TOKENS: frozenset[NodeKind]

    def visit(self, node: SyntaxNode) -> list[Issue]: ...


CHECKS: dict[str, Check] = {
    unnecessary_semicolon.NAME: unnecessary_semicolon,
}


def resolve_checks(names: Optional[Iterable[str]] = None) -> list[Check]:
    """Look up checks by name; all registered checks when ``names`` is None."""
    if names is None:
        return list(CHECKS.values())

    resolved = []
    for name in names:
        check = CHECKS.get(name)
        if check is None:
            raise UnknownCheckError(name, sorted(CHECKS))
        if check not in resolved:
            resolved.append(check)
    return resolved


__all__ = ["CHECKS", "Check", "resolve_checks"]
