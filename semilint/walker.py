"""Dispatch syntax nodes to the checks registered for their kind."""

from __future__ import annotations

import logging
from collections import defaultdict

from .checks import Check
from .context import AnalysisContext
from .issues import Issue
from .syntax import NodeKind

log = logging.getLogger(__name__)


class TreeWalker:
    """
    Visits every node of a tree once per check that registered its kind.

    Issues come back sorted by position; a position reported twice under
    the same key is kept once.
    """

    def __init__(self, checks: list[Check]):
        self.checks = list(checks)
        self._by_kind: dict[NodeKind, list[Check]] = defaultdict(list)
        for check in self.checks:
            for kind in check.TOKENS:
                self._by_kind[kind].append(check)

    def walk(self, ctx: AnalysisContext) -> list[Issue]:
        issues: list[Issue] = []
        seen: set[tuple[str, int, int]] = set()

        for node in ctx.iter_kind(*self._by_kind):
            for check in self._by_kind[node.kind]:
                for issue in check.visit(node):
                    key = (issue.kind, issue.line, issue.col)
                    if key in seen:
                        log.debug("duplicate %s suppressed", issue)
                        continue
                    seen.add(key)
                    issues.append(issue)

        issues.sort(key=lambda issue: (issue.line, issue.col))
        return issues
