"""Coordinator that runs the registered checks over one source file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

import tree_sitter

from .checks import resolve_checks
from .context import AnalysisContext
from .errors import SourceReadError
from .issues import Issue
from .utils import create_java_parser
from .walker import TreeWalker

log = logging.getLogger(__name__)


class SemicolonFinder:
    """Wraps the analysis context and executes the selected checks."""

    def __init__(
        self,
        tree: tree_sitter.Tree,
        source_bytes: bytes,
        checks: Optional[Iterable[str]] = None,
    ):
        self.context = AnalysisContext(tree, source_bytes)
        self.walker = TreeWalker(resolve_checks(checks))
        self.issues: list[Issue] = []
        self._run_checks()

    def _run_checks(self):
        self.issues = self.walker.walk(self.context)
        for issue in self.issues:
            log.debug("semicolon: %s", issue)


def lint_source(
    source: str | bytes,
    checks: Optional[Iterable[str]] = None,
) -> list[Issue]:
    """Parse Java source and return the issues found in it."""
    if isinstance(source, str):
        source = source.encode("utf-8")
    tree = create_java_parser().parse(source)
    return SemicolonFinder(tree, source, checks).issues


def lint_file(
    path: str | Path,
    checks: Optional[Iterable[str]] = None,
) -> list[Issue]:
    """Read a Java source file and return the issues found in it."""
    path = Path(path)
    log.debug("parse sourcefile %s", path)
    try:
        source_bytes = path.read_bytes()
    except OSError as e:
        raise SourceReadError(path, e) from e
    return lint_source(source_bytes, checks)
