"""
semilint: syntactic checks for Java sources.

Java files are parsed with tree-sitter, converted into a read-only
``SyntaxNode`` tree and handed to the registered checks. The bundled
check reports unnecessary semicolons after type member declarations.

Example:
    from semilint import lint_source

    for issue in lint_source("class A { void m() {}; }"):
        print(issue.format("A.java"))
"""

from semilint.checks import CHECKS, resolve_checks
from semilint.config import ANALYSIS_NAME, ANALYSIS_VERSION, LintConfig
from semilint.errors import SemilintError, SourceReadError, UnknownCheckError
from semilint.finder import SemicolonFinder, lint_file, lint_source
from semilint.issues import Issue, make_issue
from semilint.syntax import (
    NodeKind,
    SyntaxNode,
    build_syntax_tree,
    is_in_enum_block,
    is_outermost_type,
    is_type_definition,
)

__version__ = ANALYSIS_VERSION

__all__ = [
    # Running checks
    "SemicolonFinder",
    "lint_source",
    "lint_file",
    "CHECKS",
    "resolve_checks",
    "LintConfig",

    # Findings
    "Issue",
    "make_issue",

    # Syntax tree
    "NodeKind",
    "SyntaxNode",
    "build_syntax_tree",
    "is_in_enum_block",
    "is_outermost_type",
    "is_type_definition",

    # Errors
    "SemilintError",
    "SourceReadError",
    "UnknownCheckError",
]
