"""Analysis context shared across checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

import tree_sitter

from .syntax import NodeKind, SyntaxNode, build_syntax_tree
from .utils import iter_nodes, node_text

log = logging.getLogger(__name__)


@dataclass
class AnalysisContext:
    tree: tree_sitter.Tree
    source_bytes: bytes
    root: SyntaxNode = field(init=False)

    def __post_init__(self):
        if self.tree.root_node.has_error:
            self._log_parse_errors()
        self.root = build_syntax_tree(self.tree)

    def text(self, node: tree_sitter.Node | None) -> str:
        return node_text(node, self.source_bytes) if node is not None else ""

    def iter_kind(self, *kinds: NodeKind) -> Iterator[SyntaxNode]:
        """Yield the nodes of the given kinds in source order."""
        for node in self.root.walk():
            if node.kind in kinds:
                yield node

    def _log_parse_errors(self):
        for node in iter_nodes(self.tree.root_node):
            if node.type == "ERROR":
                line, col = node.start_point
                log.warning(
                    "parse error at %d:%d near %r",
                    line + 1,
                    col + 1,
                    self.text(node)[:40],
                )
