"""Shared utilities for Tree-sitter parsing and node helpers."""

from __future__ import annotations

from typing import Iterator

import tree_sitter
import tree_sitter_java

JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())

COMMENT_TYPES = frozenset({"comment", "line_comment", "block_comment"})


def create_java_parser() -> tree_sitter.Parser:
    """
    Create a Tree-sitter parser configured for Java.

    Supports both the modern bindings (Parser(language)) and older
    releases that expect ``set_language`` after construction.
    """

    try:
        parser = tree_sitter.Parser(JAVA_LANGUAGE)
    except TypeError:
        parser = tree_sitter.Parser()
        parser.set_language(JAVA_LANGUAGE)
    return parser


def node_text(node: tree_sitter.Node, source_bytes: bytes) -> str:
    """Decode the bytes that correspond to a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def is_trivia(node: tree_sitter.Node) -> bool:
    """Comments and parser-inserted placeholder tokens carry no structure."""
    return node.type in COMMENT_TYPES or node.is_missing


def iter_nodes(root: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    """Iterative preorder traversal of the syntax tree."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
