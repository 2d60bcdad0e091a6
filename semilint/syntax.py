"""
semilint/syntax.py

Read-only Java syntax tree used by the checks.

Tree-sitter produces a concrete tree whose node types follow the grammar
rules of tree-sitter-java. Checks do not reason over that vocabulary
directly: ``build_syntax_tree`` converts it into ``SyntaxNode`` objects
tagged with a closed ``NodeKind`` vocabulary, with comments removed and
the enum body flattened so that constants, the constant-list terminator
and the members are siblings of one body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional

import tree_sitter

from .utils import is_trivia


class NodeKind(Enum):
    """Grammatical role of a syntax node."""
    COMPILATION_UNIT = auto()
    CLASS_DEF = auto()
    INTERFACE_DEF = auto()
    ENUM_DEF = auto()
    ANNOTATION_DEF = auto()
    RECORD_DEF = auto()
    OBJBLOCK = auto()
    FIELD_DEF = auto()
    ANNOTATION_FIELD_DEF = auto()
    STATIC_INIT = auto()
    INSTANCE_INIT = auto()
    CTOR_DEF = auto()
    COMPACT_CTOR_DEF = auto()
    METHOD_DEF = auto()
    ENUM_CONSTANT_DEF = auto()
    LITERAL_NEW = auto()
    SEMI = auto()
    LCURLY = auto()
    RCURLY = auto()
    COMMA = auto()
    SLIST = auto()
    EMPTY_STAT = auto()
    OTHER = auto()


TYPE_DEFINITIONS = frozenset({
    NodeKind.CLASS_DEF,
    NodeKind.INTERFACE_DEF,
    NodeKind.ENUM_DEF,
    NodeKind.ANNOTATION_DEF,
    NodeKind.RECORD_DEF,
})

# Scopes that end the search for an enclosing enum.
_ENUM_SEARCH_STOPS = frozenset({
    NodeKind.CLASS_DEF,
    NodeKind.INTERFACE_DEF,
    NodeKind.ANNOTATION_DEF,
    NodeKind.RECORD_DEF,
    NodeKind.LITERAL_NEW,
})

_KIND_BY_TYPE = {
    "program": NodeKind.COMPILATION_UNIT,
    "class_declaration": NodeKind.CLASS_DEF,
    "interface_declaration": NodeKind.INTERFACE_DEF,
    "enum_declaration": NodeKind.ENUM_DEF,
    "annotation_type_declaration": NodeKind.ANNOTATION_DEF,
    "record_declaration": NodeKind.RECORD_DEF,
    "class_body": NodeKind.OBJBLOCK,
    "interface_body": NodeKind.OBJBLOCK,
    "enum_body": NodeKind.OBJBLOCK,
    "annotation_type_body": NodeKind.OBJBLOCK,
    "field_declaration": NodeKind.FIELD_DEF,
    "constant_declaration": NodeKind.FIELD_DEF,
    "annotation_type_element_declaration": NodeKind.ANNOTATION_FIELD_DEF,
    "static_initializer": NodeKind.STATIC_INIT,
    "constructor_declaration": NodeKind.CTOR_DEF,
    "compact_constructor_declaration": NodeKind.COMPACT_CTOR_DEF,
    "method_declaration": NodeKind.METHOD_DEF,
    "enum_constant": NodeKind.ENUM_CONSTANT_DEF,
    "object_creation_expression": NodeKind.LITERAL_NEW,
    "constructor_body": NodeKind.SLIST,
    "{": NodeKind.LCURLY,
    "}": NodeKind.RCURLY,
    ",": NodeKind.COMMA,
}

# tree-sitter wraps the members of an enum in this node; they are lifted
# into the enum body itself.
_FLATTENED_TYPES = frozenset({"enum_body_declarations"})


@dataclass(frozen=True, eq=False)
class SyntaxNode:
    """
    Immutable node of the converted syntax tree.

    ``parent`` is a back-reference into the same tree; the tree is owned
    by whoever holds the root. Positions are 1-based.
    """
    kind: NodeKind
    type_name: str
    line: int
    column: int
    parent: Optional[SyntaxNode] = field(default=None, repr=False)
    children: tuple[SyntaxNode, ...] = field(default=(), repr=False)
    index: int = field(default=0, repr=False)

    @property
    def next_sibling(self) -> Optional[SyntaxNode]:
        if self.parent is None:
            return None
        siblings = self.parent.children
        position = self.index + 1
        return siblings[position] if position < len(siblings) else None

    @property
    def previous_sibling(self) -> Optional[SyntaxNode]:
        if self.parent is None or self.index == 0:
            return None
        return self.parent.children[self.index - 1]

    @property
    def first_child(self) -> Optional[SyntaxNode]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[SyntaxNode]:
        return self.children[-1] if self.children else None

    def find_first(self, kind: NodeKind) -> Optional[SyntaxNode]:
        """Return the first direct child of the given kind."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def ancestors(self) -> Iterator[SyntaxNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator[SyntaxNode]:
        """Iterative preorder traversal in source order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def is_type_definition(node: Optional[SyntaxNode]) -> bool:
    return node is not None and node.kind in TYPE_DEFINITIONS


def is_outermost_type(node: SyntaxNode) -> bool:
    """True when no enclosing node is a type declaration."""
    return not any(ancestor.kind in TYPE_DEFINITIONS for ancestor in node.ancestors())


def is_in_enum_block(node: SyntaxNode) -> bool:
    """
    Check whether ``node`` lies lexically inside an enum body.

    The search stops at the nearest enclosing class, interface, annotation,
    record or anonymous class, so a member of a class nested in an enum is
    not considered part of the enum block. Enum constant bodies are.
    """
    for ancestor in node.ancestors():
        if ancestor.kind is NodeKind.ENUM_DEF:
            return True
        if ancestor.kind in _ENUM_SEARCH_STOPS:
            return False
    return False


def _member_children(ts_node: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
    for child in ts_node.children:
        if is_trivia(child):
            continue
        if child.type in _FLATTENED_TYPES:
            yield from _member_children(child)
        else:
            yield child


def _classify(ts_node: tree_sitter.Node, parent: Optional[SyntaxNode]) -> NodeKind:
    node_type = ts_node.type
    parent_kind = parent.kind if parent is not None else None

    if node_type == ";":
        if parent_kind in (NodeKind.COMPILATION_UNIT, NodeKind.SLIST):
            return NodeKind.EMPTY_STAT
        return NodeKind.SEMI

    if node_type == "block":
        if parent_kind is NodeKind.OBJBLOCK:
            return NodeKind.INSTANCE_INIT
        return NodeKind.SLIST

    return _KIND_BY_TYPE.get(node_type, NodeKind.OTHER)


def _make_node(
    ts_node: tree_sitter.Node,
    parent: Optional[SyntaxNode],
    index: int = 0,
) -> SyntaxNode:
    line, column = ts_node.start_point
    return SyntaxNode(
        kind=_classify(ts_node, parent),
        type_name=ts_node.type,
        line=line + 1,
        column=column + 1,
        parent=parent,
        index=index,
    )


def build_syntax_tree(tree: tree_sitter.Tree) -> SyntaxNode:
    """
    Convert a tree-sitter tree into a ``SyntaxNode`` tree.

    Conversion is iterative so that deeply nested expressions do not hit
    the interpreter's recursion limit. Every node is frozen once its
    children have been attached.
    """
    root = _make_node(tree.root_node, None)
    pending = [(tree.root_node, root)]
    while pending:
        ts_node, node = pending.pop()
        children = []
        for ts_child in _member_children(ts_node):
            child = _make_node(ts_child, node, len(children))
            children.append(child)
            pending.append((ts_child, child))
        object.__setattr__(node, "children", tuple(children))
    return root
