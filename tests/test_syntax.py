"""
Test suite for the syntax tree conversion and navigation helpers.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from semilint.syntax import (
    NodeKind,
    SyntaxNode,
    build_syntax_tree,
    is_in_enum_block,
    is_outermost_type,
    is_type_definition,
)
from semilint.utils import create_java_parser


def parse(source: str) -> SyntaxNode:
    tree = create_java_parser().parse(source.encode())
    return build_syntax_tree(tree)


def nodes_of(root: SyntaxNode, kind: NodeKind) -> list[SyntaxNode]:
    return [node for node in root.walk() if node.kind is kind]


def body_kinds(declaration: SyntaxNode) -> list[NodeKind]:
    return [child.kind for child in declaration.find_first(NodeKind.OBJBLOCK).children]


class TestConversion:

    def test_root_is_compilation_unit(self):
        root = parse("class A {}")
        assert root.kind is NodeKind.COMPILATION_UNIT
        assert root.parent is None
        assert (root.line, root.column) == (1, 1)

    def test_class_body_members(self):
        root = parse("class A { int x; { } static { } A() { } void m() { } }")
        [cls] = nodes_of(root, NodeKind.CLASS_DEF)
        assert body_kinds(cls) == [
            NodeKind.LCURLY,
            NodeKind.FIELD_DEF,
            NodeKind.INSTANCE_INIT,
            NodeKind.STATIC_INIT,
            NodeKind.CTOR_DEF,
            NodeKind.METHOD_DEF,
            NodeKind.RCURLY,
        ]

    def test_enum_body_is_flattened(self):
        root = parse("enum E { A, B; int x; }")
        [enum] = nodes_of(root, NodeKind.ENUM_DEF)
        assert body_kinds(enum) == [
            NodeKind.LCURLY,
            NodeKind.ENUM_CONSTANT_DEF,
            NodeKind.COMMA,
            NodeKind.ENUM_CONSTANT_DEF,
            NodeKind.SEMI,
            NodeKind.FIELD_DEF,
            NodeKind.RCURLY,
        ]

    def test_field_keeps_its_terminator(self):
        root = parse("class A { int x; }")
        [field] = nodes_of(root, NodeKind.FIELD_DEF)
        assert field.last_child.kind is NodeKind.SEMI

    def test_comments_are_dropped(self):
        root = parse("class A {\n    // note\n    int x; /* more */\n}")
        [cls] = nodes_of(root, NodeKind.CLASS_DEF)
        assert body_kinds(cls) == [NodeKind.LCURLY, NodeKind.FIELD_DEF, NodeKind.RCURLY]

    def test_empty_statements(self):
        root = parse("class A { void m() { ; } };")
        empties = nodes_of(root, NodeKind.EMPTY_STAT)
        assert [node.parent.kind for node in empties] == [
            NodeKind.SLIST,
            NodeKind.COMPILATION_UNIT,
        ]

    def test_positions_are_one_based(self):
        root = parse("class A {\n  int x;\n}")
        [field] = nodes_of(root, NodeKind.FIELD_DEF)
        assert (field.line, field.column) == (2, 3)
        assert field.type_name == "field_declaration"

    def test_parse_errors_do_not_raise(self):
        root = parse("class A { int x = ; void }")
        assert root.kind is NodeKind.COMPILATION_UNIT

    def test_nodes_are_frozen(self):
        root = parse("class A {}")
        with pytest.raises(AttributeError):
            root.kind = NodeKind.OTHER


class TestNavigation:

    def test_siblings(self):
        root = parse("class A { int x; int y; }")
        first, second = nodes_of(root, NodeKind.FIELD_DEF)
        assert first.next_sibling is second
        assert second.previous_sibling is first

    def test_missing_siblings_are_none(self):
        root = parse("class A { }")
        [body] = nodes_of(root, NodeKind.OBJBLOCK)
        assert body.first_child.previous_sibling is None
        assert body.last_child.next_sibling is None
        assert root.next_sibling is None
        assert root.previous_sibling is None

    def test_leaf_has_no_children(self):
        root = parse("class A { }")
        [lcurly] = nodes_of(root, NodeKind.LCURLY)
        assert lcurly.first_child is None
        assert lcurly.last_child is None
        assert lcurly.find_first(NodeKind.SEMI) is None

    def test_walk_is_source_order(self):
        root = parse("class A { int x; void m() {} int y; }")
        lines_cols = [(node.line, node.column) for node in root.walk()]
        assert lines_cols == sorted(lines_cols)

    def test_ancestors(self):
        root = parse("class A { void m() {} }")
        [method] = nodes_of(root, NodeKind.METHOD_DEF)
        assert [node.kind for node in method.ancestors()] == [
            NodeKind.OBJBLOCK,
            NodeKind.CLASS_DEF,
            NodeKind.COMPILATION_UNIT,
        ]


class TestQueries:

    def test_type_definitions(self):
        root = parse("class A { interface I {} enum E {} @interface N {} record R() {} }")
        kinds = {node.kind for node in root.walk() if is_type_definition(node)}
        assert kinds == {
            NodeKind.CLASS_DEF,
            NodeKind.INTERFACE_DEF,
            NodeKind.ENUM_DEF,
            NodeKind.ANNOTATION_DEF,
            NodeKind.RECORD_DEF,
        }
        assert not is_type_definition(None)

    def test_outermost_type(self):
        root = parse("class A { class B { class C {} } }\nclass D {}")
        flags = [is_outermost_type(node) for node in nodes_of(root, NodeKind.CLASS_DEF)]
        assert flags == [True, False, False, True]

    def test_in_enum_block(self):
        root = parse("enum E { A { int a; }; int b; class C { int c; } }")
        fields = nodes_of(root, NodeKind.FIELD_DEF)
        assert [is_in_enum_block(field) for field in fields] == [True, True, False]

    def test_anonymous_class_ends_enum_block(self):
        root = parse("enum E { A; Object o = new Object() { int x; }; }")
        fields = nodes_of(root, NodeKind.FIELD_DEF)
        assert [is_in_enum_block(field) for field in fields] == [True, False]

    def test_class_is_not_enum_block(self):
        root = parse("class A { int x; }")
        [field] = nodes_of(root, NodeKind.FIELD_DEF)
        assert not is_in_enum_block(field)
