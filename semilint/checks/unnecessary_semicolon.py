"""
Detect unnecessary semicolons after type member declarations.

Flags, inside type bodies::

    class A {
        ;                   // standalone semicolon
        {};                 // after instance initializer
        static {};          // after static initializer
        A() {};             // after constructor
        void method() {};   // after method
        class B {};         // after nested type
        int field = 10;;    // after field declaration
    }

    enum E {
        X, Y;;              // second terminator of the constant list
    }

A single semicolon directly after the opening brace of an enum is the
empty constant list and is left alone; so is the semicolon that ends the
constant list. Empty statements inside code blocks and a semicolon after
the top-level type are outside the scope of this check.
"""

from __future__ import annotations

from typing import Optional

from ..issues import Issue, make_issue
from ..syntax import (
    NodeKind,
    SyntaxNode,
    is_in_enum_block,
    is_outermost_type,
    is_type_definition,
)

NAME = "UnnecessarySemicolonAfterTypeMemberDeclaration"
MSG_KEY = "unnecessary.semicolon"
MESSAGE = "Unnecessary semicolon."

TOKENS = frozenset({NodeKind.SEMI})

# Members whose body closes them; nothing may follow but the next member.
_SELF_CLOSING_MEMBERS = frozenset({
    NodeKind.STATIC_INIT,
    NodeKind.INSTANCE_INIT,
    NodeKind.CTOR_DEF,
    NodeKind.COMPACT_CTOR_DEF,
    NodeKind.METHOD_DEF,
})

_TERMINATED_DECLARATIONS = frozenset({
    NodeKind.FIELD_DEF,
    NodeKind.ANNOTATION_FIELD_DEF,
})


def visit(node: SyntaxNode) -> list[Issue]:
    """Report ``node`` if it is a redundant semicolon in a type body."""
    if node.kind is not NodeKind.SEMI or not _in_type_body(node):
        return []
    if is_redundant(node):
        return [make_issue(MSG_KEY, node, MESSAGE)]
    return []


def is_redundant(semi: SyntaxNode) -> bool:
    """Decide from the preceding sibling whether ``semi`` terminates anything."""
    prev = semi.previous_sibling
    if prev is None:
        return not is_in_enum_block(semi)

    match prev.kind:
        case NodeKind.SEMI:
            return True
        case NodeKind.LCURLY:
            return not is_in_enum_block(semi)
        case kind if kind in _SELF_CLOSING_MEMBERS:
            return True
        case kind if kind in _TERMINATED_DECLARATIONS:
            return _is_terminated(prev)
        case _ if is_type_definition(prev):
            return not is_outermost_type(prev)
        case _:
            # ENUM_CONSTANT_DEF and COMMA precede the legal end of a
            # constant list.
            return False


def _is_terminated(declaration: SyntaxNode) -> bool:
    last: Optional[SyntaxNode] = declaration.last_child
    return last is not None and last.kind is NodeKind.SEMI


def _in_type_body(node: SyntaxNode) -> bool:
    return node.parent is not None and node.parent.kind is NodeKind.OBJBLOCK
