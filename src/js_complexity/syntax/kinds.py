"""Node kinds the metric collectors care about.

Every grammar node is mapped onto a closed set of kinds. Node types that no
collector inspects map to ``NodeKind.OTHER``; adding a kind means adding an
enum member here and a row in ``_TYPE_KINDS``.
"""

from __future__ import annotations

from enum import Enum

from tree_sitter import Node


class NodeKind(Enum):
    """Syntactic kinds recognised by the analysis."""

    FUNCTION_DECLARATION = "function_declaration"
    IF = "if"
    FOR = "for"
    FOR_IN = "for_in"
    WHILE = "while"
    DO_WHILE = "do_while"
    RETURN = "return"
    LOGICAL = "logical"
    MEMBER_ACCESS = "member_access"
    STRING_LITERAL = "string_literal"
    CALL = "call"
    OTHER = "other"

    @property
    def is_decision(self) -> bool:
        """True for branching and looping constructs."""
        return self in DECISION_KINDS


DECISION_KINDS = frozenset(
    {NodeKind.IF, NodeKind.FOR, NodeKind.FOR_IN, NodeKind.WHILE, NodeKind.DO_WHILE}
)

LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

_TYPE_KINDS: dict[str, NodeKind] = {
    "function_declaration": NodeKind.FUNCTION_DECLARATION,
    "generator_function_declaration": NodeKind.FUNCTION_DECLARATION,
    "if_statement": NodeKind.IF,
    "for_statement": NodeKind.FOR,
    # for (k in o) and for (v of o) share one grammar node
    "for_in_statement": NodeKind.FOR_IN,
    "while_statement": NodeKind.WHILE,
    "do_statement": NodeKind.DO_WHILE,
    "return_statement": NodeKind.RETURN,
    "member_expression": NodeKind.MEMBER_ACCESS,
    "subscript_expression": NodeKind.MEMBER_ACCESS,
    "string": NodeKind.STRING_LITERAL,
    "call_expression": NodeKind.CALL,
}

# Older grammar releases call the anonymous function expression "function"
_ANONYMOUS_FUNCTION_TYPES = frozenset({"function_expression", "function"})


def classify(node: Node) -> NodeKind:
    """Map a tree-sitter node onto its NodeKind."""
    if not node.is_named:
        # Keyword tokens such as the `string` in a TypeScript annotation
        return NodeKind.OTHER

    node_type = node.type
    if node_type == "binary_expression":
        operator = node.child_by_field_name("operator")
        if operator is not None and operator.type in LOGICAL_OPERATORS:
            return NodeKind.LOGICAL
        return NodeKind.OTHER

    if node_type in _ANONYMOUS_FUNCTION_TYPES:
        if _is_default_export(node):
            return NodeKind.FUNCTION_DECLARATION
        return NodeKind.OTHER

    return _TYPE_KINDS.get(node_type, NodeKind.OTHER)


def is_decision(node: Node) -> bool:
    """True iff node is an if, for, for-in/of, while or do-while statement."""
    return classify(node).is_decision


def is_logical(node: Node) -> bool:
    return classify(node) is NodeKind.LOGICAL


def is_member_access(node: Node) -> bool:
    return classify(node) is NodeKind.MEMBER_ACCESS


def _is_default_export(node: Node) -> bool:
    """`export default function () {}` declares a function without a name."""
    parent = node.parent
    if parent is None or parent.type != "export_statement":
        return False
    return any(child.type == "default" for child in parent.children)
