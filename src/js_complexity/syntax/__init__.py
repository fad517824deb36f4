"""Node classification and traversal over tree-sitter trees."""

from .kinds import (
    DECISION_KINDS,
    LOGICAL_OPERATORS,
    NodeKind,
    classify,
    is_decision,
    is_logical,
    is_member_access,
)
from .walker import ParentTable, Visitor, count_nodes, walk

__all__ = [
    "DECISION_KINDS",
    "LOGICAL_OPERATORS",
    "NodeKind",
    "ParentTable",
    "Visitor",
    "classify",
    "count_nodes",
    "is_decision",
    "is_logical",
    "is_member_access",
    "walk",
]
