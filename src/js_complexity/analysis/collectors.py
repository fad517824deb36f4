"""Metric collection over a parsed source unit.

One pre-order walk covers the whole file. File counters are updated at every
node; each named function declaration met on the way gets its own nested walk
that produces a FunctionMetrics record. Nested declarations are not excluded
from their enclosing function: an inner function's decisions, returns and
member chains count towards the outer function as well as its own record.
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from ..syntax import (
    NodeKind,
    ParentTable,
    classify,
    count_nodes,
    is_decision,
    is_logical,
    is_member_access,
    walk,
)
from .models import AnalysisResult, FileMetrics, FunctionMetrics

logger = logging.getLogger(__name__)


def function_name(node: Node) -> str:
    """Declared identifier of a function node, or a label built from its line."""
    name_node = node.child_by_field_name("name")
    if name_node is not None and name_node.text:
        return name_node.text.decode("utf-8")
    return f"anon function @{node.start_point[0] + 1}"


def parameter_count(node: Node) -> int:
    params = node.child_by_field_name("parameters")
    if params is None:
        return 0
    return sum(1 for child in params.named_children if child.type != "comment")


def max_message_chains(node: Node) -> int:
    """Largest member-access count found within any member access under `node`."""
    longest = 0

    def visit(current: Node) -> None:
        nonlocal longest
        if is_member_access(current):
            longest = max(longest, count_nodes(current, is_member_access))

    walk(node, visit)
    return longest


def collect_function_metrics(node: Node) -> FunctionMetrics:
    """Compute the metrics of one function declaration node.

    The walk covers the whole declaration, parameters included. Message
    chains are tracked during that walk and then recomputed over the body
    alone; the body value is the one recorded.
    """
    name = function_name(node)
    start_line = node.start_point[0] + 1

    complexity = 1
    nesting = 0
    conditions = 0
    returns = 0
    chains = 0

    def visit(child: Node) -> None:
        nonlocal complexity, nesting, conditions, returns, chains
        kind = classify(child)

        if kind is NodeKind.RETURN:
            returns += 1

        if kind.is_decision:
            complexity += 1
            # The decision node itself is not nested under itself
            nesting = max(nesting, count_nodes(child, is_decision) - 1)

        if kind is NodeKind.IF:
            conditions = max(conditions, count_nodes(child, is_logical))

        if kind is NodeKind.MEMBER_ACCESS:
            chains = max(chains, count_nodes(child, is_member_access))

    walk(node, visit)

    body = node.child_by_field_name("body")
    body_chains = max_message_chains(body) if body is not None else 0
    if body_chains != chains:
        logger.debug(
            f"{name}: member chain of {chains} outside the body ignored, body has {body_chains}"
        )

    return FunctionMetrics(
        name=name,
        start_line=start_line,
        parameter_count=parameter_count(node),
        cyclomatic_complexity=complexity,
        max_nesting_depth=nesting,
        max_conditions=conditions,
        returns=returns,
        max_message_chains=body_chains,
    )


class FileMetricCollector:
    """Accumulates file-scoped counters while the file walk visits each node.

    Args:
        path: Path label of the file
        import_callee: Identifier whose calls count as module imports
    """

    def __init__(self, path: str, import_callee: str = "require") -> None:
        self.path = path
        self.import_callee = import_callee
        self._strings = 0
        self._imports = 0
        self._all_conditions = 0

    def visit(self, node: Node, kind: NodeKind, parents: ParentTable) -> None:
        if kind is NodeKind.STRING_LITERAL:
            if not self._is_import_specifier(node, parents):
                self._strings += 1
        elif kind is NodeKind.CALL:
            if self.is_import_call(node):
                self._imports += 1
        elif kind is NodeKind.IF:
            # One per if; compound tests weigh max(connectives, 1)
            self._all_conditions += 1
            extra = count_nodes(node, is_logical)
            if extra > 0:
                self._all_conditions += extra - 1

    def is_import_call(self, node: Node) -> bool:
        callee = node.child_by_field_name("function")
        if callee is None or callee.type != "identifier" or callee.text is None:
            return False
        return callee.text.decode("utf-8") == self.import_callee

    def _is_import_specifier(self, node: Node, parents: ParentTable) -> bool:
        """True for the first argument string of an import call."""
        arguments = parents.parent_of(node)
        if arguments is None or arguments.type != "arguments":
            return False
        call = parents.parent_of(arguments)
        if call is None or classify(call) is not NodeKind.CALL or not self.is_import_call(call):
            return False
        first = arguments.named_children[0] if arguments.named_children else None
        return first is not None and first.id == node.id

    def build(self) -> FileMetrics:
        return FileMetrics(
            path=self.path,
            strings=self._strings,
            package_complexity=self._imports,
            all_conditions=self._all_conditions,
        )


def analyze_tree(
    root: Node, path: str, language: str = "javascript", import_callee: str = "require"
) -> AnalysisResult:
    """Run the single whole-file pass over a parsed tree.

    Args:
        root: Root node of the parsed file
        path: Label for the file record
        language: Grammar the tree was parsed with
        import_callee: Identifier whose calls count as module imports

    Returns:
        AnalysisResult holding the file record and one record per function name
    """
    file_collector = FileMetricCollector(path, import_callee)
    functions: dict[str, FunctionMetrics] = {}
    parents = ParentTable()

    def visit(node: Node) -> None:
        kind = classify(node)
        if kind is NodeKind.FUNCTION_DECLARATION:
            metrics = collect_function_metrics(node)
            previous = functions.get(metrics.name)
            if previous is not None:
                logger.debug(
                    f"{metrics.name} at line {metrics.start_line} replaces "
                    f"the declaration at line {previous.start_line}"
                )
            functions[metrics.name] = metrics
            logger.debug(f"Collected {metrics}")
        file_collector.visit(node, kind, parents)

    walk(root, visit, parents)

    return AnalysisResult(file=file_collector.build(), language=language, functions=functions)
