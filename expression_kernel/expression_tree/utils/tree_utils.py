"""
Tree Utility Functions

Traversal and analysis utilities for expression trees. Every walk here is
iterative and keyed on node identity, so shared sub-expressions are visited
once and deep trees never hit the interpreter's recursion limit.
"""

from typing import Any, Callable, Dict, List, Set
from collections import Counter

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode
from ..core.operators import NodeType, OpType


def postvisitor(expr: Node, fn: Callable[..., Any], **kwargs) -> Any:
    """Visit an expression DAG in postorder applying a function to every node.

    Args:
        expr: Root of the expression to visit.
        fn: Called as ``fn(node, *child_results, **kwargs)``. Receives the
            node being visited followed by the results of visiting its
            children, left to right.
        **kwargs: Extra keyword arguments forwarded to ``fn``.

    Returns:
        The result of applying ``fn`` to ``expr``.

    Results are memoised by node identity: a sub-expression shared by
    several parents is visited exactly once and all parents receive the
    same result object. Exceptions raised by ``fn`` propagate unchanged.
    """
    # id -> result; the nodes themselves are kept alive by the tree
    visited: Dict[int, Any] = {}
    stack = [(expr, False)]

    while stack:
        node, processed = stack.pop()
        key = id(node)

        if key in visited:
            continue

        if processed:
            child_results = tuple(visited[id(c)] for c in node.children())
            visited[key] = fn(node, *child_results, **kwargs)
        else:
            stack.append((node, True))
            # Reversed so children are processed left-to-right
            for child in reversed(node.children()):
                if id(child) not in visited:
                    stack.append((child, False))

    return visited[id(expr)]


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get every distinct node reachable from ``node``.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of unique nodes (by identity) in visiting order
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = [node]
    seen: Set[int] = {id(node)}
    all_nodes = []
    head = 0

    while head < len(nodes_to_visit):
        current_node = nodes_to_visit[head]
        head += 1
        all_nodes.append(current_node)

        for child in current_node.children():
            if id(child) not in seen:
                seen.add(id(child))
                nodes_to_visit.append(child)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Preorder, left child first"""
    stack = [node]
    seen: Set[int] = set()
    nodes = []

    while stack:
        current_node = stack.pop()
        if id(current_node) in seen:
            continue
        seen.add(id(current_node))
        nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return postvisitor(node, lambda n, *depths: 1 + max(depths, default=0))


def count_nodes(node: Node) -> int:
    """Size of the expanded tree: a shared node counts once per occurrence"""
    return postvisitor(node, lambda n, *sizes: 1 + sum(sizes))


def count_unique_nodes(node: Node) -> int:
    """Number of distinct node objects in the DAG"""
    return len(get_all_nodes(node))


def count_shared_nodes(node: Node) -> int:
    """Number of distinct nodes referenced by more than one parent slot"""
    references: Counter = Counter()
    for current in get_all_nodes(node):
        for child in current.children():
            references[id(child)] += 1
    return sum(1 for count in references.values() if count > 1)


def get_variables(node: Node) -> Set[str]:
    """Names of all variables occurring in the expression"""
    return {n.name for n in get_all_nodes(node) if isinstance(n, VariableNode)}


def get_constants(node: Node) -> List[float]:
    """Constant values in depth-first order (shared constants listed once)"""
    return [n.value for n in get_all_nodes(node, 'depth_first') if isinstance(n, ConstantNode)]


def find_nodes_by_type(node: Node, node_type: NodeType) -> List[Node]:
    return [n for n in get_all_nodes(node) if n.node_type == node_type]


def find_nodes_by_operator(node: Node, operator: OpType) -> List[Node]:
    return [
        n for n in get_all_nodes(node)
        if isinstance(n, (UnaryOpNode, BinaryOpNode)) and n.operator == operator
    ]
