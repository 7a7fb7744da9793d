"""Utilities for expression trees."""

from .tree_utils import (
    postvisitor, get_all_nodes, calculate_tree_depth, count_nodes,
    count_unique_nodes, count_shared_nodes, get_variables, get_constants,
    find_nodes_by_type, find_nodes_by_operator
)
from .validator import ExpressionValidator
from .sympy_utils import to_sympy, from_sympy, latex_representation

__all__ = [
    'postvisitor', 'get_all_nodes', 'calculate_tree_depth', 'count_nodes',
    'count_unique_nodes', 'count_shared_nodes', 'get_variables', 'get_constants',
    'find_nodes_by_type', 'find_nodes_by_operator',
    'ExpressionValidator',
    'to_sympy', 'from_sympy', 'latex_representation'
]
