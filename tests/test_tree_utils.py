import pytest

from expression_kernel import NodeType, OpType, constant, variable, sin, cos, add, multiply, neg
from expression_kernel.expression_tree.utils import (
    postvisitor, get_all_nodes, calculate_tree_depth, count_nodes, count_unique_nodes,
    count_shared_nodes, get_variables, get_constants, find_nodes_by_type,
    find_nodes_by_operator
)


def _sample():
    x = variable("x")
    two = constant(2.0)
    return add(multiply(two, x), sin(multiply(two, x))), x, two


def test_postvisitor_visits_children_first_and_memoises():
    expr, x, two = _sample()
    calls = []

    def record(node, *results):
        calls.append(node)
        return len(calls)

    postvisitor(expr, record)
    # Shared leaves visited once; the two structurally equal products are
    # distinct objects and visited separately
    assert sum(1 for n in calls if n is x) == 1
    assert sum(1 for n in calls if n is two) == 1
    assert calls[-1] is expr
    assert len(calls) == 6


def test_postvisitor_forwards_kwargs():
    expr = add(constant(1), constant(2))
    result = postvisitor(expr, lambda n, *r, offset: offset + sum(r), offset=1)
    assert result == 1 + (1 + 1)


def test_traversal_orders():
    expr, x, two = _sample()
    bfs = get_all_nodes(expr)
    dfs = get_all_nodes(expr, "depth_first")
    assert bfs[0] is expr and dfs[0] is expr
    assert len(bfs) == len(dfs) == 6
    assert dfs[1] is expr.left
    with pytest.raises(ValueError):
        get_all_nodes(expr, "sideways")


def test_sizes_and_depth():
    expr, x, two = _sample()
    assert count_nodes(expr) == 8
    assert count_unique_nodes(expr) == 6
    assert count_shared_nodes(expr) == 2
    assert calculate_tree_depth(expr) == 4
    assert calculate_tree_depth(constant(1)) == 1


def test_variables_and_constants():
    expr = add(multiply(constant(3), variable("x")), cos(variable("y")))
    assert get_variables(expr) == {"x", "y"}
    assert get_constants(expr) == [3.0]
    assert get_variables(constant(1)) == set()


def test_find_nodes():
    expr, x, two = _sample()
    assert len(find_nodes_by_operator(expr, OpType.MUL)) == 2
    assert find_nodes_by_operator(expr, OpType.SIN) == [expr.right]
    assert find_nodes_by_type(expr, NodeType.VARIABLE) == [x]
    assert find_nodes_by_operator(neg(x), OpType.ADD) == []
