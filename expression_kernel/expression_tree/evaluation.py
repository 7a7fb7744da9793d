"""Numeric evaluation of expression trees"""

from .core.node import Node
from .core.operators import NodeType, evaluate_unary_op, evaluate_binary_op
from .utils.tree_utils import postvisitor
from ..errors import EvaluationError, Result
from ..logging_system import log_debug, log_detail


def _evaluate_node(node: Node, *child_values: float) -> float:
  kind = node.node_type
  if kind == NodeType.CONSTANT:
    return node.value
  elif kind == NodeType.VARIABLE:
    raise EvaluationError(
      f"Error trying to evaluate a variable: {node.name!r} has no value", node)
  elif kind == NodeType.UNARY_OP:
    return evaluate_unary_op(child_values[0], node.operator)
  elif kind == NodeType.BINARY_OP:
    return evaluate_binary_op(child_values[0], child_values[1], node.operator)
  raise TypeError(f"Unknown node kind: {kind!r}")


def evaluate(node: Node) -> float:
  """Compute the float64 value of a variable-free expression.

  Shared sub-expressions are computed once. Division by zero, logarithms
  of non-positive numbers and overflow give inf/nan as in IEEE-754.

  Raises:
    EvaluationError: if any variable is reachable from ``node``.
  """
  value = postvisitor(node, _evaluate_node)
  log_debug(f"evaluate {type(node).__name__} -> {value!r}")
  return value


def try_evaluate(node: Node) -> Result:
  """Like ``evaluate`` but returns a Result instead of raising"""
  try:
    return Result.success(evaluate(node))
  except EvaluationError as e:
    log_detail(f"evaluation failed: {e}")
    return Result.failure(e)
