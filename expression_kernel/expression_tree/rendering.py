"""Canonical text rendering of expression trees"""

from typing import Optional
from .core.node import Node
from .core.operators import NodeType, OpType, BINARY_OP_SYMBOLS, UNARY_OP_NAMES
from .utils.tree_utils import postvisitor
from ..config import get_config


def format_constant(value: float, precision: int) -> str:
  return f"{value:.{precision}f}"


def _render_node(node: Node, *child_texts: str, precision: int) -> str:
  kind = node.node_type
  if kind == NodeType.CONSTANT:
    return format_constant(node.value, precision)
  elif kind == NodeType.VARIABLE:
    return node.name
  elif kind == NodeType.UNARY_OP:
    if node.operator == OpType.NEG:
      return f"-{child_texts[0]}"
    return f"{UNARY_OP_NAMES[node.operator]}({child_texts[0]})"
  elif kind == NodeType.BINARY_OP:
    return f"({child_texts[0]} {BINARY_OP_SYMBOLS[node.operator]} {child_texts[1]})"
  raise TypeError(f"Unknown node kind: {kind!r}")


def render(node: Node, precision: Optional[int] = None) -> str:
  """Render an expression as fully parenthesised text, e.g. ``log((2.000000 * x))``.

  Constants use fixed-point notation with ``precision`` decimals (taken
  from the global config when omitted). Never evaluates anything.
  """
  if precision is None:
    precision = get_config().render_precision
  return postvisitor(node, _render_node, precision=precision)
