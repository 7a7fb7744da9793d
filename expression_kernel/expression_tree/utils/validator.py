from typing import Optional
from ..core.node import Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode
from ..core.operators import UNARY_OPS, BINARY_OPS
from .tree_utils import get_all_nodes
from ...config import KernelConfig


class ExpressionValidator:
  """Pre-flight checks for callers that want to avoid EvaluationError/DerivationError"""

  @staticmethod
  def is_well_formed(node) -> bool:
    if not isinstance(node, Node):
      return False
    for current in get_all_nodes(node):
      if not ExpressionValidator._is_valid_node(current):
        return False
    return True

  @staticmethod
  def _is_valid_node(node: Node) -> bool:
    if isinstance(node, ConstantNode):
      return isinstance(node.value, float)
    elif isinstance(node, VariableNode):
      return isinstance(node.name, str)
    elif isinstance(node, UnaryOpNode):
      return node.operator in UNARY_OPS and isinstance(node.operand, Node)
    elif isinstance(node, BinaryOpNode):
      return (node.operator in BINARY_OPS and
              isinstance(node.left, Node) and isinstance(node.right, Node))
    return False

  @staticmethod
  def is_evaluable(node: Node) -> bool:
    """True when evaluate() cannot raise EvaluationError (no variables reachable)"""
    return not any(isinstance(n, VariableNode) for n in get_all_nodes(node))

  @staticmethod
  def is_differentiable(node: Node, rules: Optional[KernelConfig] = None) -> bool:
    """True when derive() cannot raise DerivationError under ``rules``"""
    from ..differentiation import Differentiator
    differentiator = Differentiator(rules)
    return all(differentiator.supports(n) for n in get_all_nodes(node))
