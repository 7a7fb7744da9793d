"""
Symbolic differentiation of expression trees.

The derivative is a new tree; the input is never modified. Sub-expressions
of the input are referenced from the result rather than copied, and a node
shared by several parents is differentiated once, its derivative shared in
turn. No simplification is applied: ``d/dx (2 * x)`` is returned as
``((0.000000 * x) + (2.000000 * 1.000000))``.
"""

from typing import Callable, Dict, Optional
from .core.node import Node, ConstantNode, UnaryOpNode, BinaryOpNode
from .core.operators import NodeType, OpType
from .utils.tree_utils import postvisitor
from ..config import KernelConfig, get_config
from ..errors import DerivationError, Result
from ..logging_system import log_debug, log_detail


# Unary rules: (node, operand, d_operand) -> derivative
def _d_neg(node, u, du):
  return UnaryOpNode(OpType.NEG, du)

def _d_exp_chain(node, u, du):
  # node is exp(u) itself
  return BinaryOpNode(OpType.MUL, node, du)

def _d_exp_legacy(node, u, du):
  return BinaryOpNode(OpType.ADD, node, du)

def _d_log(node, u, du):
  return BinaryOpNode(OpType.DIV, du, u)

def _d_sin(node, u, du):
  return BinaryOpNode(OpType.MUL, du, UnaryOpNode(OpType.COS, u))

def _d_cos(node, u, du):
  return BinaryOpNode(OpType.MUL, du, UnaryOpNode(OpType.NEG, UnaryOpNode(OpType.SIN, u)))


# Binary rules: (node, left, right, d_left, d_right) -> derivative
def _d_add(node, f, g, df, dg):
  return BinaryOpNode(OpType.ADD, df, dg)

def _d_sub(node, f, g, df, dg):
  return BinaryOpNode(OpType.SUB, df, dg)

def _d_mul(node, f, g, df, dg):
  return BinaryOpNode(OpType.ADD,
                      BinaryOpNode(OpType.MUL, df, g),
                      BinaryOpNode(OpType.MUL, f, dg))

def _d_div(node, f, g, df, dg):
  numerator = BinaryOpNode(OpType.SUB,
                           BinaryOpNode(OpType.MUL, df, g),
                           BinaryOpNode(OpType.MUL, f, dg))
  return BinaryOpNode(OpType.DIV, numerator, BinaryOpNode(OpType.MUL, g, g))


UNARY_RULES: Dict[OpType, Callable] = {
  OpType.NEG: _d_neg,
  OpType.EXP: _d_exp_chain,
  OpType.LOG: _d_log,
  OpType.SIN: _d_sin,
  OpType.COS: _d_cos,
}

BINARY_RULES: Dict[OpType, Callable] = {
  OpType.ADD: _d_add,
  OpType.SUB: _d_sub,
  OpType.MUL: _d_mul,
  OpType.DIV: _d_div,
}


class Differentiator:
  """Partial derivatives with respect to one named variable.

  Args:
    rules: configuration selecting the rule set. ``exp_rule='legacy'``
      reproduces ``d exp(u) = exp(u) + du``; ``binary_rules=False`` makes
      every binary node raise DerivationError. Defaults to the global
      configuration at construction time.
  """

  def __init__(self, rules: Optional[KernelConfig] = None):
    self.rules = rules if rules is not None else get_config()
    self.unary_rules = dict(UNARY_RULES)
    if self.rules.exp_rule == 'legacy':
      self.unary_rules[OpType.EXP] = _d_exp_legacy
    self.binary_rules = dict(BINARY_RULES) if self.rules.binary_rules else {}

  def supports(self, node: Node) -> bool:
    """Whether this rule set can differentiate ``node`` itself (not its children)"""
    if node.node_type == NodeType.UNARY_OP:
      return node.operator in self.unary_rules
    if node.node_type == NodeType.BINARY_OP:
      return node.operator in self.binary_rules
    return node.node_type in (NodeType.CONSTANT, NodeType.VARIABLE)

  def _derive_node(self, node: Node, *child_derivs: Node, var: str) -> Node:
    kind = node.node_type
    if kind == NodeType.CONSTANT:
      return ConstantNode(0.0)
    elif kind == NodeType.VARIABLE:
      return ConstantNode(1.0 if node.name == var else 0.0)
    elif kind == NodeType.UNARY_OP:
      rule = self.unary_rules.get(node.operator)
      if rule is None:
        raise DerivationError(f"unsupported operation: {node.name}", node)
      return rule(node, node.operand, child_derivs[0])
    elif kind == NodeType.BINARY_OP:
      rule = self.binary_rules.get(node.operator)
      if rule is None:
        raise DerivationError(
          f"unsupported operation: derivative of '{node.symbol}' is not available", node)
      return rule(node, node.left, node.right, child_derivs[0], child_derivs[1])
    raise DerivationError(f"unsupported operation: unknown node kind {kind!r}", node)

  def derive(self, node: Node, var: str) -> Node:
    if not isinstance(var, str):
      raise TypeError(f"Variable name must be a string, got {type(var).__name__}")
    result = postvisitor(node, self._derive_node, var=var)
    log_debug(f"derive {type(node).__name__} w.r.t. {var!r} (exp_rule={self.rules.exp_rule})")
    return result


def derive(node: Node, with_respect_to: str, rules: Optional[KernelConfig] = None) -> Node:
  """Symbolic partial derivative of ``node`` with respect to ``with_respect_to``.

  Raises:
    DerivationError: if a node has no rule in the active rule set.
  """
  return Differentiator(rules).derive(node, with_respect_to)


def try_derive(node: Node, with_respect_to: str, rules: Optional[KernelConfig] = None) -> Result:
  """Like ``derive`` but returns a Result instead of raising"""
  try:
    return Result.success(derive(node, with_respect_to, rules=rules))
  except DerivationError as e:
    log_detail(f"derivation failed: {e}")
    return Result.failure(e)
