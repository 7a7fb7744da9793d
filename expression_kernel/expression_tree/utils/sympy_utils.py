import math
import sympy as sp
from typing import Dict
from ..core.node import Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode
from ..core.operators import NodeType, OpType
from .tree_utils import postvisitor

_SYMPY_UNARY = {
  OpType.EXP: sp.exp,
  OpType.LOG: sp.log,
  OpType.SIN: sp.sin,
  OpType.COS: sp.cos,
}


def _node_to_sympy(node: Node, *args: sp.Expr) -> sp.Expr:
  kind = node.node_type
  if kind == NodeType.CONSTANT:
    if math.isnan(node.value):
      return sp.nan
    return sp.Float(node.value)
  elif kind == NodeType.VARIABLE:
    return sp.Symbol(node.name)
  elif kind == NodeType.UNARY_OP:
    if node.operator == OpType.NEG:
      return sp.Mul(-1, args[0])
    return _SYMPY_UNARY[node.operator](args[0])
  elif kind == NodeType.BINARY_OP:
    if node.operator == OpType.ADD:
      return sp.Add(args[0], args[1])
    elif node.operator == OpType.SUB:
      return sp.Add(args[0], sp.Mul(-1, args[1]))
    elif node.operator == OpType.MUL:
      return sp.Mul(args[0], args[1])
    return sp.Mul(args[0], sp.Pow(args[1], -1))
  raise TypeError(f"Unknown node kind: {node.node_type!r}")


def to_sympy(node: Node) -> sp.Expr:
  """Convert to a SymPy expression (sympy applies its automatic canonicalisation)"""
  return postvisitor(node, _node_to_sympy)


def from_sympy(expr) -> Node:
  """Build a node tree from a SymPy expression.

  N-ary sums and products are folded left. Integer powers become repeated
  products (negative ones a reciprocal). Anything outside the kernel's
  operation set raises ValueError.
  """
  memo: Dict[sp.Basic, Node] = {}
  return _from_sympy(sp.sympify(expr), memo)


def _from_sympy(expr: sp.Basic, memo: Dict[sp.Basic, Node]) -> Node:
  if expr in memo:
    return memo[expr]

  if expr.is_Symbol:
    node = VariableNode(str(expr))
  elif expr is sp.nan:
    node = ConstantNode(float('nan'))
  elif expr.is_Number:
    if not expr.is_real:
      raise ValueError(f"Non-real constant {expr} cannot be represented")
    node = ConstantNode(float(expr))
  elif expr is sp.E:
    node = UnaryOpNode(OpType.EXP, ConstantNode(1.0))
  elif isinstance(expr, sp.exp):
    node = UnaryOpNode(OpType.EXP, _from_sympy(expr.args[0], memo))
  elif isinstance(expr, sp.log) and len(expr.args) == 1:
    node = UnaryOpNode(OpType.LOG, _from_sympy(expr.args[0], memo))
  elif isinstance(expr, sp.sin):
    node = UnaryOpNode(OpType.SIN, _from_sympy(expr.args[0], memo))
  elif isinstance(expr, sp.cos):
    node = UnaryOpNode(OpType.COS, _from_sympy(expr.args[0], memo))
  elif isinstance(expr, sp.Add):
    node = _fold(OpType.ADD, expr.args, memo)
  elif isinstance(expr, sp.Mul):
    if expr.args[0] == -1 and len(expr.args) == 2:
      node = UnaryOpNode(OpType.NEG, _from_sympy(expr.args[1], memo))
    else:
      node = _fold(OpType.MUL, expr.args, memo)
  elif isinstance(expr, sp.Pow):
    node = _power(expr, memo)
  else:
    raise ValueError(f"Cannot convert {type(expr).__name__} expression: {expr}")

  memo[expr] = node
  return node


def _fold(op: OpType, args, memo) -> Node:
  result = _from_sympy(args[0], memo)
  for arg in args[1:]:
    result = BinaryOpNode(op, result, _from_sympy(arg, memo))
  return result


def _power(expr: sp.Pow, memo) -> Node:
  base, exponent = expr.args
  if not exponent.is_Integer or exponent == 0:
    raise ValueError(f"Only non-zero integer exponents are supported, got {exponent}")
  base_node = _from_sympy(base, memo)
  n = abs(int(exponent))
  result = base_node
  for _ in range(n - 1):
    result = BinaryOpNode(OpType.MUL, result, base_node)
  if exponent < 0:
    result = BinaryOpNode(OpType.DIV, ConstantNode(1.0), result)
  return result


def latex_representation(node: Node) -> str:
  """LaTeX form of the expression via SymPy"""
  return sp.latex(to_sympy(node))
