"""
Construction API: one factory per node kind.

Every factory accepts plain numbers wherever an expression is expected and
returns a new immutable node that references (never copies) its arguments.
"""

from .core.node import Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode, as_node
from .core.operators import OpType

# Public name of the abstract node type
Expression = Node


def constant(value: float) -> ConstantNode:
  return ConstantNode(value)


def variable(name: str) -> VariableNode:
  return VariableNode(name)


def neg(e) -> UnaryOpNode:
  return UnaryOpNode(OpType.NEG, as_node(e))


def exp(e) -> UnaryOpNode:
  return UnaryOpNode(OpType.EXP, as_node(e))


def log(e) -> UnaryOpNode:
  """Natural logarithm"""
  return UnaryOpNode(OpType.LOG, as_node(e))


def sin(e) -> UnaryOpNode:
  return UnaryOpNode(OpType.SIN, as_node(e))


def cos(e) -> UnaryOpNode:
  return UnaryOpNode(OpType.COS, as_node(e))


def add(a, b) -> BinaryOpNode:
  return BinaryOpNode(OpType.ADD, as_node(a), as_node(b))


def subtract(a, b) -> BinaryOpNode:
  return BinaryOpNode(OpType.SUB, as_node(a), as_node(b))


def multiply(a, b) -> BinaryOpNode:
  return BinaryOpNode(OpType.MUL, as_node(a), as_node(b))


def divide(a, b) -> BinaryOpNode:
  return BinaryOpNode(OpType.DIV, as_node(a), as_node(b))


# Aliases matching the names used by the reference driver
numeric = constant
sum_ = add
difference = subtract
product = multiply
division = divide
