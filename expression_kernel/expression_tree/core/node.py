import numbers
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Set, Tuple
from .operators import (
  NodeType, OpType, BINARY_OP_SYMBOLS, UNARY_OP_NAMES,
  resolve_unary_op, resolve_binary_op
)


def as_node(value) -> 'Node':
  """Promote plain numbers to ConstantNode, pass nodes through untouched"""
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Real) and not isinstance(value, bool):
    return ConstantNode(value)
  raise TypeError(f"Cannot use {type(value).__name__} as an expression")


class Node(ABC):
  """Immutable expression node.

  Nodes are built bottom-up and may be shared between any number of
  parents. Children are held by reference; nothing here ever copies a
  subtree. The three queries (evaluate, derive, render) are implemented as
  match-on-kind walks in the sibling modules and only dispatched from here.
  """

  __slots__ = ('_hash',)

  node_type: NodeType

  def __init__(self):
    object.__setattr__(self, '_hash', hash(self._hash_key()))

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def _hash_key(self) -> tuple:
    pass

  def evaluate(self) -> float:
    from ..evaluation import evaluate
    return evaluate(self)

  def derive(self, with_respect_to: str, rules=None) -> 'Node':
    from ..differentiation import derive
    return derive(self, with_respect_to, rules=rules)

  def render(self, precision: Optional[int] = None) -> str:
    from ..rendering import render
    return render(self, precision=precision)

  def to_string(self) -> str:
    return self.render()

  def to_sympy(self) -> sp.Expr:
    from ..utils.sympy_utils import to_sympy
    return to_sympy(self)

  def size(self) -> int:
    """Node count, shared sub-expressions counted once per occurrence"""
    from ..utils.tree_utils import count_nodes
    return count_nodes(self)

  def depth(self) -> int:
    from ..utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self)

  def variables(self) -> Set[str]:
    from ..utils.tree_utils import get_variables
    return get_variables(self)

  def __str__(self) -> str:
    return self.render()

  def __hash__(self) -> int:
    return self._hash

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return False
    # Explicit stack, deep trees compare without recursion
    pending = [(self, other)]
    while pending:
      a, b = pending.pop()
      if a is b:
        continue
      if type(a) is not type(b) or a._hash != b._hash:
        return False
      for x, y in zip(a._hash_key(), b._hash_key()):
        if isinstance(x, Node):
          pending.append((x, y))
        elif x != y:
          return False
    return True

  def __ne__(self, other) -> bool:
    return not self.__eq__(other)

  # Composition operators
  def __add__(self, other):
    return BinaryOpNode(OpType.ADD, self, as_node(other))

  def __radd__(self, other):
    return BinaryOpNode(OpType.ADD, as_node(other), self)

  def __sub__(self, other):
    return BinaryOpNode(OpType.SUB, self, as_node(other))

  def __rsub__(self, other):
    return BinaryOpNode(OpType.SUB, as_node(other), self)

  def __mul__(self, other):
    return BinaryOpNode(OpType.MUL, self, as_node(other))

  def __rmul__(self, other):
    return BinaryOpNode(OpType.MUL, as_node(other), self)

  def __truediv__(self, other):
    return BinaryOpNode(OpType.DIV, self, as_node(other))

  def __rtruediv__(self, other):
    return BinaryOpNode(OpType.DIV, as_node(other), self)

  def __neg__(self):
    return UnaryOpNode(OpType.NEG, self)


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
      raise TypeError(f"Constant value must be a real number, got {type(value).__name__}")
    object.__setattr__(self, 'value', float(value))
    super().__init__()

  def children(self):
    return ()

  def _hash_key(self):
    # Bit pattern: -0.0 differs from 0.0, every nan equals nan
    return (NodeType.CONSTANT, self.value.hex())

  def __repr__(self):
    return f"ConstantNode({self.value!r})"


class VariableNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    if not isinstance(name, str):
      raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    object.__setattr__(self, 'name', name)
    super().__init__()

  def children(self):
    return ()

  def _hash_key(self):
    return (NodeType.VARIABLE, self.name)

  def __repr__(self):
    return f"VariableNode({self.name!r})"


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, operator, operand: Node):
    if not isinstance(operand, Node):
      raise TypeError(f"Operand must be a Node, got {type(operand).__name__}")
    object.__setattr__(self, 'operator', resolve_unary_op(operator))
    object.__setattr__(self, 'operand', operand)
    super().__init__()

  @property
  def name(self) -> str:
    return UNARY_OP_NAMES[self.operator]

  def children(self):
    return (self.operand,)

  def _hash_key(self):
    return (NodeType.UNARY_OP, self.operator, self.operand)

  def __repr__(self):
    return f"UnaryOpNode({self.name!r}, {self.operand!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator, left: Node, right: Node):
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError("Both operands of a binary operation must be Nodes")
    object.__setattr__(self, 'operator', resolve_binary_op(operator))
    object.__setattr__(self, 'left', left)
    object.__setattr__(self, 'right', right)
    super().__init__()

  @property
  def symbol(self) -> str:
    return BINARY_OP_SYMBOLS[self.operator]

  def children(self):
    return (self.left, self.right)

  def _hash_key(self):
    return (NodeType.BINARY_OP, self.operator, self.left, self.right)

  def __repr__(self):
    return f"BinaryOpNode({self.symbol!r}, {self.left!r}, {self.right!r})"
