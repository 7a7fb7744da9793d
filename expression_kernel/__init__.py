"""Expression Kernel

A small computer-algebra kernel: immutable expression trees with numeric
evaluation, symbolic differentiation and canonical rendering.
"""

from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode,
  NodeType, OpType,
  constant, variable, neg, exp, log, sin, cos,
  add, subtract, multiply, divide,
  evaluate, try_evaluate, Differentiator, derive, try_derive, render,
  ExpressionValidator, to_sympy, from_sympy, latex_representation
)
from .errors import ExpressionError, EvaluationError, DerivationError, Result
from .config import KernelConfig, get_config, configure, reset_config
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "VariableNode", "UnaryOpNode", "BinaryOpNode",
  "NodeType", "OpType",
  "constant", "variable", "neg", "exp", "log", "sin", "cos",
  "add", "subtract", "multiply", "divide",
  "evaluate", "try_evaluate", "Differentiator", "derive", "try_derive", "render",
  "ExpressionValidator", "to_sympy", "from_sympy", "latex_representation",
  "ExpressionError", "EvaluationError", "DerivationError", "Result",
  "KernelConfig", "get_config", "configure", "reset_config",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
