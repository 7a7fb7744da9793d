"""Expression Tree Module

Immutable expression nodes and the three walks over them: evaluation,
symbolic differentiation and rendering.
"""

from .core.node import Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode
from .core.operators import NodeType, OpType
from .expression import (
    Expression, constant, variable, neg, exp, log, sin, cos,
    add, subtract, multiply, divide,
    numeric, sum_, difference, product, division
)
from .evaluation import evaluate, try_evaluate
from .differentiation import Differentiator, derive, try_derive
from .rendering import render
from .utils import ExpressionValidator, to_sympy, from_sympy, latex_representation

__all__ = [
    "Node", "ConstantNode", "VariableNode", "UnaryOpNode", "BinaryOpNode",
    "NodeType", "OpType",
    "Expression", "constant", "variable", "neg", "exp", "log", "sin", "cos",
    "add", "subtract", "multiply", "divide",
    "numeric", "sum_", "difference", "product", "division",
    "evaluate", "try_evaluate", "Differentiator", "derive", "try_derive", "render",
    "ExpressionValidator", "to_sympy", "from_sympy", "latex_representation"
]
