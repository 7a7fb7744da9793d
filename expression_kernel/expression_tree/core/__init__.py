"""Core expression tree components."""

from .node import Node, ConstantNode, VariableNode, UnaryOpNode, BinaryOpNode, as_node
from .operators import (
    NodeType, OpType, UNARY_OPS, BINARY_OPS, BINARY_OP_SYMBOLS, UNARY_OP_NAMES,
    BINARY_OP_MAP, UNARY_OP_MAP, evaluate_unary_op, evaluate_binary_op,
    evaluate_unary_op_fast, evaluate_binary_op_fast
)

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'UnaryOpNode', 'BinaryOpNode', 'as_node',
    'NodeType', 'OpType', 'UNARY_OPS', 'BINARY_OPS', 'BINARY_OP_SYMBOLS', 'UNARY_OP_NAMES',
    'BINARY_OP_MAP', 'UNARY_OP_MAP', 'evaluate_unary_op', 'evaluate_binary_op',
    'evaluate_unary_op_fast', 'evaluate_binary_op_fast'
]
