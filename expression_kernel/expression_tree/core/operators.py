import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  UNARY_OP = 2
  BINARY_OP = 3

class OpType(IntEnum):
  # Unary ops
  NEG = 0
  EXP = 1
  LOG = 2
  SIN = 3
  COS = 4
  # Binary ops
  ADD = 5
  SUB = 6
  MUL = 7
  DIV = 8

UNARY_OPS = frozenset({OpType.NEG, OpType.EXP, OpType.LOG, OpType.SIN, OpType.COS})
BINARY_OPS = frozenset({OpType.ADD, OpType.SUB, OpType.MUL, OpType.DIV})

# Rendering tables
BINARY_OP_SYMBOLS = {OpType.ADD: '+', OpType.SUB: '-', OpType.MUL: '*', OpType.DIV: '/'}
UNARY_OP_NAMES = {
    OpType.NEG: 'neg', OpType.EXP: 'exp', OpType.LOG: 'log',
    OpType.SIN: 'sin', OpType.COS: 'cos'
}

# Mapping dictionaries
BINARY_OP_MAP = {symbol: op for op, symbol in BINARY_OP_SYMBOLS.items()}
UNARY_OP_MAP = {name: op for op, name in UNARY_OP_NAMES.items()}

# Plain integer codes, numba folds these into the kernels as constants
_NEG = int(OpType.NEG)
_EXP = int(OpType.EXP)
_LOG = int(OpType.LOG)
_SIN = int(OpType.SIN)
_COS = int(OpType.COS)
_ADD = int(OpType.ADD)
_SUB = int(OpType.SUB)
_MUL = int(OpType.MUL)
_DIV = int(OpType.DIV)


def resolve_unary_op(op) -> OpType:
  """Accept an OpType or its function name ('sin', 'neg', ...)"""
  if isinstance(op, str):
    if op not in UNARY_OP_MAP:
      raise ValueError(f"Unknown unary operation: {op!r}")
    return UNARY_OP_MAP[op]
  op = OpType(op)
  if op not in UNARY_OPS:
    raise ValueError(f"{op.name} is not a unary operation")
  return op


def resolve_binary_op(op) -> OpType:
  """Accept an OpType or its symbol ('+', '-', '*', '/')"""
  if isinstance(op, str):
    if op not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operation: {op!r}")
    return BINARY_OP_MAP[op]
  op = OpType(op)
  if op not in BINARY_OPS:
    raise ValueError(f"{op.name} is not a binary operation")
  return op


@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op_fast(operand_val, op_code):
  if op_code == _NEG:
    return -operand_val
  elif op_code == _EXP:
    return np.exp(operand_val)
  elif op_code == _LOG:
    return np.log(operand_val)
  elif op_code == _SIN:
    return np.sin(operand_val)
  elif op_code == _COS:
    return np.cos(operand_val)
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_fast(left_val, right_val, op_code):
  if op_code == _ADD:
    return left_val + right_val
  elif op_code == _SUB:
    return left_val - right_val
  elif op_code == _MUL:
    return left_val * right_val
  elif op_code == _DIV:
    # IEEE semantics: x/0 -> +-inf, 0/0 -> nan
    return left_val / right_val
  return np.nan


def evaluate_unary_op(operand_val: float, op: OpType) -> float:
  return float(evaluate_unary_op_fast(np.float64(operand_val), int(op)))

def evaluate_binary_op(left_val: float, right_val: float, op: OpType) -> float:
  return float(evaluate_binary_op_fast(np.float64(left_val), np.float64(right_val), int(op)))
