from enum import IntEnum

from .scalars import ScalarType
from ...errors import DivisionByZeroError, DomainError


class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3


class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  SIN = 5
  COS = 6
  LN = 7
  EXP = 8


# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {'sin': OpType.SIN, 'cos': OpType.COS, 'ln': OpType.LN, 'exp': OpType.EXP}

FUNCTION_NAMES = frozenset(UNARY_OP_MAP)


def evaluate_binary_op(left_val, right_val, op_type: OpType, scalar: ScalarType):
  if op_type == OpType.ADD:
    return scalar.add(left_val, right_val)
  elif op_type == OpType.SUB:
    return scalar.sub(left_val, right_val)
  elif op_type == OpType.MUL:
    return scalar.mul(left_val, right_val)
  elif op_type == OpType.DIV:
    if scalar.equals(right_val, scalar.zero):
      raise DivisionByZeroError()
    return scalar.div(left_val, right_val)
  elif op_type == OpType.POW:
    return scalar.pow(left_val, right_val)
  raise ValueError(f"Not a binary operation: {op_type!r}")


def evaluate_unary_op(operand_val, op_type: OpType, scalar: ScalarType):
  if op_type == OpType.SIN:
    return scalar.sin(operand_val)
  elif op_type == OpType.COS:
    return scalar.cos(operand_val)
  elif op_type == OpType.LN:
    # Complex logarithm is defined off zero; only ordered fields reject <= 0
    if scalar.is_ordered and operand_val <= scalar.zero:
      raise DomainError(f"Logarithm of non-positive value {scalar.to_text(operand_val)}")
    return scalar.ln(operand_val)
  elif op_type == OpType.EXP:
    return scalar.exp(operand_val)
  raise ValueError(f"Not a unary operation: {op_type!r}")
