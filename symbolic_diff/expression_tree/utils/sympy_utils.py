import numpy as np
import sympy as sp
from typing import Dict

from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from ..core.scalars import REAL


SYMPY_FUNCTIONS = {
  'sin': sp.sin,
  'cos': sp.cos,
  'ln': sp.log,
  'exp': sp.exp,
}


def _real_to_sympy(value) -> sp.Expr:
  if np.isfinite(value) and value == int(value):
    return sp.Integer(int(value))
  return sp.Float(REAL.to_text(value))


def constant_to_sympy(node: ConstantNode) -> sp.Expr:
  """Integral constants map to exact integers so SymPy can cancel them"""
  if node.scalar.is_ordered:
    return _real_to_sympy(node.value)
  real_part = _real_to_sympy(node.value.real)
  imag_part = _real_to_sympy(node.value.imag)
  return real_part + sp.I * imag_part


def to_sympy(node: Node, symbols: Dict[str, sp.Symbol] = None) -> sp.Expr:
  """Convert a node tree into the equivalent SymPy expression.

  Variables become SymPy symbols of the same name; ``symbols`` can pin a
  name to a specific symbol (e.g. one declared positive).
  """
  if symbols is None:
    symbols = {}

  if isinstance(node, VariableNode):
    if node.name not in symbols:
      symbols[node.name] = sp.Symbol(node.name)
    return symbols[node.name]

  if isinstance(node, ConstantNode):
    return constant_to_sympy(node)

  if isinstance(node, UnaryOpNode):
    return SYMPY_FUNCTIONS[node.operator](to_sympy(node.operand, symbols))

  if isinstance(node, BinaryOpNode):
    left = to_sympy(node.left, symbols)
    right = to_sympy(node.right, symbols)
    if node.operator == '+':
      return sp.Add(left, right)
    elif node.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif node.operator == '*':
      return sp.Mul(left, right)
    elif node.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    elif node.operator == '^':
      return sp.Pow(left, right)

  raise RuntimeWarning(f"to_sympy reached unexpected node {node!r}")
