"""Symbolic Expression Engine

Parses infix expressions into immutable trees that can be evaluated,
printed, symbolically differentiated and substituted into.
"""

from .errors import (
  ExpressionError, ExpressionSyntaxError, UnboundVariableError,
  DivisionByZeroError, DomainError, UnboundVariable, DivisionByZero
)
from .expression_tree import (
  Expression, constant, variable, sin, cos, ln, exp,
  Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
  ScalarType, REAL, COMPLEX, ExpressionValidator, to_sympy
)
from .parser import Parser, parse

__version__ = "0.1.0"
__all__ = [
  "ExpressionError", "ExpressionSyntaxError", "UnboundVariableError",
  "DivisionByZeroError", "DomainError", "UnboundVariable", "DivisionByZero",
  "Expression", "constant", "variable", "sin", "cos", "ln", "exp",
  "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "ScalarType", "REAL", "COMPLEX", "ExpressionValidator", "to_sympy",
  "Parser", "parse"
]
