"""Expression Tree Module

Immutable expression trees with evaluation, rendering, symbolic
differentiation and substitution, generic over the scalar type.
"""

from .expression import Expression, constant, variable, sin, cos, ln, exp
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.scalars import ScalarType, REAL, COMPLEX, scalar_type_of
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    FUNCTION_NAMES,
    evaluate_binary_op,
    evaluate_unary_op
)
from .utils import ExpressionValidator, to_sympy

__all__ = [
    "Expression", "constant", "variable", "sin", "cos", "ln", "exp",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "ScalarType", "REAL", "COMPLEX", "scalar_type_of",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "FUNCTION_NAMES",
    "evaluate_binary_op", "evaluate_unary_op",
    "ExpressionValidator", "to_sympy"
]
