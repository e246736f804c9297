"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .scalars import ScalarType, REAL, COMPLEX, scalar_type_of
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, FUNCTION_NAMES,
    evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'ScalarType', 'REAL', 'COMPLEX', 'scalar_type_of',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'FUNCTION_NAMES',
    'evaluate_binary_op', 'evaluate_unary_op'
]
