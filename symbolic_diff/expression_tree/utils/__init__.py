"""Utilities for expression trees."""

from .sympy_utils import to_sympy
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    find_nodes_by_operator, get_variable_usage_counts, apply_to_all_nodes,
    get_constants, get_variables, get_binary_ops, get_unary_ops
)

__all__ = [
    'to_sympy', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'find_nodes_by_operator', 'get_variable_usage_counts', 'apply_to_all_nodes',
    'get_constants', 'get_variables', 'get_binary_ops', 'get_unary_ops'
]
