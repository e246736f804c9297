"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. The traversals are
iterative so they stay usable on trees deeper than the interpreter's
recursion limit, which is what a depth guard needs before any of the
recursive tree operations run.
"""

from typing import List, Dict, Callable, Any, cast
from collections import Counter, deque

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode


def _children(node: Node) -> List[Node]:
    if isinstance(node, BinaryOpNode):
        return [node.left, node.right]
    elif isinstance(node, UnaryOpNode):
        return [node.operand]
    return []


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Shared subtrees are reported once per occurrence.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(_children(current_node))

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left before right"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(_children(current_node)))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]

    while stack:
        current_node, depth = stack.pop()
        max_depth = max(max_depth, depth)
        for child in _children(current_node):
            stack.append((child, depth + 1))

    return max_depth


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """Find all nodes of a specific type in the tree."""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """Find all operator nodes using the given operator symbol or function name."""
    return [
        n for n in get_all_nodes(node, 'depth_first')
        if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator
    ]


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """Count how often each variable name occurs in the tree."""
    return dict(Counter(n.name for n in get_variables(node)))


def apply_to_all_nodes(node: Node, func: Callable[[Node], Any],
                       traversal_order: str = 'depth_first') -> List[Any]:
    """Apply a function to every node and collect the results."""
    return [func(n) for n in get_all_nodes(node, traversal_order)]


# Convenience functions for common operations
def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return cast(List[VariableNode], find_nodes_by_type(node, VariableNode))


def get_binary_ops(node: Node) -> List[BinaryOpNode]:
    """Get all binary operation nodes in the tree."""
    return cast(List[BinaryOpNode], find_nodes_by_type(node, BinaryOpNode))


def get_unary_ops(node: Node) -> List[UnaryOpNode]:
    """Get all function application nodes in the tree."""
    return cast(List[UnaryOpNode], find_nodes_by_type(node, UnaryOpNode))
