import numpy as np
from typing import Optional, List
from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode, VariableNode
from ..core.operators import BINARY_OP_MAP, UNARY_OP_MAP
from .tree_utils import calculate_tree_depth, get_all_nodes


class ExpressionValidator:
  """Structural checks a caller can run before handing a tree to the recursive operations"""

  @staticmethod
  def is_valid_expression(node: Node, max_depth: Optional[int] = None) -> bool:
    return not ExpressionValidator.find_problems(node, max_depth)

  @staticmethod
  def find_problems(node: Node, max_depth: Optional[int] = None) -> List[str]:
    problems = []

    if max_depth is not None:
      depth = calculate_tree_depth(node)
      if depth > max_depth:
        problems.append(f"Expression depth {depth} exceeds limit {max_depth}")

    for current in get_all_nodes(node, 'depth_first'):
      problems.extend(ExpressionValidator._node_problems(current))

    return problems

  @staticmethod
  def _node_problems(node: Node) -> List[str]:
    if isinstance(node, ConstantNode):
      if not np.isfinite(node.value):
        return [f"Non-finite constant {node.to_string()}"]
      return []

    elif isinstance(node, VariableNode):
      if not node.name:
        return ["Empty variable name"]
      return []

    elif isinstance(node, BinaryOpNode):
      if node.operator not in BINARY_OP_MAP:
        return [f"Unknown binary operator {node.operator!r}"]
      return []

    elif isinstance(node, UnaryOpNode):
      if node.operator not in UNARY_OP_MAP:
        return [f"Unknown function {node.operator!r}"]
      return []

    return [f"Unknown node type {type(node).__name__}"]
