from abc import ABC, abstractmethod
from typing import Mapping, Any
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
  evaluate_binary_op, evaluate_unary_op
)
from .scalars import ScalarType
from ...errors import UnboundVariableError


class Node(ABC):
  """Base node class; nodes are immutable once built so subtrees can be shared"""

  __slots__ = ('_hash_cache', '_size_cache')

  node_type: NodeType

  def __init__(self):
    self._set('_hash_cache', None)
    self._set('_size_cache', None)

  def _set(self, name: str, value: Any):
    object.__setattr__(self, name, value)

  def __setattr__(self, name: str, value: Any):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name: str):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __copy__(self):
    return self

  def __deepcopy__(self, memo):
    return self

  @abstractmethod
  def evaluate(self, context: Mapping[str, Any], scalar: ScalarType):
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def differentiate(self, var: str, scalar: ScalarType) -> 'Node':
    pass

  @abstractmethod
  def substitute(self, var: str, replacement: 'Node') -> 'Node':
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._set('_size_cache', self._compute_size())
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._set('_hash_cache', self._compute_hash())
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _same_as(self, other: 'Node') -> bool:
    pass

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node) or other.node_type != self.node_type:
      return False
    return hash(self) == hash(other) and self._same_as(other)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class VariableNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    super().__init__()
    self._set('name', name)

  def evaluate(self, context, scalar):
    try:
      value = context[self.name]
    except KeyError:
      raise UnboundVariableError(self.name) from None
    return scalar.coerce(value)

  def to_string(self) -> str:
    return self.name

  def differentiate(self, var, scalar):
    return ConstantNode(scalar.one if self.name == var else scalar.zero, scalar)

  def substitute(self, var, replacement):
    return replacement if self.name == var else self

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _same_as(self, other) -> bool:
    return self.name == other.name


class ConstantNode(Node):
  __slots__ = ('value', 'scalar')

  node_type = NodeType.CONSTANT

  def __init__(self, value, scalar: ScalarType):
    super().__init__()
    self._set('value', scalar.coerce(value))
    self._set('scalar', scalar)

  def evaluate(self, context, scalar):
    return self.value

  def to_string(self) -> str:
    return self.scalar.to_text(self.value)

  def differentiate(self, var, scalar):
    return ConstantNode(scalar.zero, scalar)

  def substitute(self, var, replacement):
    return self

  def _compute_size(self) -> int:
    return 1

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.scalar.name, self.value))

  def _same_as(self, other) -> bool:
    return self.scalar is other.scalar and self.scalar.equals(self.value, other.value)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    self._set('operator', operator)
    self._set('op_type', BINARY_OP_MAP[operator])
    self._set('left', left)
    self._set('right', right)

  def evaluate(self, context, scalar):
    left_val = self.left.evaluate(context, scalar)
    right_val = self.right.evaluate(context, scalar)
    return evaluate_binary_op(left_val, right_val, self.op_type, scalar)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def differentiate(self, var, scalar):
    f, g = self.left, self.right
    df = f.differentiate(var, scalar)
    dg = g.differentiate(var, scalar)

    if self.op_type == OpType.ADD:
      return BinaryOpNode('+', df, dg)
    elif self.op_type == OpType.SUB:
      return BinaryOpNode('-', df, dg)
    elif self.op_type == OpType.MUL:
      # f'g + fg'
      return BinaryOpNode('+', BinaryOpNode('*', df, g), BinaryOpNode('*', f, dg))
    elif self.op_type == OpType.DIV:
      # (f'g - fg') / g^2
      numerator = BinaryOpNode('-', BinaryOpNode('*', df, g), BinaryOpNode('*', f, dg))
      return BinaryOpNode('/', numerator, BinaryOpNode('^', g, ConstantNode(2, scalar)))
    elif self.op_type == OpType.POW:
      # f^g * (g' ln(f) + g f'/f)
      log_term = BinaryOpNode('*', dg, UnaryOpNode('ln', f))
      ratio_term = BinaryOpNode('*', g, BinaryOpNode('/', df, f))
      return BinaryOpNode('*', self, BinaryOpNode('+', log_term, ratio_term))
    raise ValueError(f"Unhandled binary operation: {self.operator!r}")

  def substitute(self, var, replacement):
    return BinaryOpNode(self.operator,
                        self.left.substitute(var, replacement),
                        self.right.substitute(var, replacement))

  def _compute_size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.operator, hash(self.left), hash(self.right)))

  def _same_as(self, other) -> bool:
    return self.operator == other.operator and self.left == other.left and self.right == other.right


class UnaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Unknown function: {operator!r}")
    self._set('operator', operator)
    self._set('op_type', UNARY_OP_MAP[operator])
    self._set('operand', operand)

  def evaluate(self, context, scalar):
    operand_val = self.operand.evaluate(context, scalar)
    return evaluate_unary_op(operand_val, self.op_type, scalar)

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def differentiate(self, var, scalar):
    f = self.operand
    df = f.differentiate(var, scalar)

    if self.op_type == OpType.SIN:
      return BinaryOpNode('*', UnaryOpNode('cos', f), df)
    elif self.op_type == OpType.COS:
      negated = BinaryOpNode('*', ConstantNode(-1, scalar), UnaryOpNode('sin', f))
      return BinaryOpNode('*', negated, df)
    elif self.op_type == OpType.LN:
      return BinaryOpNode('/', df, f)
    elif self.op_type == OpType.EXP:
      return BinaryOpNode('*', self, df)
    raise ValueError(f"Unhandled unary operation: {self.operator!r}")

  def substitute(self, var, replacement):
    return UnaryOpNode(self.operator, self.operand.substitute(var, replacement))

  def _compute_size(self) -> int:
    return 1 + self.operand.size()

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.operator, hash(self.operand)))

  def _same_as(self, other) -> bool:
    return self.operator == other.operator and self.operand == other.operand

