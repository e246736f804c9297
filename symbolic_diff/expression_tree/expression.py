import numbers
from typing import Optional, Mapping, Any, Union, FrozenSet
import sympy as sp

from .core.node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .core.scalars import ScalarType, REAL, scalar_type_of


class Expression:
  """Value handle around an immutable node tree.

  ``Expression(3.5)`` builds a constant, ``Expression("x")`` a variable and
  ``Expression(node, scalar)`` wraps an existing tree. Operators build new
  trees without evaluating anything; ``**`` stands for ``^``.
  """

  __slots__ = ('root', 'scalar', '_string_cache')

  def __init__(self, source: Union[Node, str, numbers.Number], scalar: Optional[ScalarType] = None):
    if isinstance(source, Node):
      root = source
      if scalar is None:
        scalar = REAL
    elif isinstance(source, str):
      root = VariableNode(source)
      if scalar is None:
        scalar = REAL
    else:
      if scalar is None:
        scalar = scalar_type_of(source)
      root = ConstantNode(source, scalar)
    self.root = root
    self.scalar = scalar
    self._string_cache: Optional[str] = None

  def _wrap(self, node: Node) -> 'Expression':
    return Expression(node, self.scalar)

  def _operand(self, other) -> Node:
    if isinstance(other, Expression):
      if other.scalar is not self.scalar:
        raise TypeError(f"Cannot combine {self.scalar.name} and {other.scalar.name} expressions")
      return other.root
    if isinstance(other, numbers.Number):
      return ConstantNode(other, self.scalar)
    return NotImplemented

  def _binary(self, operator: str, other, reflected: bool = False):
    right = self._operand(other)
    if right is NotImplemented:
      return NotImplemented
    if reflected:
      return self._wrap(BinaryOpNode(operator, right, self.root))
    return self._wrap(BinaryOpNode(operator, self.root, right))

  def __add__(self, other):
    return self._binary('+', other)

  def __radd__(self, other):
    return self._binary('+', other, reflected=True)

  def __sub__(self, other):
    return self._binary('-', other)

  def __rsub__(self, other):
    return self._binary('-', other, reflected=True)

  def __mul__(self, other):
    return self._binary('*', other)

  def __rmul__(self, other):
    return self._binary('*', other, reflected=True)

  def __truediv__(self, other):
    return self._binary('/', other)

  def __rtruediv__(self, other):
    return self._binary('/', other, reflected=True)

  def __pow__(self, other):
    return self._binary('^', other)

  def __rpow__(self, other):
    return self._binary('^', other, reflected=True)

  def __neg__(self):
    return self._wrap(BinaryOpNode('*', ConstantNode(-1, self.scalar), self.root))

  def eval(self, context: Optional[Mapping[str, Any]] = None):
    """Evaluate under a name -> value binding.

    Only the names the tree references are looked up, and each looked-up
    value is coerced to the scalar type; other entries are ignored.
    """
    return self.root.evaluate(context if context is not None else {}, self.scalar)

  evaluate = eval

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def differentiate(self, var: str) -> 'Expression':
    return self._wrap(self.root.differentiate(var, self.scalar))

  def substitute(self, var: str, expr: Union['Expression', numbers.Number]) -> 'Expression':
    replacement = self._operand(expr)
    if replacement is NotImplemented:
      raise TypeError(f"Cannot substitute {type(expr).__name__} into an expression")
    return self._wrap(self.root.substitute(var, replacement))

  def copy(self) -> 'Expression':
    # Nodes never change, so sharing the root is a full copy
    return Expression(self.root, self.scalar)

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    from .utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self.root)

  def variables(self) -> FrozenSet[str]:
    from .utils.tree_utils import get_variables
    return frozenset(node.name for node in get_variables(self.root))

  def to_sympy(self) -> sp.Expr:
    from .utils.sympy_utils import to_sympy
    return to_sympy(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r}, {self.scalar.name})"

  def __hash__(self) -> int:
    return hash((self.scalar.name, self.root))

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.scalar is other.scalar and self.root == other.root


def constant(value, scalar: Optional[ScalarType] = None) -> Expression:
  return Expression(value, scalar)


def variable(name: str, scalar: ScalarType = REAL) -> Expression:
  return Expression(name, scalar)


def _unary(operator: str, arg: Expression) -> Expression:
  if not isinstance(arg, Expression):
    arg = Expression(arg)
  return Expression(UnaryOpNode(operator, arg.root), arg.scalar)


def sin(arg: Expression) -> Expression:
  return _unary('sin', arg)


def cos(arg: Expression) -> Expression:
  return _unary('cos', arg)


def ln(arg: Expression) -> Expression:
  return _unary('ln', arg)


def exp(arg: Expression) -> Expression:
  return _unary('exp', arg)
