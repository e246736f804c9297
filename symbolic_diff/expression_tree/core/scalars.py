import numbers
import numpy as np
from typing import Any


class ScalarType:
  """Numeric field an expression tree is evaluated over.

  Wraps a numpy scalar dtype and exposes the capability set the tree
  operations rely on: the two identities, the field arithmetic, the four
  elementary functions, equality and canonical text.
  """

  __slots__ = ('name', 'dtype', 'is_ordered')

  def __init__(self, name: str, dtype: type, is_ordered: bool):
    self.name = name
    self.dtype = dtype
    self.is_ordered = is_ordered

  @property
  def zero(self):
    return self.dtype(0)

  @property
  def one(self):
    return self.dtype(1)

  def coerce(self, value: Any):
    """Convert a caller-supplied number into this scalar type"""
    if self.is_ordered and isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
      raise TypeError(f"{self.name} scalar cannot hold complex value {value!r}")
    return self.dtype(value)

  def parse_text(self, text: str):
    """Read a number at full precision; raises ValueError on malformed text"""
    text = text.strip()
    if self.is_ordered:
      float(text)
      return self.dtype(text)
    return self.dtype(complex(text))

  def add(self, left, right):
    return left + right

  def sub(self, left, right):
    return left - right

  def mul(self, left, right):
    return left * right

  def div(self, left, right):
    return left / right

  def pow(self, base, exponent):
    return np.power(base, exponent)

  def sin(self, value):
    return np.sin(value)

  def cos(self, value):
    return np.cos(value)

  def ln(self, value):
    return np.log(value)

  def exp(self, value):
    return np.exp(value)

  def equals(self, left, right) -> bool:
    return bool(left == right)

  def to_text(self, value) -> str:
    if self.is_ordered:
      return _real_text(value)
    imag = value.imag
    sign = '-' if np.signbit(imag) else '+'
    return f"({_real_text(value.real)}{sign}{_real_text(abs(imag))}j)"

  def __repr__(self) -> str:
    return f"ScalarType({self.name})"


def _real_text(value) -> str:
  # Positional notation only; the parser has no exponent syntax
  return np.format_float_positional(value, trim='-')


REAL = ScalarType('real', np.longdouble, is_ordered=True)
COMPLEX = ScalarType('complex', np.clongdouble, is_ordered=False)


def scalar_type_of(value: Any) -> ScalarType:
  """Pick the scalar type able to hold a plain Python or numpy number"""
  if isinstance(value, numbers.Real):
    return REAL
  if isinstance(value, numbers.Complex):
    return COMPLEX
  raise TypeError(f"Unsupported scalar value: {value!r}")
