"""Error taxonomy for parsing and evaluating expressions.

Each error also derives from the closest builtin exception so callers that
only know the builtin hierarchy still catch it.
"""


class ExpressionError(Exception):
  """Base class for every error raised by the expression engine"""


class ExpressionSyntaxError(ExpressionError, SyntaxError):
  """Malformed input text: unbalanced parentheses, unknown function, stray character"""

  def __init__(self, message: str, position: int = -1):
    super().__init__(message)
    self.message = message
    self.position = position

  def __str__(self) -> str:
    if self.position >= 0:
      return f"{self.message} at position {self.position}"
    return self.message


class UnboundVariableError(ExpressionError, LookupError):
  """A variable has no value in the binding context"""

  def __init__(self, name: str):
    super().__init__(f'Variable "{name}" not found in context')
    self.name = name


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
  """A divisor evaluated to the scalar zero"""

  def __init__(self, message: str = "Division by zero"):
    super().__init__(message)


class DomainError(ExpressionError, ValueError):
  """A function argument lies outside the function's domain"""


UnboundVariable = UnboundVariableError
DivisionByZero = DivisionByZeroError

__all__ = [
  'ExpressionError', 'ExpressionSyntaxError', 'UnboundVariableError',
  'DivisionByZeroError', 'DomainError', 'UnboundVariable', 'DivisionByZero'
]
