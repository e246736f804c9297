"""Recursive-descent parser for infix expressions.

Grammar, lowest precedence first::

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := primary ('^' factor)?
    primary    := '(' expression ')'
                | number
                | identifier '(' expression ')'
                | identifier
                | '-' primary

``^`` is right-associative and unary minus becomes ``(-1 * primary)``.
Digits are ASCII only. Input nested beyond the interpreter's recursion
limit is reported as a syntax error.
An identifier immediately followed by ``(`` is always read as a function
call, so a variable cannot be named after one of the functions and then
be followed by a parenthesis.
"""

import logging
import re

from .errors import ExpressionSyntaxError
from .expression_tree import Expression, REAL, FUNCTION_NAMES
from .expression_tree.expression import sin, cos, ln, exp

logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r'\d+(\.\d*)?|\.\d+', re.ASCII)
_NUMBER_START = frozenset('0123456789.')

_FUNCTIONS = {
  'sin': sin,
  'cos': cos,
  'ln': ln,
  'exp': exp,
}


class Parser:
  """Single-use parser over one input string; tokens are read on the fly"""

  def __init__(self, text: str):
    self.text = text
    self.pos = 0

  def skip_whitespace(self):
    while self.pos < len(self.text) and self.text[self.pos].isspace():
      self.pos += 1

  def peek(self) -> str:
    return self.text[self.pos] if self.pos < len(self.text) else ''

  def get(self) -> str:
    char = self.peek()
    if char:
      self.pos += 1
    return char

  def error(self, message: str) -> ExpressionSyntaxError:
    return ExpressionSyntaxError(message, self.pos)

  def expect_closing(self, message: str):
    self.skip_whitespace()
    if self.peek() != ')':
      raise self.error(message)
    self.get()

  def parse(self) -> Expression:
    try:
      expr = self.parse_expression()
    except RecursionError:
      raise self.error("Expression is nested too deeply") from None
    self.skip_whitespace()
    if self.pos < len(self.text):
      raise self.error(f"Unexpected trailing input {self.text[self.pos:]!r}")
    return expr

  def parse_expression(self) -> Expression:
    expr = self.parse_term()
    self.skip_whitespace()
    while self.peek() in ('+', '-'):
      op = self.get()
      term = self.parse_term()
      expr = expr + term if op == '+' else expr - term
      self.skip_whitespace()
    return expr

  def parse_term(self) -> Expression:
    expr = self.parse_factor()
    self.skip_whitespace()
    while self.peek() in ('*', '/'):
      op = self.get()
      factor = self.parse_factor()
      expr = expr * factor if op == '*' else expr / factor
      self.skip_whitespace()
    return expr

  def parse_factor(self) -> Expression:
    base = self.parse_primary()
    self.skip_whitespace()
    if self.peek() == '^':
      self.get()
      # Right recursion makes a ^ b ^ c read as a ^ (b ^ c)
      return base ** self.parse_factor()
    return base

  def parse_primary(self) -> Expression:
    self.skip_whitespace()
    char = self.peek()

    if char == '(':
      self.get()
      expr = self.parse_expression()
      self.expect_closing("Expected ')'")
      return expr

    if char in _NUMBER_START:
      return self.parse_number()

    if char.isalpha():
      name = self.parse_identifier()
      self.skip_whitespace()
      if self.peek() != '(':
        return Expression(name, REAL)
      if name not in FUNCTION_NAMES:
        raise self.error(f"Unknown function: {name}")
      self.get()
      arg = self.parse_expression()
      self.expect_closing("Expected ')' after function argument")
      return _FUNCTIONS[name](arg)

    if char == '-':
      self.get()
      return Expression(-1, REAL) * self.parse_primary()

    if not char:
      raise self.error("Unexpected end of input")
    raise self.error(f"Unexpected character {char!r} in input")

  def parse_number(self) -> Expression:
    match = _NUMBER_PATTERN.match(self.text, self.pos)
    if match is None:
      raise self.error("Invalid number literal")
    self.pos = match.end()
    if self.peek() == '.':
      raise self.error(f"Invalid number literal {self.text[match.start():self.pos + 1]!r}")
    literal = match.group()
    if literal.endswith('.'):
      literal += '0'
    return Expression(REAL.parse_text(literal), REAL)

  def parse_identifier(self) -> str:
    start = self.pos
    while self.pos < len(self.text) and self.text[self.pos].isalpha():
      self.pos += 1
    return self.text[start:self.pos]


def parse(text: str) -> Expression:
  """Parse infix text into a real-valued expression tree"""
  expr = Parser(text).parse()
  if logger.isEnabledFor(logging.DEBUG):
    logger.debug("Parsed %r as %s", text, expr.to_string())
  return expr


parse_expression = parse
