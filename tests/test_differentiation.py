import numpy as np
import pytest
import sympy as sp

from symbolic_diff import (
  Expression, constant, variable, sin, cos, ln, exp, parse, to_sympy,
  DomainError, DivisionByZeroError
)


def test_product_with_sine():
  """d/dx x*sin(x) = sin(x) + x*cos(x)"""
  derivative = parse("x * sin(x)").differentiate("x")
  expected = 1 * np.cos(1.0) + np.sin(1.0)
  assert abs(derivative.eval({"x": 1}) - expected) < 1e-9


@pytest.mark.parametrize("value", [0, 1, -2.5, 1e6])
@pytest.mark.parametrize("name", ["x", "y"])
def test_zero_derivative_law(value, name):
  assert constant(value).differentiate(name).eval({}) == 0


def test_identity_derivative_law():
  assert variable("x").differentiate("x").eval({}) == 1
  assert variable("x").differentiate("y").eval({}) == 0
  assert variable("x").differentiate("x").to_string() == "1"


def test_derivatives_are_not_simplified():
  x = variable("x")
  assert constant(5).differentiate("x").to_string() == "0"
  assert (x + constant(5)).differentiate("x").to_string() == "(1 + 0)"
  assert (x * x).differentiate("x").to_string() == "((1 * x) + (x * 1))"
  assert (x / x).differentiate("x").to_string() == "(((1 * x) - (x * 1)) / (x ^ 2))"
  assert cos(x).differentiate("x").to_string() == "((-1 * sin(x)) * 1)"
  assert ln(x).differentiate("x").to_string() == "(1 / x)"
  assert exp(x).differentiate("x").to_string() == "(exp(x) * 1)"


def test_general_power_rule():
  x = variable("x")
  derivative = (x ** constant(2)).differentiate("x")
  assert derivative.to_string() == "((x ^ 2) * ((0 * ln(x)) + (2 * (1 / x))))"
  assert abs(derivative.eval({"x": 3}) - 6) < 1e-12

  exponential = (constant(2) ** x).differentiate("x")
  assert abs(exponential.eval({"x": 1.5}) - 2 ** 1.5 * np.log(2)) < 1e-12

  tower = (x ** x).differentiate("x")
  assert abs(tower.eval({"x": 2}) - 4 * (np.log(2) + 1)) < 1e-12


def test_power_rule_needs_a_loggable_base():
  derivative = (variable("x") ** constant(2)).differentiate("x")
  with pytest.raises(DomainError):
    derivative.eval({"x": -3})


def test_differentiation_never_raises_but_eval_may():
  x = variable("x")
  derivative = (constant(1) / (x - x)).differentiate("x")
  with pytest.raises(DivisionByZeroError):
    derivative.eval({"x": 1})


def test_differentiate_leaves_operand_untouched():
  expr = parse("x ^ 3 + sin(x * y)")
  before = expr.to_string()
  expr.differentiate("x")
  expr.differentiate("y")
  assert expr.to_string() == before


def test_partial_derivative_treats_other_variables_as_constants():
  derivative = parse("x * y + sin(y)").differentiate("y")
  context = {"x": 2, "y": 0.5}
  assert abs(derivative.eval(context) - (2 + np.cos(0.5))) < 1e-12


@pytest.mark.parametrize("text", [
  "x * sin(x)",
  "exp(x) / x",
  "ln(x) * cos(x)",
  "x ^ 3",
  "2 ^ x",
  "x ^ x",
  "sin(cos(x)) - exp(2 * x)",
  "ln(x ^ 2 + 1) / (x + 3)",
])
def test_matches_sympy(text):
  x = sp.Symbol("x", positive=True)
  expr = parse(text)
  ours = to_sympy(expr.differentiate("x").root, {"x": x})
  reference = sp.diff(to_sympy(expr.root, {"x": x}), x)
  assert sp.simplify(ours - reference) == 0


def _random_positive(rng, depth):
  """Trees over + and * with positive leaves, used as safe divisors"""
  if depth == 0 or rng.random() < 0.3:
    if rng.random() < 0.5:
      return variable("x")
    return constant(float(rng.uniform(0.5, 2.0)))
  left = _random_positive(rng, depth - 1)
  right = _random_positive(rng, depth - 1)
  return left + right if rng.random() < 0.5 else left * right


def _random_tree(rng, depth):
  if depth == 0 or rng.random() < 0.25:
    if rng.random() < 0.6:
      return variable("x")
    return constant(float(rng.uniform(-2.0, 2.0)))
  op = rng.choice(['+', '-', '*', '/'])
  left = _random_tree(rng, depth - 1)
  if op == '/':
    return left / _random_positive(rng, depth - 1)
  right = _random_tree(rng, depth - 1)
  if op == '+':
    return left + right
  if op == '-':
    return left - right
  return left * right


def test_matches_central_difference_on_random_trees():
  rng = np.random.default_rng(1234)
  h = np.longdouble(1e-5)

  for _ in range(200):
    expr = _random_tree(rng, 4)
    derivative = expr.differentiate("x")
    point = np.longdouble(rng.uniform(1.0, 2.0))

    numeric = (expr.eval({"x": point + h}) - expr.eval({"x": point - h})) / (2 * h)
    symbolic = derivative.eval({"x": point})

    assert abs(numeric - symbolic) <= 1e-5 * max(1.0, abs(symbolic)), expr.to_string()


def test_expression_handle_over_complex_constants_differentiates_to_complex_zero():
  derivative = Expression(2 + 1j).differentiate("x")
  assert derivative.eval() == 0
  assert derivative.scalar.name == "complex"
