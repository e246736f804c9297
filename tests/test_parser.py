import numpy as np
import pytest

from symbolic_diff import parse, Parser, ExpressionSyntaxError, REAL, UnaryOpNode, VariableNode


def test_evaluation():
  assert parse("x * y").eval({"x": 10, "y": 12}) == 120


def test_operator_precedence():
  assert parse("2 + 3 * 4").to_string() == "(2 + (3 * 4))"
  assert parse("2 * 3 ^ 2").to_string() == "(2 * (3 ^ 2))"
  assert parse("(2 + 3) * 4").eval() == 20
  assert parse("3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3").eval() == 3 + 8 / 65536


def test_left_associative_binary_operators():
  assert parse("2 - 3 - 4").to_string() == "((2 - 3) - 4)"
  assert parse("8 / 4 / 2").eval() == 1


def test_power_is_right_associative():
  assert parse("2 ^ 3 ^ 2").to_string() == "(2 ^ (3 ^ 2))"
  assert parse("2 ^ 3 ^ 2").eval() == 512


def test_unary_minus():
  assert parse("-x").to_string() == "(-1 * x)"
  assert parse("--2").eval() == 2
  assert parse("-2 ^ 2").eval() == 4
  assert parse("3 - -x").eval({"x": 1}) == 4
  assert parse("-(x + 1)").eval({"x": 2}) == -3


def test_numbers():
  assert parse("42").eval() == 42
  assert parse("0.25").eval() == 0.25
  assert parse(".5").eval() == 0.5
  assert parse("3.").eval() == 3
  assert parse("0.1").eval() == REAL.parse_text("0.1")


def test_function_calls():
  expr = parse("sin(x)")
  assert isinstance(expr.root, UnaryOpNode)
  assert expr.root.operator == "sin"
  assert parse("sin (x)").to_string() == "sin(x)"
  assert abs(parse("exp(ln(x))").eval({"x": 3}) - 3) < 1e-12
  assert parse("cos(0)").eval() == 1


def test_bare_identifier_is_a_variable():
  expr = parse("velocity")
  assert isinstance(expr.root, VariableNode)
  assert expr.root.name == "velocity"
  # A function name not followed by '(' is an ordinary variable
  assert parse("sin * 2").eval({"sin": 3}) == 6


def test_whitespace_is_insignificant():
  assert parse("  x\t*\n2 ").eval({"x": 3}) == 6
  assert parse("x*2").to_string() == parse("x * 2").to_string()


@pytest.mark.parametrize("text, message", [
  ("(1 + 2", "Expected ')'"),
  ("sin(x", "Expected ')' after function argument"),
  ("foo(x)", "Unknown function: foo"),
  ("1 + $", "Unexpected character '$'"),
  ("", "Unexpected end of input"),
  ("2 *", "Unexpected end of input"),
  ("1 2", "Unexpected trailing input"),
  ("(1))", "Unexpected trailing input"),
  ("1.2.3", "Invalid number literal"),
])
def test_syntax_errors(text, message):
  with pytest.raises(ExpressionSyntaxError) as excinfo:
    parse(text)
  assert message in str(excinfo.value)


def test_syntax_error_is_a_builtin_syntax_error():
  with pytest.raises(SyntaxError):
    parse("(1 + 2")


def test_syntax_error_reports_position():
  with pytest.raises(ExpressionSyntaxError) as excinfo:
    parse("x + #")
  assert excinfo.value.position == 4


@pytest.mark.parametrize("text", [
  "x * y",
  "3 + 4 * 2 / ( 1 - 5 ) ^ 2 ^ 3",
  "sin(x) * cos(y) - ln(x + y) / exp(x)",
  "-x ^ 2 + -(y - 0.5)",
  "x ^ y ^ 0.5",
  "((((x))))",
])
def test_round_trip(text):
  context = {"x": 1.7, "y": 0.3}
  first = parse(text)
  rendered = first.to_string()
  assert rendered
  second = parse(rendered)
  assert abs(second.eval(context) - first.eval(context)) <= 1e-15 * max(1, abs(first.eval(context)))


def test_round_trip_is_stable_without_unary_minus():
  rendered = parse("sin(x) * 2.5 + y / 3").to_string()
  assert parse(rendered).to_string() == rendered


def test_parser_class():
  parser = Parser("x + 1")
  expr = parser.parse()
  assert expr.eval({"x": np.longdouble(1)}) == 2
  assert parser.pos == len("x + 1")


@pytest.mark.parametrize("text", ["٣ + 1", "x * ٤", "1.٥"])
def test_only_ascii_digits_are_numbers(text):
  with pytest.raises(ExpressionSyntaxError):
    parse(text)


@pytest.mark.parametrize("text", [
  "(" * 1000 + "x" + ")" * 1000,
  "-" * 2000 + "1",
  "sin(" * 1000 + "x" + ")" * 1000,
])
def test_deep_nesting_is_a_syntax_error(text):
  with pytest.raises(ExpressionSyntaxError, match="nested too deeply"):
    parse(text)
