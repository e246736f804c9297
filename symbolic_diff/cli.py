#!/usr/bin/env python3
"""
Command-line front end.

    differentiator --eval "x * y" x=10 y=12
    differentiator --diff "x * sin(x)" --by x
"""
import argparse
import sys
from typing import Dict, List, Optional, Tuple

from .errors import ExpressionError
from .expression_tree import REAL, ExpressionValidator
from .logging_system import LogLevel, configure_logging
from .parser import parse

# Stays below the interpreter's default recursion limit
DEFAULT_MAX_DEPTH = 500


class InvalidAssignmentError(ValueError):
    pass


def parse_assignment(text: str) -> Tuple[str, object]:
    """Split ``name=value`` into the name and a real scalar"""
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise InvalidAssignmentError(f"Invalid assignment: {text}")
    try:
        return name, REAL.parse_text(value)
    except ValueError:
        raise InvalidAssignmentError(f"Invalid assignment: {text}") from None


def build_context(assignments: List[str]) -> Dict[str, object]:
    context = {}
    for assignment in assignments:
        name, value = parse_assignment(assignment)
        context[name] = value
    return context


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="differentiator",
        description="Evaluate or symbolically differentiate an infix expression"
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--eval", dest="eval_expr", metavar="EXPRESSION",
                      help="Evaluate EXPRESSION using the name=value assignments")
    mode.add_argument("--diff", dest="diff_expr", metavar="EXPRESSION",
                      help="Print the derivative of EXPRESSION (needs --by)")
    parser.add_argument("assignments", nargs="*", metavar="NAME=VALUE",
                        help="Variable bindings for --eval")
    parser.add_argument("--by", metavar="VARIABLE",
                        help="Variable to differentiate with respect to")
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                        help=f"Reject expressions or derivatives nested deeper than this (default {DEFAULT_MAX_DEPTH})")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Suppress error messages")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    return parser


def _log_level(args: argparse.Namespace) -> LogLevel:
    if args.quiet:
        return LogLevel.SILENT
    if args.verbose:
        return LogLevel.VERBOSE
    return LogLevel.MINIMAL


def run(args: argparse.Namespace) -> int:
    logger = configure_logging(
        log_level=_log_level(args),
        log_to_file=args.log_file is not None,
        log_file_path=args.log_file
    )

    text = args.eval_expr if args.eval_expr is not None else args.diff_expr
    try:
        expr = parse(text)

        problems = ExpressionValidator.find_problems(expr.root, max_depth=args.max_depth)
        if problems:
            for problem in problems:
                logger.error(problem)
            return 1

        if args.eval_expr is not None:
            context = build_context(args.assignments)
            if logger.is_enabled(LogLevel.VERBOSE):
                logger.debug(f"Evaluating {expr.to_string()} with {sorted(context)}")
            result = expr.eval(context)
            print(expr.scalar.to_text(result))
        else:
            if not args.by:
                logger.error("Missing --by option for differentiation")
                return 1
            if args.assignments:
                logger.warning(f"Ignoring assignments in --diff mode: {' '.join(args.assignments)}")
            derivative = expr.differentiate(args.by)
            # Derivatives nest deeper than their input
            depth = derivative.depth()
            if depth > args.max_depth:
                logger.error(f"Derivative depth {depth} exceeds limit {args.max_depth}")
                return 1
            if logger.is_enabled(LogLevel.VERBOSE):
                logger.debug(f"Derivative has {derivative.size()} nodes")
            print(derivative.to_string())
    except (ExpressionError, InvalidAssignmentError) as e:
        logger.error(str(e))
        return 1
    except RecursionError:
        logger.error("Expression is nested too deeply to process")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
