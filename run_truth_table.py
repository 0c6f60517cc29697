#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Command-line interface for truth-table analysis with configurable logging levels

import sys
import argparse
from typing import List, Optional, TextIO

from formula import parse_tokens, tokenize
from formula.ast_nodes import Expr
from formula.exceptions import LexError, ParseError
from logic import (
    DEFAULT_MAX_VARIABLES,
    Classification,
    TooManyVariablesError,
    classify,
    collect_variables,
    truth_table,
)
from utils.logger import configure_logging, get_logger


def read_formula(formula_arg: Optional[str], stream: TextIO) -> str:
    """Return the formula from the command line or from one line of input.

    Args:
        formula_arg: Formula given as argument, ``-`` or None to read ``stream``
        stream: Input stream used when no formula argument is given

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        ValueError: No formula text was supplied
    """
    if formula_arg is not None and formula_arg != "-":
        text = formula_arg.strip()
    else:
        if stream.isatty():
            print("Please enter a logical formula:", flush=True)
        text = stream.readline().strip()

    if not text:
        raise ValueError("No formula given")

    return text


def describe_error_location(formula: str, position: int) -> str:
    """Return the formula with a caret line under ``position``."""
    return f"  {formula}\n  {' ' * position}^"


def report_results(ast: Expr, max_variables: Optional[int], show_table: bool) -> None:
    """Classify a parsed formula and log variables, buckets and verdict.

    Assignments are enumerated once; with ``show_table`` the buckets are
    split from the logged rows.

    Args:
        ast: Root of the parsed formula
        max_variables: Enumeration bound handed to the classifier
        show_table: Also log every truth-table row in enumeration order
    """
    logger = get_logger()

    if show_table:
        rows = truth_table(ast, max_variables=max_variables)
        result = Classification.from_rows(collect_variables(ast), rows)
    else:
        result = classify(ast, max_variables=max_variables)

    logger.variables_listed(result.variables)

    if show_table:
        logger.info("Truth table:")
        for assignment, value in rows:
            logger.truth_table_row(assignment, value)

    logger.assignment_bucket("Satisfying assignments", result.satisfying)
    logger.assignment_bucket("Falsifying assignments", result.falsifying)
    logger.classification_summary(
        result.satisfiability.name, len(result.satisfying), result.total
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth-table analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py "ilpleut and fenetreouverte"
  python run_truth_table.py "if a then b" --table
  echo "a or not a" | python run_truth_table.py
  python run_truth_table.py "a iff (b or c)" -v

Formula syntax:
  Propositions are letter-only names. Connectives, loosest first:
    iff, if ... then ..., or, and, not
  Parentheses group sub-formulas.
        """,
    )

    parser.add_argument(
        "formula",
        nargs="?",
        help="Formula to analyze (read one line from standard input if omitted or '-')",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show the token stream and the parsed AST",
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors"
    )

    parser.add_argument(
        "--show-tokens", action="store_true", help="Print the token stream"
    )

    parser.add_argument(
        "--show-ast", action="store_true", help="Print the parsed AST"
    )

    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the full truth table in enumeration order",
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse formulas with more distinct variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """Main entry point for truth-table analysis.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug, quiet=args.quiet)
    logger = get_logger()

    formula = None
    try:
        formula = read_formula(args.formula, stdin if stdin is not None else sys.stdin)
        logger.formula_loaded(formula)

        tokens = tokenize(formula)
        if args.show_tokens or args.verbose:
            logger.tokens_listed(tokens)

        ast = parse_tokens(tokens)
        if args.show_ast or args.verbose:
            logger.ast_built(repr(ast), str(ast))

        report_results(ast, args.max_variables, args.table)
        return 0

    except LexError as e:
        logger.error(f"Formula lexing error: {e}")
        logger.error(describe_error_location(formula, e.position))
        return 2

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        if e.position is not None:
            logger.error(describe_error_location(formula, e.position))
        return 2

    except TooManyVariablesError as e:
        logger.error(f"Enumeration refused: {e}")
        return 3

    except ValueError as e:
        logger.error(f"Input error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
