# formula/__init__.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Formula tokenization and parsing components for propositional logic

"""Propositional formula parsing for truth-table analysis.

This module provides the front-end of the engine: it converts textual
formulas into immutable Abstract Syntax Trees that the ``logic`` package
evaluates and classifies. Formulas use English keywords for connectives
and letter-only proposition names.

Core Functions:
    tokenize: Converts formula strings into token lists
    parse: Complete tokenization and parsing pipeline

Supported Logic:
    - Propositional variables (``[a-zA-Z]+``)
    - Negation (``not``), conjunction (``and``), disjunction (``or``)
    - Implication (``if ... then ...``) and biconditional (``iff``)

Grammar Features:
    - Left-associative ``and`` / ``or``, right-associative ``iff`` / implication
    - Proper operator precedence handling
    - Parenthetical grouping support
    - Positioned error reporting through LexError and ParseError
    - Nesting bounded by MAX_NESTING_DEPTH

Example:
    >>> from formula import parse
    >>> ast = parse("if ilpleut then not fenetreouverte")
    >>> # Returns Implies(Var('ilpleut'), Not(Var('fenetreouverte')))
"""

from .exceptions import FormulaError, LexError, ParseError, ParseErrorKind
from .grammar import MAX_NESTING_DEPTH, parse_tokens
from .lexer import Token, tokenize
from utils.logger import get_logger


def parse(source: str):
    """Parse propositional formula string into Abstract Syntax Tree representation.

    Tokenizes the input and runs the recursive-descent parser over the tokens.
    Uses a fresh parser instance for each invocation, so parsing is a pure
    function of the source text.

    Args:
        source: Propositional formula string to parse

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        LexError: Formula contains a character outside the input alphabet
        ParseError: Formula syntax is malformed

    Example:
        >>> ast = parse("a or b and c")
        >>> # Returns Or(Var('a'), And(Var('b'), Var('c')))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    try:
        result = parse_tokens(tokenize(source))
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except FormulaError:
        logger.debug("FormulaError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "parse_tokens",
    "MAX_NESTING_DEPTH",
    "tokenize",
    "Token",
    "FormulaError",
    "LexError",
    "ParseError",
    "ParseErrorKind",
]

__version__ = "1.0.0"
__description__ = "Propositional formula tokenization and parsing components"
