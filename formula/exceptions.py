# formula/exceptions.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Custom exceptions for formula tokenization and parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines the errors raised while turning formula text into an
Abstract Syntax Tree. Both error kinds carry the position of the offending
input so that a caller can point the user at the exact spot to correct.
"""

from enum import Enum, auto
from typing import Optional


class FormulaError(RuntimeError):
    """Base class for all errors raised by the formula front-end."""

    pass


class LexError(FormulaError):
    """Exception raised when the input contains a character outside the alphabet.

    Attributes:
        position: Zero-based offset of the offending character
        character: The character that could not be tokenized
    """

    def __init__(self, position: int, character: str):
        self.position = position
        self.character = character
        super().__init__(
            f"Illegal character '{character}' encountered at position {position}"
        )


class ParseErrorKind(Enum):
    """Grammar violations reported by the parser."""

    EMPTY_INPUT = auto()  # nothing but whitespace
    UNEXPECTED_END = auto()  # operand required at end of input
    MISSING_OPERAND = auto()  # operand required, operator or ')' found
    UNMATCHED_PAREN = auto()  # '(' never closed
    MISSING_THEN = auto()  # 'if' antecedent not followed by 'then'
    TRAILING_TOKENS = auto()  # input left over after a complete formula
    NESTING_TOO_DEEP = auto()  # grouping nested past the parser bound


class ParseError(FormulaError):
    """Exception raised when a token sequence does not match the grammar.

    Indicates that the input formula does not conform to the propositional
    grammar. Carries the construct the parser was looking for, the token it
    found instead and that token's position in the source text.

    Attributes:
        expected: Human-readable description of the expected construct
        found: Human-readable description of the token actually seen
        position: Zero-based character offset of the found token
        kind: Classification of the grammar violation
    """

    def __init__(
        self,
        message: str,
        expected: Optional[str] = None,
        found: Optional[str] = None,
        position: Optional[int] = None,
        kind: Optional[ParseErrorKind] = None,
    ):
        self.expected = expected
        self.found = found
        self.position = position
        self.kind = kind
        super().__init__(message)
