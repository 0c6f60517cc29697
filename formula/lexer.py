# formula/lexer.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional logic formulas written
with English connective keywords, breaking input strings into tokens for
parser consumption. The lexer handles keyword distinction and identifier
processing while providing meaningful error messages for invalid characters.

Supported Tokens:
- Keywords: and, or, not, if, then, iff (case-sensitive)
- Punctuation: (, )
- Identifiers: maximal runs of ASCII letters naming propositions
- Whitespace: ignored during tokenization
- END: synthetic end-of-input marker appended by tokenize()
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from sly import Lexer
from utils.logger import get_logger
from .exceptions import LexError

# Token type of the synthetic marker closing every token sequence
END = "END"


@dataclass(frozen=True, slots=True)
class Token:
    """Single lexical token handed to the parser.

    Attributes:
        type: Token type name (ID, AND, OR, NOT, IF, THEN, IFF, LPAREN, RPAREN, END)
        value: Source text of the token (empty for END)
        index: Zero-based character offset of the token in the input
    """

    type: str
    value: str
    index: int

    def describe(self) -> str:
        """Return a short human-readable description for error messages."""
        if self.type == END:
            return "end of input"
        return f"'{self.value}'"


class PropLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Transforms input formula strings into token sequences for parsing.
    Distinguishes between reserved keywords and proposition names; a keyword
    is only recognized when it spans the whole letter run, so ``andy`` and
    ``AND`` are ordinary identifiers.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    # Valid token types for parser recognition
    tokens = {
        "ID",
        "AND",
        "OR",
        "NOT",
        "IF",
        "THEN",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n\f\v"

    # Punctuation tokens
    LPAREN = r"\("
    RPAREN = r"\)"

    # Proposition names: letters only
    ID = r"[a-zA-Z]+"

    # Keyword mapping: reassign token types for reserved words
    ID["and"] = "AND"
    ID["or"] = "OR"
    ID["not"] = "NOT"
    ID["if"] = "IF"
    ID["then"] = "THEN"
    ID["iff"] = "IFF"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token pattern, such as digits or operator symbols.

        Args:
            t: SLY token object containing error context

        Raises:
            LexError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        raise LexError(error_pos, illegal_char)


def tokenize(text: str) -> List[Token]:
    """Split formula text into tokens terminated by a single END token.

    Args:
        text: Formula source text

    Returns:
        Token list in input order, always ending with END at ``len(text)``

    Raises:
        LexError: The text contains a character outside letters, parentheses
            and whitespace
    """
    logger = get_logger()

    lexer = PropLexer()
    tokens = [Token(tok.type, tok.value, tok.index) for tok in lexer.tokenize(text)]
    tokens.append(Token(END, "", len(text)))

    logger.debug(f"Tokenized into {len(tokens)} tokens: {[t.type for t in tokens]}")
    return tokens
