# formula/grammar.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Recursive-descent parser for propositional formulas

"""Propositional grammar implementation using recursive descent.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs Abstract Syntax Trees from the token lists
produced by the lexer, with one method per precedence level. Each level calls
the next-tighter level for its operands and loops or recurses while its own
operator is seen.

Grammar:
    iff_expr  = impl_expr [ "iff" iff_expr ]
    impl_expr = "if" impl_expr "then" impl_expr | or_expr
    or_expr   = and_expr { "or" and_expr }
    and_expr  = not_expr { "and" not_expr }
    not_expr  = "not" not_expr | atom
    atom      = ID | "(" iff_expr ")"

Operator Precedence (lowest to highest):
- IFF: right-associative
- IF ... THEN: right-associative when chained
- OR: left-associative
- AND: left-associative
- NOT: prefix, binds tighter than any binary operator

Nesting through parentheses, "not", "if" and the right operand of "iff" is
bounded by MAX_NESTING_DEPTH.
"""

from typing import NoReturn, Sequence

from utils.logger import get_logger
from .ast_nodes import Expr, Var, Not, And, Or, Implies, Iff
from .exceptions import ParseError, ParseErrorKind
from .lexer import END, Token

_ATOM = "proposition or '('"

# Largest number of nested groupings ('(', 'not', 'if', right operand of
# 'iff') accepted by the parser. Each parenthesized level costs six frames of
# the descent, so this keeps parsing well inside the interpreter's recursion
# limit. Flat chains of 'and'/'or' are built by loops and are not limited.
MAX_NESTING_DEPTH = 100


class _PropParser:
    """Recursive-descent parser over a token list.

    A fresh instance is used for every parse; the only state is the cursor
    into the token list and the current nesting depth.

    Attributes:
        tokens: Token list ending with END
        pos: Index of the current token
        depth: Number of groupings currently open
        max_depth: Largest accepted nesting depth
    """

    def __init__(self, tokens: Sequence[Token], max_depth: int = MAX_NESTING_DEPTH):
        if not tokens or tokens[-1].type != END:
            raise ValueError("Token sequence must end with an END token")
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        if token.type != END:
            self.pos += 1
        return token

    def _accept(self, token_type: str) -> bool:
        """Consume the current token if it has the given type."""
        if self.current.type == token_type:
            self._advance()
            return True
        return False

    def _fail(self, expected: str, kind: ParseErrorKind) -> NoReturn:
        token = self.current
        raise ParseError(
            f"Syntax error: expected {expected} but found {token.describe()} "
            f"at position {token.index}",
            expected=expected,
            found=token.describe(),
            position=token.index,
            kind=kind,
        )

    def _enter(self) -> None:
        """Open one nesting level at the current token."""
        self.depth += 1
        if self.depth > self.max_depth:
            self._fail(
                f"at most {self.max_depth} nested levels",
                ParseErrorKind.NESTING_TOO_DEEP,
            )

    def _leave(self) -> None:
        self.depth -= 1

    def parse(self) -> Expr:
        """Parse the whole token list as a single formula.

        Returns:
            Root AST node

        Raises:
            ParseError: Input is empty, malformed, nested too deeply, or has
                trailing tokens
        """
        if self.current.type == END:
            self._fail("a formula", ParseErrorKind.EMPTY_INPUT)

        result = self.iff_expr()

        if self.current.type != END:
            self._fail("end of input", ParseErrorKind.TRAILING_TOKENS)

        return result

    # Precedence levels, loosest first
    def iff_expr(self) -> Expr:
        left = self.impl_expr()
        if self.current.type != "IFF":
            return left

        self._enter()
        self._advance()
        right = self.iff_expr()
        self._leave()
        return Iff(left, right)

    def impl_expr(self) -> Expr:
        if self.current.type != "IF":
            return self.or_expr()

        self._enter()
        self._advance()
        antecedent = self.impl_expr()
        if not self._accept("THEN"):
            self._fail("'then'", ParseErrorKind.MISSING_THEN)
        consequent = self.impl_expr()
        self._leave()
        return Implies(antecedent, consequent)

    def or_expr(self) -> Expr:
        left = self.and_expr()
        while self._accept("OR"):
            left = Or(left, self.and_expr())
        return left

    def and_expr(self) -> Expr:
        left = self.not_expr()
        while self._accept("AND"):
            left = And(left, self.not_expr())
        return left

    def not_expr(self) -> Expr:
        if self.current.type != "NOT":
            return self.atom()

        self._enter()
        self._advance()
        operand = self.not_expr()
        self._leave()
        return Not(operand)

    def atom(self) -> Expr:
        token = self.current

        if token.type == "ID":
            self._advance()
            return Var(token.value)

        if token.type == "LPAREN":
            self._enter()
            self._advance()
            inner = self.iff_expr()
            if not self._accept("RPAREN"):
                self._fail("')'", ParseErrorKind.UNMATCHED_PAREN)
            self._leave()
            return inner

        if token.type == END:
            self._fail(_ATOM, ParseErrorKind.UNEXPECTED_END)
        self._fail(_ATOM, ParseErrorKind.MISSING_OPERAND)


def parse_tokens(tokens: Sequence[Token], max_depth: int = MAX_NESTING_DEPTH) -> Expr:
    """Build an AST from a token list produced by ``tokenize``.

    Args:
        tokens: Token list ending with an END token
        max_depth: Largest accepted nesting depth

    Returns:
        Root AST node

    Raises:
        ParseError: The tokens do not form exactly one formula, or nest
            deeper than ``max_depth``
    """
    logger = get_logger()

    result = _PropParser(tokens, max_depth).parse()

    logger.debug(f"Successfully parsed formula into {type(result).__name__}")
    return result
