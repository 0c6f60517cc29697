# formula/ast_nodes.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. Every non-leaf node exclusively
owns its children and no node is ever modified after construction, so a tree
can be shared freely between evaluations.

Node Types:
    Var: Propositional variable (leaf)
    Not: Negation
    And, Or: Conjunction and disjunction
    Implies: Material implication written ``if ... then ...``
    Iff: Biconditional

Consumers dispatch on the node class with ``match`` statements; the string
form of every node is valid input syntax and parses back to an equal tree.

The parser builds long ``and``/``or`` chains with a loop, so trees can be far
deeper than the interpreter's recursion limit. Traversals here and in the
``logic`` package therefore walk the tree with an explicit stack.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import List, Tuple, Union


@dataclass(frozen=True, slots=True, repr=False)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees. Concrete node
    types describe their textual layout in ``_layout``; ``__str__`` and
    ``__repr__`` render whole trees without recursion.
    """

    def _layout(self) -> List[Union[str, Expr]]:
        """Return the input-syntax rendering as text pieces and child nodes.

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def _structure(self) -> List[Union[str, Expr]]:
        """Return the constructor-call rendering as text pieces and child nodes."""
        pieces: List[Union[str, Expr]] = [f"{type(self).__name__}("]
        for i, field in enumerate(fields(self)):
            value = getattr(self, field.name)
            pieces.append(f"{', ' if i else ''}{field.name}=")
            pieces.append(value if isinstance(value, Expr) else repr(value))
        pieces.append(")")
        return pieces

    def __str__(self) -> str:
        return _render(self, structural=False)

    def __repr__(self) -> str:
        return _render(self, structural=True)


def _render(root: Expr, structural: bool) -> str:
    parts: List[str] = []
    stack: List[Union[str, Expr]] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        layout = item._structure() if structural else item._layout()
        stack.extend(reversed(layout))
    return "".join(parts)


@dataclass(frozen=True, slots=True, repr=False)
class Var(Expr):
    """Propositional variable, the only kind of leaf in a formula.

    Attributes:
        name: The proposition name as written in the input
    """

    name: str

    def _layout(self):
        return [self.name]


@dataclass(frozen=True, slots=True, repr=False)
class Not(Expr):
    """Logical negation of its operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def _layout(self):
        return ["not ", self.operand]


@dataclass(frozen=True, slots=True, repr=False)
class And(Expr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def _layout(self):
        return ["(", self.left, " and ", self.right, ")"]


@dataclass(frozen=True, slots=True, repr=False)
class Or(Expr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def _layout(self):
        return ["(", self.left, " or ", self.right, ")"]


@dataclass(frozen=True, slots=True, repr=False)
class Implies(Expr):
    """Material implication produced by ``if antecedent then consequent``.

    False only when the antecedent holds and the consequent does not.

    Attributes:
        antecedent: The condition following ``if``
        consequent: The conclusion following ``then``
    """

    antecedent: Expr
    consequent: Expr

    def _layout(self):
        return ["(if ", self.antecedent, " then ", self.consequent, ")"]


@dataclass(frozen=True, slots=True, repr=False)
class Iff(Expr):
    """Biconditional, true when both operands have the same truth value.

    Attributes:
        left: Left operand of the biconditional
        right: Right operand of the biconditional
    """

    left: Expr
    right: Expr

    def _layout(self):
        return ["(", self.left, " iff ", self.right, ")"]


def children(node: Expr) -> Tuple[Expr, ...]:
    """Return the direct operands of a node, left to right.

    Raises:
        TypeError: ``node`` is not an AST node
    """
    match node:
        case Var():
            return ()
        case Not(operand):
            return (operand,)
        case And(left, right) | Or(left, right) | Iff(left, right):
            return (left, right)
        case Implies(antecedent, consequent):
            return (antecedent, consequent)
        case _:
            raise TypeError(f"Unsupported AST node: {type(node).__name__}")
