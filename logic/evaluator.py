# logic/evaluator.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Truth-value evaluation of propositional formulas

"""
Evaluates a formula AST under a single assignment of truth values.

Evaluation is a post-order walk with the classical truth tables, driven by an
explicit stack so that long ``and``/``or`` chains do not hit the recursion
limit. Both operands of every binary connective are evaluated; nothing is
cached between calls.
"""

from typing import List, Mapping, Tuple

from formula.ast_nodes import Expr, Var, Not, And, Or, Implies, Iff, children


class UnassignedVariableError(KeyError):
    """Raised when an assignment does not cover a variable of the formula."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No truth value assigned to variable '{name}'")

    def __str__(self) -> str:
        return self.args[0]


def _combine(node: Expr, lhs: bool, rhs: bool) -> bool:
    match node:
        case And():
            return lhs and rhs
        case Or():
            return lhs or rhs
        case Implies():
            return (not lhs) or rhs
        case Iff():
            return lhs == rhs
        case _:
            raise TypeError(f"Unsupported AST node: {type(node).__name__}")


def evaluate(node: Expr, assignment: Mapping[str, bool]) -> bool:
    """Compute the truth value of a formula.

    Args:
        node: Root of the formula AST
        assignment: Truth value for every variable occurring in ``node``

    Returns:
        True if the formula holds under ``assignment``

    Raises:
        UnassignedVariableError: A variable of the formula is missing from
            ``assignment``
    """
    values: List[bool] = []
    # (node, operands already evaluated)
    pending: List[Tuple[Expr, bool]] = [(node, False)]

    while pending:
        current, ready = pending.pop()
        operands = children(current)

        if operands and not ready:
            pending.append((current, True))
            pending.extend((operand, False) for operand in reversed(operands))
            continue

        match current:
            case Var(name):
                if name not in assignment:
                    raise UnassignedVariableError(name)
                values.append(bool(assignment[name]))
            case Not():
                values.append(not values.pop())
            case _:
                rhs = values.pop()
                lhs = values.pop()
                values.append(_combine(current, lhs, rhs))

    return values.pop()
