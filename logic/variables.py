# logic/variables.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Free-variable extraction for propositional formulas

"""
Collects the proposition names of a formula in the order used for enumeration.

The sorted tuple returned here is the single mapping from bit positions to
variables: ``variables[0]`` is the least-significant bit of the assignment
counter in ``logic.classifier``.
"""

from typing import List, Set, Tuple

from formula.ast_nodes import Expr, Var, children


def collect_variables(node: Expr) -> Tuple[str, ...]:
    """Return the distinct variable names of a formula, sorted lexicographically.

    Two formulas mentioning the same names yield the same tuple whatever
    their structure. The tree is walked with an explicit stack, so formula
    depth is not limited by the recursion limit.

    Args:
        node: Root of the formula AST

    Returns:
        Sorted tuple of variable names, without duplicates

    Raises:
        TypeError: The tree contains something other than AST nodes
    """
    names: Set[str] = set()
    pending: List[Expr] = [node]
    while pending:
        current = pending.pop()
        match current:
            case Var(name):
                names.add(name)
            case _:
                pending.extend(children(current))
    return tuple(sorted(names))
