# logic/classifier.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Exhaustive assignment enumeration and satisfiability classification

"""Exhaustive truth-table construction for propositional formulas.

Every assignment of the formula's variables is generated in bit-counting
order and evaluated independently. The variable tuple from
``collect_variables`` fixes the bit positions: for counter ``i``, variable
``variables[k]`` is true iff bit ``k`` of ``i`` is set, so ``variables[0]``
toggles fastest.

The work is O(2^n * |AST|). Since the number of assignments doubles with
every variable, ``classify`` refuses formulas with more than
``max_variables`` distinct variables rather than truncating its output.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from formula.ast_nodes import Expr
from utils.logger import get_logger
from .evaluator import evaluate
from .satisfiability import Satisfiability
from .variables import collect_variables

Assignment = Dict[str, bool]

# Enumeration bound. Formula depth is bounded separately at parse time by
# formula.grammar.MAX_NESTING_DEPTH.
DEFAULT_MAX_VARIABLES = 20


class TooManyVariablesError(ValueError):
    """Raised when enumeration would exceed the configured variable bound.

    Attributes:
        count: Number of distinct variables in the formula
        limit: Configured maximum
    """

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Formula has {count} distinct variables; enumerating 2^{count} "
            f"assignments exceeds the limit of {limit} variables"
        )


@dataclass(frozen=True)
class Classification:
    """Partition of all assignments into satisfying and falsifying ones.

    Both buckets keep enumeration order. Together they hold each of the
    ``2 ** len(variables)`` assignments exactly once. Assignments are plain
    dicts, so a classification compares by value but is not hashable.

    Attributes:
        variables: Sorted variable names; index k is bit k of the counter
        satisfying: Assignments under which the formula is true
        falsifying: Assignments under which the formula is false
    """

    variables: Tuple[str, ...]
    satisfying: Tuple[Assignment, ...]
    falsifying: Tuple[Assignment, ...]

    __hash__ = None

    @classmethod
    def from_rows(
        cls, variables: Sequence[str], rows: Iterable[Tuple[Assignment, bool]]
    ) -> Classification:
        """Split truth-table rows into the two buckets, keeping row order."""
        satisfying: List[Assignment] = []
        falsifying: List[Assignment] = []
        for assignment, value in rows:
            if value:
                satisfying.append(assignment)
            else:
                falsifying.append(assignment)
        return cls(tuple(variables), tuple(satisfying), tuple(falsifying))

    @property
    def total(self) -> int:
        return len(self.satisfying) + len(self.falsifying)

    @property
    def is_satisfiable(self) -> bool:
        return bool(self.satisfying)

    @property
    def is_tautology(self) -> bool:
        return not self.falsifying

    @property
    def is_contradiction(self) -> bool:
        return not self.satisfying

    @property
    def satisfiability(self) -> Satisfiability:
        if self.is_tautology:
            return Satisfiability.TAUTOLOGY
        if self.is_contradiction:
            return Satisfiability.CONTRADICTION
        return Satisfiability.CONTINGENT


def iter_assignments(variables: Sequence[str]) -> Iterator[Assignment]:
    """Yield every assignment of ``variables`` in bit-counting order.

    Args:
        variables: Variable names; ``variables[0]`` is the least-significant bit

    Yields:
        Fresh dict per assignment, keys in ``variables`` order
    """
    for counter in range(1 << len(variables)):
        yield {name: bool(counter >> bit & 1) for bit, name in enumerate(variables)}


def _bounded_variables(node: Expr, max_variables: Optional[int]) -> Tuple[str, ...]:
    variables = collect_variables(node)
    if max_variables is not None and len(variables) > max_variables:
        raise TooManyVariablesError(len(variables), max_variables)
    return variables


def _rows(node: Expr, variables: Sequence[str]) -> Iterator[Tuple[Assignment, bool]]:
    for assignment in iter_assignments(variables):
        yield assignment, evaluate(node, assignment)


def truth_table(
    node: Expr, max_variables: Optional[int] = DEFAULT_MAX_VARIABLES
) -> List[Tuple[Assignment, bool]]:
    """Evaluate a formula under every assignment.

    ``Classification.from_rows`` turns the result into the same buckets
    ``classify`` returns, without enumerating a second time.

    Args:
        node: Root of the formula AST
        max_variables: Largest variable count accepted, or None for no bound

    Returns:
        ``(assignment, value)`` rows in enumeration order

    Raises:
        TooManyVariablesError: The formula has more than ``max_variables`` variables
    """
    return list(_rows(node, _bounded_variables(node, max_variables)))


def classify(
    node: Expr, max_variables: Optional[int] = DEFAULT_MAX_VARIABLES
) -> Classification:
    """Partition all assignments of a formula by its truth value.

    Args:
        node: Root of the formula AST
        max_variables: Largest variable count accepted, or None for no bound

    Returns:
        Classification with satisfying and falsifying buckets in enumeration order

    Raises:
        TooManyVariablesError: The formula has more than ``max_variables`` variables

    Example:
        >>> from formula import parse
        >>> result = classify(parse("if a then b"))
        >>> result.falsifying
        ({'a': True, 'b': False},)
    """
    logger = get_logger()

    variables = _bounded_variables(node, max_variables)
    logger.debug(f"Enumerating {1 << len(variables)} assignments over {list(variables)}")

    result = Classification.from_rows(variables, _rows(node, variables))

    logger.debug(
        f"Classification complete: {len(result.satisfying)} satisfying, "
        f"{len(result.falsifying)} falsifying"
    )
    return result
