# logic/__init__.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Evaluation and classification components for propositional formulas

"""Truth-table evaluation interface.

This package provides:
  • collect_variables: sorted free variables of a formula
  • evaluate: truth value of a formula under one assignment
  • classify: satisfying / falsifying partition of all assignments
  • truth_table: every assignment with its truth value
  • Satisfiability: tri-state verdict (TAUTOLOGY, CONTINGENT, CONTRADICTION)
"""

from .classifier import (
    DEFAULT_MAX_VARIABLES,
    Classification,
    TooManyVariablesError,
    classify,
    iter_assignments,
    truth_table,
)
from .evaluator import UnassignedVariableError, evaluate
from .satisfiability import Satisfiability
from .variables import collect_variables

__all__ = [
    "DEFAULT_MAX_VARIABLES",
    "Classification",
    "Satisfiability",
    "TooManyVariablesError",
    "UnassignedVariableError",
    "classify",
    "collect_variables",
    "evaluate",
    "iter_assignments",
    "truth_table",
]
