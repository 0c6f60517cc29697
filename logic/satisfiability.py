# logic/satisfiability.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Tri-state satisfiability verdict

"""
Satisfiability verdict for a classified formula, capturing the three
possible shapes of its truth table.
"""

from enum import Enum, auto


class Satisfiability(Enum):
    """Three-state result of exhaustive classification."""
    TAUTOLOGY = auto()  # every assignment satisfies the formula
    CONTINGENT = auto()  # some assignments satisfy it, some falsify it
    CONTRADICTION = auto()  # no assignment satisfies the formula
