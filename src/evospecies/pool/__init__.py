"""
Pool Package

Speciation: the Species class and the breeding selection strategies it uses.

Exported Classes:
    Species:                        A cluster of compatible organisms
    SelectionStrategy:              Abstract base class of breeding selection strategies
    PerCandidateDrawSelection:      Independent draw per candidate against a running share
    RouletteWheelSelection:         Single draw against the cumulative fitness distribution
    RandomSource:                   Protocol of the random source a species draws from
    NoViableBreedingCandidateError: Raised when the total fitness is not a positive, finite number
"""

from evospecies.pool.selection import (NoViableBreedingCandidateError,
                                       PerCandidateDrawSelection,
                                       RandomSource,
                                       RouletteWheelSelection,
                                       SelectionStrategy)
from evospecies.pool.species   import Species

__all__ = ['NoViableBreedingCandidateError',
           'PerCandidateDrawSelection',
           'RandomSource',
           'RouletteWheelSelection',
           'SelectionStrategy',
           'Species']
