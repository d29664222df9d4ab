"""
Breeding Selection Module

Fitness-proportionate strategies used by a species to pick the organism that
gets to breed next. A strategy receives the current members and the random
source of the species, and returns one of the members.

Classes:
    NoViableBreedingCandidateError: No member has a positive share of the total fitness
    SelectionStrategy:              Abstract base class of all strategies
    PerCandidateDrawSelection:      Independent draw per candidate against a running share (default)
    RouletteWheelSelection:         Single draw against the cumulative fitness distribution
    RandomSource:                   Protocol of the random source handed to a strategy
"""

import logging
import math
from abc    import ABC, abstractmethod
from typing import Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from evospecies.phenotype import Organism

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """
    The part of the 'random' module (or of a 'random.Random' instance) a species draws from.
    """

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


class NoViableBreedingCandidateError(RuntimeError):
    """
    Raised when fitness-proportionate selection is asked to choose among
    organisms whose total fitness is not a positive, finite number.
    """


class SelectionStrategy(ABC):

    @abstractmethod
    def select(self, organisms: Sequence['Organism'], rng: RandomSource) -> 'Organism':
        """
        Choose one organism for breeding.

        Parameters:
            organisms: the candidates (not empty)
            rng:       random source providing 'random()'

        Returns:
            one of 'organisms'
        """

    @staticmethod
    def _total_fitness(organisms: Sequence['Organism']) -> float:
        """
        Sum the (modifier-applied) fitness of all candidates, refusing totals
        that would make the fitness shares meaningless.
        """
        total_fitness = sum(organism.get_or_calculate_fitness() for organism in organisms)
        if not (math.isfinite(total_fitness) and total_fitness > 0):
            logger.debug("breeding selection refused, total fitness is %s over %d organisms",
                         total_fitness, len(organisms))
            raise NoViableBreedingCandidateError(
                f"Total fitness of {len(organisms)} organisms is {total_fitness}; "
                "fitness-proportionate selection needs a positive, finite total")
        return total_fitness


class PerCandidateDrawSelection(SelectionStrategy):
    """
    Scan the candidates in order; each one gets a fresh uniform draw in [0, 1),
    compared against the running sum of fitness shares up to and including that
    candidate. The first candidate whose draw falls below the running sum wins.

    Unlike the classical roulette wheel, candidates early in the order are favoured,
    and the outcome depends on the order of the candidates. The running sum is not
    reset when a scan ends without a winner, so the next scan always terminates.
    """

    def select(self, organisms: Sequence['Organism'], rng: RandomSource) -> 'Organism':
        total_fitness = self._total_fitness(organisms)

        chance = 0.0
        while True:
            for organism in organisms:
                draw    = rng.random()
                chance += organism.get_or_calculate_fitness() / total_fitness
                if draw < chance:
                    return organism


class RouletteWheelSelection(SelectionStrategy):
    """
    Classical fitness-proportionate selection: a single draw is located on the
    cumulative distribution of fitness shares.
    """

    def select(self, organisms: Sequence['Organism'], rng: RandomSource) -> 'Organism':
        total_fitness = self._total_fitness(organisms)

        target     = rng.random() * total_fitness
        cumulative = 0.0
        for organism in organisms:
            cumulative += organism.get_or_calculate_fitness()
            if target < cumulative:
                return organism

        # Rounding can leave the target just above the final cumulative sum
        return organisms[-1]
