"""
Organism Module

This module implements the Organism class, one evolved individual as seen by
a species: a genome, a cached fitness value, and the fitness-sharing modifier
applied to it.

Classes:
    Organism: An evolved individual with genome, cached fitness and fitness modifier
"""

import copy
from itertools import count
from typing    import Callable, Optional, TYPE_CHECKING

from evospecies.run.config import Config
if TYPE_CHECKING:
    from evospecies.genotype import Genome

class Organism:
    """
    An individual organism in the NEAT population.

    The raw fitness of an organism is computed at most once per lifetime tick,
    either by the evaluation function handed to the constructor or by an external
    evaluator assigning 'fitness' directly. The value reported to species for
    ranking and breeding is the raw fitness scaled by the fitness modifier, which
    the owning species sets to implement explicit fitness sharing.

    Public Attributes:
        ID:               Identifier of this organism (shared by its copies)
        fitness_modifier: Multiplier applied to the raw fitness (1.0 until a species sets it)
        ticks:            Number of 'update' calls since the last 'reset'

    Public properties:
        genome:              Access to this organism's genome
        training_parameters: Configuration the organism was created with
        fitness:             Raw (unshared) fitness, None until evaluated

    Public Methods:
        get_or_calculate_fitness(): Return the modifier-applied fitness, evaluating if needed
        set_fitness_modifier(m):    Set the fitness-sharing modifier
        update():                   Advance the organism by one lifetime tick
        reset():                    Return the organism to its teachable state
        copy():                     Create an independent copy of this organism
        distance(other):            Calculate genetic distance to another organism
    """

    _id_generator = count(0)

    def __init__(self,
                 genome  : 'Genome',
                 config  : Config,
                 evaluate: Optional[Callable[['Organism'], float]] = None):
        """
        Initialize the Organism given its genotype.

        Parameters:
            genome:   The Genome of this organism
            config:   Training parameters this organism is evolved under
            evaluate: Optional function computing the raw fitness of an organism
        """
        self.ID              : int             = next(Organism._id_generator)
        self.fitness_modifier: float           = 1.0
        self.ticks           : int             = 0
        self._genome         : 'Genome'        = genome
        self._config         : Config          = config
        self._evaluate                         = evaluate
        self._fitness        : Optional[float] = None

    @property
    def genome(self) -> 'Genome':
        return self._genome

    @property
    def training_parameters(self) -> Config:
        return self._config

    @property
    def fitness(self) -> Optional[float]:
        """
        The raw fitness, before the fitness modifier is applied.
        """
        return self._fitness

    @fitness.setter
    def fitness(self, value: Optional[float]) -> None:
        self._fitness = None if value is None else float(value)

    def get_or_calculate_fitness(self) -> float:
        """
        Return the fitness of this organism scaled by its fitness modifier.

        The raw fitness is evaluated on first use and cached until the
        next 'update' or 'reset'.

        Raises:
            RuntimeError: if the fitness is unknown and there is no evaluation function
        """
        if self._fitness is None:
            if self._evaluate is None:
                raise RuntimeError(f"Organism {self.ID} has no fitness and no evaluation function")
            self._fitness = float(self._evaluate(self))
        return self._fitness * self.fitness_modifier

    def set_fitness_modifier(self, modifier: float) -> None:
        self.fitness_modifier = modifier

    def update(self) -> None:
        """
        Advance the organism by one lifetime tick.
        The cached fitness is discarded, as it no longer reflects the organism's state.
        """
        self.ticks   += 1
        self._fitness = None

    def reset(self) -> None:
        """
        Return the organism to its teachable state, as it was before its first tick.
        """
        self.ticks    = 0
        self._fitness = None

    def copy(self) -> 'Organism':
        """
        Create an independent copy of this organism.

        The genome is deep-copied; configuration and evaluation function are
        read-only and therefore shared.
        """
        duplicate = copy.copy(self)
        duplicate._genome = copy.deepcopy(self._genome)
        return duplicate

    def distance(self, other: 'Organism') -> float:
        """
        Calculate the genetic distance between this organism and another.
        """
        return self._genome.distance(other.genome)

    def __str__(self):
        return f"Organism {self.ID:04d} (fitness={self._fitness}, modifier={self.fitness_modifier:.4f})"
