"""
Species Module

This module implements the Species class for the NEAT algorithm.
A species represents a cluster of genetically similar organisms
that compete for reproduction primarily within their own niche.

Classes:
    Species: A cluster of compatible organisms with ranking, fitness sharing and stagnation tracking
"""

import copy
import logging
import random
from typing import Iterator, Optional, TYPE_CHECKING

from evospecies.run.config     import Config
from evospecies.pool.selection import RandomSource, SelectionStrategy, PerCandidateDrawSelection
if TYPE_CHECKING:
    from evospecies.genotype  import Genome
    from evospecies.phenotype import Organism

logger = logging.getLogger(__name__)


class Species:
    """
    A species representing a cluster of genetically similar organisms in NEAT.

    Clustering organisms by genetic similarity protects structurally novel organisms
    from being out-competed by mature, optimized ones before they had a chance to
    improve: organisms compete for reproduction mostly within their own species.

    A species owns its members and a representative. The representative is an
    independent copy of a randomly elected member and is the anchor against which
    the compatibility of other genomes is tested. It is re-elected after every
    insertion, so the boundary of a species drifts as its membership changes, and
    it survives 'clear', so that an emptied species can still attract the organisms
    of the next generation.

    The species also remembers the best fitness it ever reached and for how many
    consecutive generations it failed to improve on it. Deciding whether a species
    goes extinct is left to the caller.

    A species is not safe for concurrent use: all calls into one species are
    expected to come from a single generation loop.

    Public Attributes:
        population:                     The organisms of the current generation
        representative:                 Independent copy of an elected member, used for compatibility tests
        parameters:                     Copy of the founder's training parameters
        is_sorted_by_fitness:           Whether 'population' is currently ranked by ascending fitness
        fitness_highscore:              Best fitness observed over the lifetime of the species
        number_of_stagnant_generations: Consecutive generations without improving 'fitness_highscore'

    Public Methods:
        copy():                             Duplicate the species and all its organisms
        take_over(other):                   Build a species from the members of another one (class method)
        assign_from(other):                 Replace the members with those of another species
        add_organism(organism):             Add a copy of an organism
        adopt_organism(organism):           Add an organism by taking ownership of it
        clear():                            Update stagnation bookkeeping and drop all members
        is_compatible(genome):              Whether a genome is close enough to join this species
        set_populations_fitness_modifier(): Apply fitness sharing to all members
        get_fittest_organism():             Front of the fitness ranking
        get_organism_to_breed():            Fitness-proportionate pick of a member
        let_population_live():              Advance every member by one tick
        reset_to_teachable_state():         Reset every member
        is_stagnant():                      Whether the species stopped improving for too long
    """

    def __init__(self,
                 founder  : 'Organism',
                 *,
                 adopt    : bool                        = False,
                 rng      : Optional[RandomSource]      = None,
                 selection: Optional[SelectionStrategy] = None):
        """
        Found a new species.

        Parameters:
            founder:   The first member of the species
            adopt:     If True the species takes ownership of 'founder' itself, and the
                       caller must not use it anymore; otherwise a copy is stored
            rng:       Random source with 'random()' and 'randrange()'; the
                       process-wide 'random' module is used if None
            selection: Breeding selection strategy; PerCandidateDrawSelection if None
        """
        self.parameters: Config = copy.copy(founder.training_parameters)

        self._rng       = rng if rng is not None else random
        self._selection = selection if selection is not None else PerCandidateDrawSelection()

        self.population    : list['Organism']     = []
        self.representative: Optional['Organism'] = None
        self.is_sorted_by_fitness: bool = False

        self.fitness_highscore             : float = 0.0
        self.number_of_stagnant_generations: int   = 0

        self.population.append(founder if adopt else founder.copy())
        self._elect_representative()

    @classmethod
    def _blank(cls, source: 'Species') -> 'Species':
        """
        Create a species with a copy of the configuration and the stagnation state of 'source',
        sharing its random source and selection strategy, but without organisms or representative.
        """
        species = cls.__new__(cls)
        species.parameters           = copy.copy(source.parameters)
        species._rng                 = source._rng
        species._selection           = source._selection
        species.population           = []
        species.representative       = None
        species.is_sorted_by_fitness = False
        species.fitness_highscore              = source.fitness_highscore
        species.number_of_stagnant_generations = source.number_of_stagnant_generations
        return species

    def copy(self) -> 'Species':
        """
        Duplicate this species.
        Every member and the representative are copied, so that the duplicate shares no organism with the original.
        """
        duplicate = type(self)._blank(self)
        duplicate.population           = [organism.copy() for organism in self.population]
        duplicate.representative       = self.representative.copy()
        duplicate.is_sorted_by_fitness = self.is_sorted_by_fitness
        return duplicate

    @classmethod
    def take_over(cls, other: 'Species') -> 'Species':
        """
        Build a species from the members of 'other', which is left empty.
        The representative is copied, so 'other' keeps its own.
        """
        species = cls._blank(other)
        species.population           = other.population
        species.representative       = other.representative.copy()
        species.is_sorted_by_fitness = other.is_sorted_by_fitness

        other.population           = []
        other.is_sorted_by_fitness = False
        return species

    def assign_from(self, other: 'Species') -> 'Species':
        """
        Replace the members of this species with those of 'other', which is left empty,
        and elect a new representative among them.

        Stagnation bookkeeping is not carried over: 'fitness_highscore' and
        'number_of_stagnant_generations' keep the values of this species.
        """
        if other is self:
            return self

        self.population            = other.population
        self.is_sorted_by_fitness  = False
        other.population           = []
        other.is_sorted_by_fitness = False
        self._elect_representative()
        return self

    def add_organism(self, organism: 'Organism') -> None:
        """
        Add a copy of 'organism' to the species.
        Fitness modifiers are left alone; call 'set_populations_fitness_modifier' when needed.
        """
        self.population.append(organism.copy())
        self._elect_representative()
        self.is_sorted_by_fitness = False

    def adopt_organism(self, organism: 'Organism') -> None:
        """
        Add 'organism' itself to the species, which takes ownership of it,
        and share fitness among the members.
        """
        self.population.append(organism)
        self._elect_representative()
        self.is_sorted_by_fitness = False
        self.set_populations_fitness_modifier()

    def clear(self) -> None:
        """
        Close the current generation.

        The fitness at the front of the ranking (the representative's if the species
        is empty) is compared with the highscore: a strictly better value becomes the
        new highscore and resets the stagnation counter, anything else counts as one
        more stagnant generation. All members are then dropped.
        The representative is kept for the speciation of the next generation.
        """
        current_best_fitness = self.get_fittest_organism().get_or_calculate_fitness()
        if self.fitness_highscore < current_best_fitness:
            self.fitness_highscore              = current_best_fitness
            self.number_of_stagnant_generations = 0
        else:
            self.number_of_stagnant_generations += 1

        logger.debug("species cleared: best=%s highscore=%s stagnant for %d generations",
                     current_best_fitness, self.fitness_highscore, self.number_of_stagnant_generations)

        self.population.clear()
        self.is_sorted_by_fitness = False

    def is_compatible(self, genome: 'Genome') -> bool:
        """
        Whether 'genome' belongs to this species, i.e. its genetic distance to the
        representative's genome does not exceed the compatibility threshold.
        """
        distance_to_species = self.representative.genome.distance(genome)
        return not distance_to_species > self.parameters.compatibility_threshold

    def set_populations_fitness_modifier(self) -> None:
        """
        Explicit fitness sharing: every member's fitness is scaled by 1/(number of members),
        so that a species' share of reproduction does not grow with its size.
        """
        if not self.population:
            return
        fitness_modifier = 1.0 / len(self.population)
        for organism in self.population:
            organism.set_fitness_modifier(fitness_modifier)

    def get_fittest_organism(self) -> 'Organism':
        """
        Return the organism at the front of the fitness ranking.

        Members are ranked by ascending (modifier-applied) fitness, so the front is
        the member with the lowest fitness. This ordering is relied upon by existing
        callers and is kept as is. The ranking is cached until the membership changes.
        An empty species returns its representative.
        """
        if not self.population:
            return self.representative

        if not self.is_sorted_by_fitness:
            self.population.sort(key=lambda organism: organism.get_or_calculate_fitness())
            self.is_sorted_by_fitness = True
        return self.population[0]

    def get_organism_to_breed(self) -> 'Organism':
        """
        Pick a member for breeding, with probability driven by fitness.
        An empty species returns its representative.

        Members are expected to carry their fitness-sharing modifier already.

        Raises:
            NoViableBreedingCandidateError: if the total fitness of the members is not positive
        """
        if not self.population:
            return self.representative
        return self._selection.select(self.population, self._rng)

    def let_population_live(self) -> None:
        for organism in self.population:
            organism.update()
        self.is_sorted_by_fitness = False

    def reset_to_teachable_state(self) -> None:
        for organism in self.population:
            organism.reset()
        self.is_sorted_by_fitness = False

    def is_stagnant(self) -> bool:
        """
        Check whether the species is stagnant, that is, whether its best fitness has
        not improved in more than the configured number of generations.
        """
        return self.number_of_stagnant_generations > self.parameters.max_stagnation_period

    @property
    def organisms(self) -> tuple['Organism', ...]:
        return tuple(self.population)

    def _elect_representative(self) -> None:
        if self.population:
            self._select_random_representative()

    def _select_random_representative(self) -> None:
        random_member = self._rng.randrange(len(self.population))
        self.representative = self.population[random_member].copy()
        logger.debug("elected organism %s as representative among %d members",
                     self.representative.ID, len(self.population))

    def __len__(self) -> int:
        return len(self.population)

    def __iter__(self) -> Iterator['Organism']:
        return iter(self.population)

    def __str__(self):
        return (f"Species ({len(self.population)} members, highscore={self.fitness_highscore}, "
                f"stagnant for {self.number_of_stagnant_generations} generations)")
