"""
Species management for NEAT (NeuroEvolution of Augmenting Topologies).

Organisms whose genomes are genetically close are clustered into species, which
share fitness among their members, track stagnation across generations, and pick
members for breeding with a probability driven by fitness. Assigning organisms
to species, extinction policy, crossover, mutation and network evaluation belong
to the surrounding generation loop.

Main components:
- genotype:  Connection genes and the genome distance metric
- phenotype: Organisms with cached, shareable fitness
- pool:      Species and breeding selection strategies
- run:       Configuration

Example:
    >>> from evospecies import Config, Genome, Organism, Species
    >>> config = Config()
    >>> genome = Genome.from_dict({"connections": [{"from": 0, "to": 1, "weight": 0.5}]}, config)
    >>> founder = Organism(genome, config)
    >>> founder.fitness = 1.0
    >>> species = Species(founder)
    >>> species.is_compatible(genome)
    True
"""

__version__ = "0.1.0"

from evospecies.run.config               import Config
from evospecies.genotype.genome          import Genome
from evospecies.genotype.connection_gene import ConnectionGene
from evospecies.phenotype.organism       import Organism
from evospecies.pool.species             import Species
from evospecies.pool.selection           import (NoViableBreedingCandidateError,
                                                 PerCandidateDrawSelection,
                                                 RandomSource,
                                                 RouletteWheelSelection,
                                                 SelectionStrategy)

__all__ = [
    "Config",
    "ConnectionGene",
    "Genome",
    "Organism",
    "Species",
    "SelectionStrategy",
    "PerCandidateDrawSelection",
    "RouletteWheelSelection",
    "NoViableBreedingCandidateError",
    "RandomSource",
]
