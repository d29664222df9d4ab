"""
Genotype Package

Genetic encoding consumed by speciation: connection genes carrying innovation
numbers, and the genome that measures its genetic distance to another genome.

Exported Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
    Genome:         Collection of connection genes with a distance metric
"""

from evospecies.genotype.connection_gene import ConnectionGene
from evospecies.genotype.genome          import Genome

__all__ = ['ConnectionGene',
           'Genome']
