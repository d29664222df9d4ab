"""
Phenotype Package

Exported Classes:
    Organism: An evolved individual with genome, cached fitness and fitness modifier
"""

from evospecies.phenotype.organism import Organism

__all__ = ['Organism']
