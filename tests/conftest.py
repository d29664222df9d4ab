"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


class ScriptedRandom:
    """
    Deterministic stand-in for the random source of a species.

    'random()' returns the scripted draws in order (repeating the last one once
    the script is exhausted); 'randrange(n)' always returns 'index' clipped to n-1.
    """

    def __init__(self, draws=(0.0,), index=0):
        self.draws  = list(draws)
        self.index  = index
        self.calls  = 0

    def random(self):
        draw = self.draws[min(self.calls, len(self.draws) - 1)]
        self.calls += 1
        return draw

    def randrange(self, n):
        return min(self.index, n - 1)


@pytest.fixture(autouse=True)
def reset_organism_id_generator():
    """Reset Organism ID generator before each test."""
    from itertools import count
    from evospecies.phenotype.organism import Organism
    Organism._id_generator = count(0)
    yield
    Organism._id_generator = count(0)


@pytest.fixture
def config():
    """Default configuration (compatibility threshold 3.0)."""
    from evospecies.run.config import Config
    return Config()


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def make_organism(config):
    """
    Factory creating an organism with a given raw fitness and a single connection
    whose weight can be chosen to control genetic distances.
    """
    from evospecies.genotype.genome import Genome
    from evospecies.phenotype.organism import Organism

    def _make(fitness=None, weight=0.0, cfg=None):
        cfg    = cfg if cfg is not None else config
        genome = Genome.from_dict({"connections": [{"from": 0, "to": 1, "weight": weight}]}, cfg)
        organism = Organism(genome, cfg)
        organism.fitness = fitness
        return organism

    return _make
