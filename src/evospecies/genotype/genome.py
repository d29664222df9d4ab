"""
Genome Module

This module implements the part of a NEAT genome that speciation relies upon:
a collection of connection genes keyed by innovation number, and the genetic
distance between two such collections.

Classes:
    Genome: Collection of connection genes with a genetic distance metric
"""

import numpy as np
from evospecies.run.config               import Config
from evospecies.genotype.connection_gene import ConnectionGene

class Genome:
    """
    A NEAT genome seen through the eyes of speciation.

    Crossover, mutation and network expression are handled elsewhere; this class
    only carries the connection genes and knows how far apart two genomes are.

    Attributes:
        conn_genes: Dictionary mapping innovation numbers to ConnectionGene objects

    Public Methods:
        distance(other): Calculate genetic distance to another genome
        to_dict():       Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict, config): Create a genome from a dictionary description
    """

    def __init__(self, config: Config):
        """
        Initialize an empty Genome (no connection genes).

        Parameters:
            config: Stores configuration parameters (the distance coefficients)
        """
        self._config = config
        self.conn_genes: dict[int, ConnectionGene] = {}  # innovation number => connection gene

    @classmethod
    def from_dict(cls, genome_dict: dict, config: Config | None = None) -> 'Genome':
        """
        Create a Genome from a dictionary description.

        Dictionary format:
            {
                "connections": [
                    {"from": 0, "to": 2, "weight":  0.5, "enabled": true, "innovation": 0},
                    {"from": 1, "to": 2, "weight": -0.3}
                ]
            }

        "enabled" defaults to True and "innovation" to the position of
        the connection in the list.

        Parameters:
            genome_dict: Dictionary describing the genome structure
            config:      Stores configuration parameters; a default Config is used if None

        Returns:
            A new Genome object with the specified connections

        Raises:
            ValueError: If two connections share the same innovation number
            KeyError:   If required fields are missing from the dictionary
        """
        genome = cls(config if config is not None else Config())

        for position, conn_data in enumerate(genome_dict.get("connections", [])):
            innovation = conn_data.get("innovation", position)
            if innovation in genome.conn_genes:
                raise ValueError(f"Duplicate innovation number {innovation}")
            genome.conn_genes[innovation] = ConnectionGene(conn_data["from"],
                                                           conn_data["to"],
                                                           float(conn_data["weight"]),
                                                           innovation,
                                                           conn_data.get("enabled", True))
        return genome

    def to_dict(self) -> dict:
        """
        Convert the genome to the dictionary format accepted by 'from_dict'.
        """
        connections = []
        for innovation in sorted(self.conn_genes):
            conn = self.conn_genes[innovation]
            connections.append({"from"      : conn.node_in,
                                "to"        : conn.node_out,
                                "weight"    : conn.weight,
                                "enabled"   : conn.enabled,
                                "innovation": conn.innovation})
        return {"connections": connections}

    def distance(self, other: 'Genome') -> float:
        """
        Compatibility distance between two genomes, as used for speciation.

        Connection genes are aligned by innovation number. A gene carried by only one
        of the genomes is 'excess' if its innovation number lies past the most recent
        innovation of the other genome, and 'disjoint' otherwise. Both counts are
        divided by the size of the larger genome. Aligned genes add the mean absolute
        difference of their weights:

            excess_coeff * excess / size + disjoint_coeff * disjoint / size + params_coeff * mean|w1 - w2|

        Two genomes without any connection are at distance 0.

        Parameters:
            other: the genome to measure the distance to

        Returns:
            the (symmetric) distance between this genome and 'other'
        """
        if not self.conn_genes and not other.conn_genes:
            return 0.0

        shared   = sorted(self.conn_genes.keys() & other.conn_genes.keys())
        unshared = np.array(sorted(self.conn_genes.keys() ^ other.conn_genes.keys()), dtype=int)

        # Innovations newer than the shorter history are excess
        horizon  = min(max(self.conn_genes, default=-1), max(other.conn_genes, default=-1))
        excess   = int(np.count_nonzero(unshared > horizon))
        disjoint = len(unshared) - excess

        weight_gap = 0.0
        if shared:
            own_weights   = np.array([self.conn_genes [i].weight for i in shared])
            other_weights = np.array([other.conn_genes[i].weight for i in shared])
            weight_gap    = float(np.mean(np.abs(own_weights - other_weights)))

        size = max(len(self.conn_genes), len(other.conn_genes))
        return (self._config.distance_excess_coeff   * excess   / size +
                self._config.distance_disjoint_coeff * disjoint / size +
                self._config.distance_params_coeff   * weight_gap)

    def __str__(self):
        return ' '.join(str(self.conn_genes[i]) for i in sorted(self.conn_genes))
