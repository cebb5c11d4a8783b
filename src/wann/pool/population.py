"""
WANN Population Module

This module implements weight-agnostic scoring and the Population class, which
holds the networks of one generation and replaces the low-ranking ones with
mutated copies of the high-ranking ones.

Functions:
    expand_output_multipliers: Apply the "one correct pattern" multiplier convention
    score_network:             Complexity-penalized score of one network
    score_population:          Score every network under one shared weight

Classes:
    Population: The fixed-size, ordered collection of networks being evolved
"""

import numpy as np
import random
from joblib import Parallel, delayed
from typing import Sequence, TYPE_CHECKING

from wann.genotype import InternalConsistencyError, Network

if TYPE_CHECKING:
    from wann.run.config import Config

def expand_output_multipliers(num_patterns: int, multipliers: Sequence[float]) -> list[float]:
    """
    Return one signed multiplier per training pattern.

    A single multiplier given for several patterns means that the first pattern
    is the one to recognize and all the others are to be rejected: the remaining
    multipliers default to -1.0. Otherwise there must be exactly one multiplier
    per pattern.

    Raises:
        ValueError: If the number of multipliers matches neither convention
    """
    multipliers = [float(m) for m in multipliers]
    if len(multipliers) == 1 and num_patterns != 1:
        return multipliers + [-1.0] * (num_patterns - 1)
    if len(multipliers) != num_patterns:
        raise ValueError(f"The number of output multipliers ({len(multipliers)}) differs "
                         f"from the number of input patterns ({num_patterns})")
    return multipliers

def score_network(network: Network, input_data: Sequence[Sequence[float]], multipliers: Sequence[float]) -> float:
    """
    Score a network with its current shared weight.

    The network output for each pattern is multiplied by that pattern's signed
    multiplier; the sum is divided by the network complexity, so that among
    equally good networks the smaller ones score higher.
    A score that is not a number ranks below every other score.
    """
    network.check_input_neurons()

    outputs = np.array([network.evaluate(pattern) for pattern in input_data], dtype=np.float64)
    with np.errstate(invalid='ignore', over='ignore'):
        score = float(np.dot(outputs, multipliers)) / network.complexity()

    if np.isnan(score):
        return float('-inf')
    return score

def score_population(networks   : Sequence[Network],
                     input_data : Sequence[Sequence[float]],
                     multipliers: Sequence[float],
                     weight     : float,
                     num_jobs   : int = 1) -> list[float]:
    """
    Score every network of a generation under the same shared weight.

    Parameters:
        networks:    The networks to score
        input_data:  The training patterns
        multipliers: One signed multiplier per training pattern
        weight:      The shared weight, applied to every network
        num_jobs:    Number of parallel processes used for scoring
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes

    Returns:
        The scores, in the order of 'networks'
    """
    for network in networks:
        network.set_weight(weight)

    if num_jobs == 1:
        return [score_network(network, input_data, multipliers) for network in networks]
    return list(Parallel(num_jobs)(delayed(score_network)(n, input_data, multipliers) for n in networks))

class Population:
    """
    A population of weight-agnostic networks.

    The population keeps a fixed number of networks at stable positions. Each
    generation, every network is scored under one freshly drawn shared weight;
    the networks are ranked, the top third (the elite) is kept unchanged and every
    other position is overwritten with a mutated copy of a random elite network.

    Public Attributes:
        networks: The networks of the current generation
        scores:   Their scores (None until 'score' is called)
        weight:   The shared weight used for the latest scoring

    Public Methods:
        score(input_data, multipliers): Score the current generation
        rank():                         Positions sorted by decreasing score
        get_fittest_network():          The highest-ranked network
        spawn_next_generation():        Replace the non-elite networks
    """

    def __init__(self, config: 'Config', rng: random.Random | None = None):
        """
        Create 'config.population_size' minimal networks.

        Parameters:
            config: Stores configuration parameters ('num_inputs' must be set)
            rng:    Source of randomness for the population and its networks
        """
        self._config = config
        self._rng    = rng if rng is not None else random.Random()

        self.networks: list[Network]      = [Network(config.num_inputs,
                                                     config.initial_cxn_fraction,
                                                     config.activation_options,
                                                     self._rng)
                                             for _ in range(config.population_size)]
        self.scores  : list[float] | None = None
        self.weight  : float | None       = None

    def score(self,
              input_data : Sequence[Sequence[float]],
              multipliers: Sequence[float],
              num_jobs   : int = 1) -> list[float]:
        """
        Draw one shared weight and score every network with it.

        Returns:
            The scores, indexed by population position
        """
        low, high   = self._config.shared_weight_min, self._config.shared_weight_max
        self.weight = low + (high - low) * self._rng.random()
        self.scores = score_population(self.networks, input_data, multipliers, self.weight, num_jobs)
        return self.scores

    def rank(self) -> list[int]:
        """
        Population positions sorted by decreasing score.
        Ties are broken by position: the first network seen ranks higher.

        Raises:
            InternalConsistencyError: If the population is empty or has not been scored
        """
        if not self.networks:
            raise InternalConsistencyError("the population is empty")
        if self.scores is None or len(self.scores) != len(self.networks):
            raise InternalConsistencyError("the population has not been scored")

        # 'sorted' is stable, also when sorting in reverse
        return sorted(range(len(self.networks)), key=lambda i: self.scores[i], reverse=True)

    def get_fittest_network(self) -> Network:
        return self.networks[self.rank()[0]]

    def spawn_next_generation(self, ranking: list[int] | None = None) -> None:
        """
        Replace the bottom two-thirds of the population.

        The top third of the ranking (at least one network) is carried over
        unmodified. Every other position receives a copy of an elite network,
        chosen at random for each position, to which one structural mutation
        has been applied.

        Parameters:
            ranking: Positions sorted by decreasing score (default: 'self.rank()')
        """
        if ranking is None:
            ranking = self.rank()

        num_elite = max(1, len(ranking) // 3)
        elite     = ranking[:num_elite]

        for position in ranking[num_elite:]:
            parent = self.networks[self._rng.choice(elite)]
            child  = parent.copy()
            child.modify(self._config.max_mutation_attempts)
            self.networks[position] = child

        # the scores refer to the networks that were just replaced
        self.scores = None

    def __str__(self):
        return '\n\n'.join(str(network) for network in self.networks)
