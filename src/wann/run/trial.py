"""
WANN Trial Module

This module defines the Trial class: one independent run of weight-agnostic
neuroevolution, evolving a population for a fixed number of generations.
"""

import random
from collections.abc import Mapping
from typing import Sequence

from wann.genotype   import InternalConsistencyError, Network
from wann.pool       import GenerationStats, Population, expand_output_multipliers
from wann.run.config import Config

def validate_training_data(input_data                : Sequence[Sequence[float]] | Mapping,
                           correct_output_multipliers: Sequence[float]
                           ) -> tuple[list[list[float]], list[float]]:
    """
    Check the training data and apply the output multiplier convention.

    Parameters:
        input_data:                 The input patterns, all of the same length; either
                                    a sequence, or a mapping from pattern name to pattern
                                    (in which case the mapping order is used)
        correct_output_multipliers: One signed multiplier per pattern, or a single
                                    multiplier for the first pattern (all the other
                                    patterns then get -1.0)

    Returns:
        The patterns and the per-pattern multipliers, as lists of floats

    Raises:
        ValueError: If there are no patterns, the patterns are empty or of different
                    lengths, or the number of multipliers does not fit
    """
    if isinstance(input_data, Mapping):
        input_data = list(input_data.values())

    patterns = [[float(value) for value in pattern] for pattern in input_data]
    if not patterns:
        raise ValueError("no input data")

    num_inputs = len(patterns[0])
    if num_inputs == 0:
        raise ValueError("the input patterns are empty")
    for i, pattern in enumerate(patterns):
        if len(pattern) != num_inputs:
            raise ValueError(f"input pattern {i} has length {len(pattern)}, expected {num_inputs}")

    multipliers = expand_output_multipliers(len(patterns), correct_output_multipliers)
    return patterns, multipliers

class Trial:
    """
    One independent run of weight-agnostic neuroevolution.

    A trial creates a population of minimal networks and, once per generation:
      + scores every network under one shared random weight
      + ranks the networks by decreasing score
      + updates the best/average/worst score statistics
      + replaces the bottom two-thirds with mutated copies of the top third
    until the maximum number of generations is reached (or, optionally, the best
    score has stagnated for too long).

    Public Attributes:
        stats:        Score statistics of the latest generation
        best_network: The highest-ranked network of the latest generation
        best_score:   Its score

    Public Methods:
        run(num_jobs=1): Execute a complete trial and return the best network

    Parallelization of the scoring of individuals:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self,
                 config                    : Config,
                 input_data                : Sequence[Sequence[float]] | Mapping,
                 correct_output_multipliers: Sequence[float],
                 rng                       : random.Random | None = None,
                 suppress_output           : bool = False):
        """
        Initialize the trial. Overwrites 'config.num_inputs' with the length of the
        input patterns.

        Parameters:
            config:                     Configuration parameters
            input_data:                 The input patterns (see 'validate_training_data')
            correct_output_multipliers: The signed multipliers (see 'validate_training_data')
            rng:                        Source of randomness, for reproducible trials
            suppress_output:            If True, suppress progress and final reports
                                        even if 'config.verbose' is set (useful when
                                        running multiple trials in experiments)

        Raises:
            ValueError: If the training data or the configuration are invalid
        """
        self._input_data, self._multipliers = \
            validate_training_data(input_data, correct_output_multipliers)

        config.num_inputs = len(self._input_data[0])
        config.validate()

        self._config            : Config            = config
        self._rng               : random.Random     = rng if rng is not None else random.Random()
        self._suppress_output   : bool              = suppress_output
        self._generation_counter: int               = 0
        self._population        : Population | None = None

        self.stats       : GenerationStats = GenerationStats()
        self.best_network: Network | None  = None
        self.best_score  : float | None    = None

    @property
    def generation_counter(self) -> int:
        """Number of generations scored so far."""
        return self._generation_counter

    @property
    def population(self) -> Population | None:
        return self._population

    def run(self, num_jobs: int = 1) -> Network:
        """
        Run the trial.

        Resets the trial state and runs the evolutionary
        algorithm until the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for scoring individuals
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes

        Returns:
            The highest-ranked network of the last generation

        Raises:
            InternalConsistencyError: If no best network could be determined
        """
        # Reset the trial state before starting a new run
        self._reset()

        # Create the initial population
        self._population = Population(self._config, self._rng)

        # Evolution loop
        while True:
            self._generation_counter += 1

            # Score and rank every network under one shared weight
            scores  = self._population.score(self._input_data, self._multipliers, num_jobs)
            ranking = self._population.rank()

            self.stats.update(scores)
            self.best_network = self._population.networks[ranking[0]]
            self.best_score   = scores[ranking[0]]

            # Display progress after each generation
            if self._reporting:
                self._report_progress(ranking)

            if self._terminate():
                break

            # The elite is carried over, the other networks are replaced
            self._population.spawn_next_generation(ranking)

        if self.best_network is None:
            raise InternalConsistencyError("no best network")

        # Produce final report
        if self._reporting:
            self._final_report()

        return self.best_network

    @property
    def _reporting(self) -> bool:
        return self._config.verbose and not self._suppress_output

    def _reset(self):
        """
        Reset the trial state before starting a new run.
        """
        self._generation_counter = 0
        self._population         = None
        self.stats               = GenerationStats()
        self.best_network        = None
        self.best_score          = None

    def _report_progress(self, ranking: list[int]):
        """
        Report trial progress after each generation.
        """
        num_elite = max(1, len(ranking) // 3)
        scores    = self._population.scores
        print(f"------ generation {self._generation_counter}, population size {len(ranking)}, "
              f"shared weight {self._population.weight:.4f}")
        print(f"Best, average and worst score: {self.stats.best} {self.stats.average} {self.stats.worst}")
        print(f"Best, average and worst improvement counters: {self.stats.no_improvement_best} "
              f"{self.stats.no_improvement_average} {self.stats.no_improvement_worst}")
        print(f"Elite: {', '.join(f'{i}:{scores[i]:+.4f}' for i in ranking[:num_elite])}")

    def _final_report(self):
        """
        Produce final report at the end of the trial.
        """
        network = self.best_network
        print(f"Trial complete after {self._generation_counter} generations")
        print(f"Best score: {self.best_score}")
        print(f"Best network: {network.number_nodes} neurons, {network.number_connections} connections")
        print(network)

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        Stops the trial after a maximum number of generations and, if
        'max_stagnation_period' is set, once the best score has not improved
        for that many consecutive generations.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Has the best score stopped improving?
        period = self._config.max_stagnation_period
        if period is not None:
            terminate = terminate or self.stats.no_improvement_best >= period

        return terminate
