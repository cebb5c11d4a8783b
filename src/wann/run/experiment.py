"""
WANN Experiment Module

This module defines the Experiment class with built-in support for CPU-based
parallelization using joblib.

An experiment represents a collection of multiple independent trials (runs)
on the same training data, used to gather statistical data about how reliably
evolution finds a network recognizing the target pattern.
"""

import random
from collections.abc import Mapping
from joblib     import Parallel, delayed
from statistics import mean
from sys        import stdout
from typing     import Sequence

from wann.genotype   import Network
from wann.run.config import Config
from wann.run.trial  import Trial, validate_training_data

def recognizes_target(network: Network, patterns: Sequence[Sequence[float]], multipliers: Sequence[float]) -> bool:
    """
    Whether the network output for the target pattern (the first pattern with the
    largest multiplier) is strictly larger than its output for every other pattern.
    The network is evaluated with its current shared weight.
    """
    target  = max(range(len(multipliers)), key=lambda i: multipliers[i])
    outputs = [network.evaluate(pattern) for pattern in patterns]
    return all(outputs[target] > output for i, output in enumerate(outputs) if i != target)

class Experiment:
    """
    A collection of independent trials on the same training data.

    Each trial is seeded with its own random seed (derived from the experiment
    seed), so that an experiment is reproducible as a whole. A trial counts as a
    success if its best network recognizes the target pattern, i.e. ranks it
    strictly above every other pattern.

    Public Methods:
        run(num_jobs_trials=1, num_jobs_fitness=1): Execute the complete experiment

    Parallelization:
        Supports two levels of parallelization:

        Trial-level parallelization (num_jobs_trials):
            1:  Serial trial execution (no parallelization)
           >1:  Use specified number of parallel processes for trials
           -1:  Use all available CPU cores for trials

        Scoring-level parallelization within each trial (num_jobs_fitness):
            1:  Serial scoring (recommended when num_jobs_trials > 1)
           >1:  Use specified number of parallel processes per trial
           -1:  Use all available CPU cores per trial
    """

    def __init__(self,
                 config                    : Config,
                 input_data                : Sequence[Sequence[float]] | Mapping,
                 correct_output_multipliers: Sequence[float],
                 num_trials                : int,
                 seed                      : int | None = None,
                 suppress_output           : bool = False):
        """
        Parameters:
            config:                     Configuration parameters shared by all trials
            input_data:                 The input patterns
            correct_output_multipliers: The signed multipliers
            num_trials:                 Number of trials in this experiment
            seed:                       Seed from which the trial seeds are derived
            suppress_output:            If True, do not print progress or the final report

        Raises:
            ValueError: If the training data is invalid or 'num_trials' is not positive
        """
        if num_trials < 1:
            raise ValueError(f"'num_trials' must be at least 1, got {num_trials}")

        self._patterns, self._multipliers = \
            validate_training_data(input_data, correct_output_multipliers)

        self._config         : Config = config
        self._num_trials     : int    = num_trials
        self._seed           : int | None = seed
        self._suppress_output: bool   = suppress_output

        # progress counters
        self._trial_counter  : int = 0  # how many trials we've run so far
        self._success_counter: int = 0  # how many trials recognized the target pattern

        # for each successful trial, some stats
        self._best_scores : list[float] = []
        self._complexities: list[int]   = []

    def _reset(self):
        """
        Reset experiment state before starting a new run.
        """
        self._trial_counter   = 0
        self._success_counter = 0
        self._best_scores     = []
        self._complexities    = []

    def run(self, num_jobs_trials: int = 1, num_jobs_fitness: int = 1) -> dict:
        """
        Run the experiment.

        Parameters:
            num_jobs_trials:  Number of parallel processes for running trials
            num_jobs_fitness: Number of parallel processes for scoring within each trial

        Returns:
            Summary of the experiment: number of trials, number of successes,
            success rate, and the mean best score and mean complexity of the
            successful trials (None if there were none)
        """
        # Reset the state at the beginning of each new experiment
        self._reset()

        seed_source = random.Random(self._seed)
        seeds       = [seed_source.randrange(2**32) for _ in range(self._num_trials)]

        if num_jobs_trials == 1:
            results = []
            for n, seed in enumerate(seeds, start=1):
                self._trial_counter = n
                if not self._suppress_output:
                    stdout.write(f"Starting trial {n:03d} of {self._num_trials}...\r")
                    stdout.flush()
                results.append(self._run_trial(n, seed, num_jobs_fitness))
        else:
            results = Parallel(num_jobs_trials)(
                delayed(self._run_trial)(n, seed, num_jobs_fitness)
                for n, seed in enumerate(seeds, start=1)
            )
            self._trial_counter = self._num_trials

        for r in results:
            self._analyze_trial_results(r)

        summary = {
            "num_trials"     : self._num_trials,
            "num_successes"  : self._success_counter,
            "success_rate"   : self._success_counter / self._num_trials,
            "mean_best_score": mean(self._best_scores)  if self._best_scores  else None,
            "mean_complexity": mean(self._complexities) if self._complexities else None,
            "trials"         : results,
        }

        if not self._suppress_output:
            self._final_report(summary)

        return summary

    def _run_trial(self, trial_number: int, seed: int, num_jobs: int = 1) -> dict:
        """
        Run one trial and return the relevant data it generated.
        """
        trial   = Trial(self._config, self._patterns, self._multipliers,
                        rng=random.Random(seed), suppress_output=True)
        network = trial.run(num_jobs)

        return {
            "trial_number"      : trial_number,
            "seed"              : seed,
            "number_generations": trial.generation_counter,
            "best_score"        : trial.best_score,
            "number_neurons"    : network.number_nodes,
            "number_connections": network.number_connections,
            "complexity"        : network.complexity(),
            "success"           : recognizes_target(network, self._patterns, self._multipliers),
        }

    def _analyze_trial_results(self, results: dict):
        if results["success"]:
            self._success_counter += 1
            self._best_scores.append(results["best_score"])
            self._complexities.append(results["complexity"])

    def _final_report(self, summary: dict):
        """
        Produce the final report, aggregating the data obtained from each trial.
        """
        print(f"\nSuccessful trials: {summary['num_successes']} of {summary['num_trials']} "
              f"({100.0 * summary['success_rate']:.1f}%)")
        if summary["num_successes"]:
            print(f"Mean best score of successful trials: {summary['mean_best_score']:.6f}")
            print(f"Mean complexity of successful trials: {summary['mean_complexity']:.1f}")
