"""
WANN Evolve Module

Functions:
    evolve: Evolve a network recognizing one of several input patterns
"""

import random
from collections.abc import Mapping
from typing import Sequence

from wann.genotype   import Network
from wann.run.config import Config
from wann.run.trial  import Trial

def evolve(config                    : Config,
           input_data                : Sequence[Sequence[float]] | Mapping,
           correct_output_multipliers: Sequence[float],
           rng                       : random.Random | None = None,
           num_jobs                  : int = 1) -> Network:
    """
    Evolve a weight-agnostic network, given a set of input patterns and a signed
    multiplier per pattern (positive for the pattern to recognize, negative for
    the patterns to reject). A single multiplier stands for the first pattern;
    all remaining patterns then get -1.0.

    Overwrites 'config.num_inputs' with the length of the input patterns.

    Example:
        >>> config = Config()
        >>> config.max_number_generations = 50
        >>> network = evolve(config, [up, down, left, right], [1.0])
        >>> network.evaluate(up) > network.evaluate(down)

    Parameters:
        config:                     Configuration parameters
        input_data:                 The input patterns (a sequence, or a mapping
                                    from pattern name to pattern)
        correct_output_multipliers: The signed multipliers
        rng:                        Source of randomness, for reproducible runs
        num_jobs:                   Number of parallel processes used for scoring

    Returns:
        The best network of the last generation

    Raises:
        ValueError: If the input data is empty or the number of multipliers does not fit
    """
    trial = Trial(config, input_data, correct_output_multipliers, rng=rng)
    return trial.run(num_jobs)
