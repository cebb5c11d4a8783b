"""
Arrow Recognition Example

Evolves weight-agnostic networks recognizing the "up" arrow among four 2x3
arrow shapes. Each shape is presented as 6 pixels, row by row:

        up       down      left      right
       . o .    o o o     o o o     o o o
       o o o    . o .     . . o     o . .

The network output for "up" is rewarded, the outputs for the other three shapes
are penalized (multipliers 1, -1, -1, -1). A trial succeeds if the output for
"up" is strictly larger than the output for every other shape.

Usage:
    Single Trial:
        config  = Config("config_arrows.ini")
        network = evolve(config, ARROWS, [1.0])
        print(network.to_python_source("recognize_up"))

    Experiment (Multiple Trials):
        config     = Config("config_arrows.ini")
        experiment = Experiment(config, ARROWS, [1.0], num_trials=20, seed=0)
        experiment.run(num_jobs_trials=-1)
"""

import random
from pathlib import Path

from wann.run import Config, Experiment, evolve, recognizes_target

ARROWS = {
    "up":    [0.0, 1.0, 0.0,
              1.0, 1.0, 1.0],
    "down":  [1.0, 1.0, 1.0,
              0.0, 1.0, 0.0],
    "left":  [1.0, 1.0, 1.0,
              0.0, 0.0, 1.0],
    "right": [1.0, 1.0, 1.0,
              0.1, 0.0, 0.0],
}

CONFIG_FILE = Path(__file__).parent / "config_arrows.ini"

def run_trial(seed: int = 0):
    config  = Config(str(CONFIG_FILE))
    network = evolve(config, ARROWS, [1.0], rng=random.Random(seed))

    print(network)
    print(f"Complexity: {network.complexity()}")
    for name, shape in ARROWS.items():
        print(f"{name:>5}: {network.evaluate(shape):+.6f}")
    if recognizes_target(network, list(ARROWS.values()), [1.0, -1.0, -1.0, -1.0]):
        print("The network recognizes the up arrow")
    print()
    print(network.to_python_source("recognize_up"))

def run_experiment(num_trials: int = 20, seed: int = 0):
    config = Config(str(CONFIG_FILE))
    config.max_number_generations = 100
    experiment = Experiment(config, ARROWS, [1.0], num_trials=num_trials, seed=seed)
    experiment.run(num_jobs_trials=-1)

if __name__ == '__main__':
    run_trial()
    run_experiment()
