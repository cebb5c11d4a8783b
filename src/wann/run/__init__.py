"""
WANN Run Package

This package implements trial and experiment execution for weight-agnostic
neuroevolution.

A trial represents a complete evolutionary run, managing the population through
a fixed number of generations.

An experiment represents a collection of multiple trials for gathering statistical data.

Modules:
    config:      Configuration management
    trial:       Trial class and training data validation
    experiment:  Experiment class (multi-trial runs)
    evolve:      The 'evolve' entry point

Exported:
    Config:      Configuration parameters
    Trial:       One evolutionary run, with joblib parallelization of the scoring
    Experiment:  Several seeded trials, with joblib parallelization of the trials
    evolve:      Evolve a network from training data and return it
"""

from wann.run.config     import Config
from wann.run.trial      import Trial, validate_training_data
from wann.run.experiment import Experiment, recognizes_target
from wann.run.evolve     import evolve

__all__ = ['Config',
           'Experiment',
           'Trial',
           'evolve',
           'recognizes_target',
           'validate_training_data']
