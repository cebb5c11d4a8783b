"""
WANN (Weight Agnostic Neural Networks) - A Python implementation.

This package evolves the topology of small feedforward neural networks whose
connections all share a single weight. Since the weight is not trained but drawn
at random every generation, evolution favours architectures that perform well
regardless of the weight value; dividing each score by the network size favours
small architectures.

Main components:
- activations: The fixed set of activation functions available to neurons
- genotype:    Networks, neurons, structural edits and structural mutation
- pool:        Weight-agnostic scoring, ranking and replacement of networks
- run:         Trial execution, configuration, experiments and 'evolve'
- phenotype:   Export of networks as Python source code, and visualization

Example:
    >>> from wann import Config, evolve
    >>> config = Config()
    >>> config.max_number_generations = 50
    >>> network = evolve(config, [up, down, left, right], [1.0, -1.0, -1.0, -1.0])
    >>> print(network.to_python_source())
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from wann.genotype import InternalConsistencyError, Network, Neuron, StructuralMutationError
from wann.pool     import GenerationStats, Population
from wann.run      import Config, Experiment, Trial, evolve

__all__ = [
    "Config",
    "Experiment",
    "GenerationStats",
    "InternalConsistencyError",
    "Network",
    "Neuron",
    "Population",
    "StructuralMutationError",
    "Trial",
    "evolve",
]
