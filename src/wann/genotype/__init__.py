"""
WANN Genotype Package

This package implements the representation of weight-agnostic networks: an arena
of neurons referring to each other by index, the acyclicity-preserving edits that
grow the network graph, and the structural mutation engine built on top of them.

Modules:
    neuron:  Neuron class
    network: Network class
    errors:  StructuralMutationError and InternalConsistencyError

Exported Classes:
    Neuron:                   A node of a weight-agnostic network
    Network:                  A weight-agnostic network (neurons + shared weight)
    StructuralMutationError:  A structural edit was rejected
    InternalConsistencyError: A network or population invariant was broken
"""

from wann.genotype.errors  import InternalConsistencyError, StructuralMutationError
from wann.genotype.neuron  import Neuron
from wann.genotype.network import Network

__all__ = ['InternalConsistencyError',
           'Network',
           'Neuron',
           'StructuralMutationError']
