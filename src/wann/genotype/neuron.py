"""
WANN Neuron Module

This module implements the Neuron class, a single node in a weight-agnostic network.

Classes:
    Neuron: A node identified by its index in the owning network's neuron arena
"""

from typing import Callable, TYPE_CHECKING

from wann.activations      import activations, activation_codes
from wann.genotype.errors  import InternalConsistencyError

if TYPE_CHECKING:
    from wann.genotype.network import Network

class Neuron:
    """
    A node in a weight-agnostic neural network.

    Neurons live in the neuron arena of their network and refer to each other
    by index only. Each neuron stores the indices of the neurons feeding into it
    (its incoming edges); the order of these indices only affects the order in
    which the inputs are summed.

    Input neurons have no activation function and no incoming edges; they merely
    hold the values presented to the network. All other neurons compute:
        activation(sum(input_value * shared_weight))

    Public Attributes:
        index:           Position of this neuron in its network's arena
        inputs:          Indices of the neurons with an edge into this neuron
        activation_name: Name of the activation function (None for input neurons)

    Public Properties:
        is_input:   Whether this is one of the network's reserved input neurons
        activation: The activation function itself (callable, None for input neurons)

    Public Methods:
        check_input_neurons(): Verify that no incoming edge index is out of bounds
    """

    def __init__(self,
                 index          : int,
                 network        : 'Network',
                 activation_name: str | None = None,
                 inputs         : list[int] | None = None):
        """
        Parameters:
            index:           Position of this neuron in the network's arena
            network:         The network owning this neuron (not owned by the neuron,
                             only used for validation)
            activation_name: Name of the activation function, None for input neurons
            inputs:          Indices of the neurons feeding into this neuron
        """
        if activation_name is not None and activation_name not in activations:
            raise ValueError(f"Unknown activation function '{activation_name}'")

        self.index          : int        = index
        self.inputs         : list[int]  = list(inputs) if inputs else []
        self.activation_name: str | None = activation_name
        self._network       : 'Network'  = network

    @property
    def is_input(self) -> bool:
        return self.index < self._network.num_inputs

    @property
    def activation(self) -> Callable | None:
        if self.activation_name is None:
            return None
        return activations[self.activation_name]

    def check_input_neurons(self) -> None:
        """
        Verify that every incoming edge refers to a neuron of the owning network.

        Raises:
            InternalConsistencyError: If an edge index points outside the neuron arena
        """
        number_nodes = len(self._network.neurons)
        for input_index in self.inputs:
            if not 0 <= input_index < number_nodes:
                raise InternalConsistencyError(
                    f"input neuron index is pointing out of bounds: at {self.index} "
                    f"which has input index {input_index} ({number_nodes} neurons)")

    def __repr__(self):
        return (f"Neuron(index={self.index}, activation_name={self.activation_name!r}, "
                f"inputs={self.inputs})")

    def __str__(self):
        if self.activation_name is None:
            return f"[I{self.index}]"
        act_code = activation_codes.get(self.activation_name, "???")
        sources  = ','.join(str(i) for i in self.inputs)
        return f"[{self.index},{act_code}<-{sources}]"
