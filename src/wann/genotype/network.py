"""
WANN Network Module

This module implements the Network class for weight-agnostic neuroevolution:
a feedforward network whose every connection shares one scalar weight, and
whose structure (not weights) is what evolves.

Classes:
    Network: Neuron arena plus acyclicity-preserving edit primitives,
             feedforward evaluation and the structural mutation engine
"""

import random
from collections import deque

from wann.activations     import activations
from wann.genotype.errors import InternalConsistencyError, StructuralMutationError
from wann.genotype.neuron import Neuron

# When no retry limit is requested, the number of attempts made by the
# mutation operators is still capped at this many per ordered node pair.
NO_LIMIT_ATTEMPTS_PER_NODE_PAIR = 10

class Network:
    """
    A weight-agnostic neural network.

    The network owns a growable arena of neurons; all references between neurons
    are arena indices. A single scalar weight is shared by every connection, so the
    behaviour of a network depends only on its topology, its activation functions,
    and the shared weight it is evaluated with.

    Neuron numbering convention:
        - Input neurons:  [0, num_inputs)
        - Output neuron:  num_inputs
        - Hidden neurons: (num_inputs, ...)

    The graph formed by the connections is always a DAG, and input neurons never
    have incoming connections. Every structural edit either fully succeeds or
    raises a StructuralMutationError leaving the network untouched.

    Public Attributes:
        num_inputs: Number of reserved input neurons
        neurons:    The neuron arena
        weight:     The shared weight applied to every connection

    Public Properties:
        output_node:         Index of the output neuron
        number_nodes:        Total number of neurons
        number_nodes_hidden: Number of hidden neurons
        number_connections:  Total number of connections

    Public Methods:
        evaluate(inputs):           Feedforward evaluation for one input vector
        set_weight(w):              Set the shared weight
        complexity():               Size measure used to penalize large networks
        get_random_node():          Uniformly chosen neuron index
        get_random_input_node():    Uniformly chosen input neuron index
        new_neuron():               Append an unconnected neuron
        insert_node(a, b, n):       Split connection a->b with neuron n
        add_connection(a, b):       Add connection a->b
        randomize_activation_function_for_random_neuron()
        modify(max_iterations):     Apply one random structural mutation
        copy():                     Independent deep copy
        check_input_neurons():      Verify that no connection index is dangling
        to_dict() / from_dict():    Conversion to/from a JSON-compatible dictionary
        to_python_source(name):     Render the network as a Python function
        visualize(view):            Render the network with Graphviz
    """

    def __init__(self,
                 num_inputs          : int,
                 initial_cxn_fraction: float = 0.0,
                 activation_options  : list[str] | None = None,
                 rng                 : random.Random | None = None):
        """
        Initialize a minimal network: 'num_inputs' input neurons, one output neuron
        with a random activation function, and a random subset of all possible
        input => output connections.

        The number of initial connections is 'int(num_inputs * initial_cxn_fraction)',
        but never less than one, so that the output is reachable from some input.

        Parameters:
            num_inputs:           Number of input neurons
            initial_cxn_fraction: Fraction of input => output connections to create
            activation_options:   Names of the activation functions neurons may use
                                  (default: all known activation functions)
            rng:                  Source of randomness for every random choice made
                                  by this network and its copies
        """
        if num_inputs < 1:
            raise ValueError(f"A network needs at least one input neuron, got {num_inputs}")
        if not 0.0 <= initial_cxn_fraction <= 1.0:
            raise ValueError(f"'initial_cxn_fraction' must be in [0, 1], got {initial_cxn_fraction}")

        self._rng               : random.Random = rng if rng is not None else random.Random()
        self._activation_options: list[str]     = self._check_activation_options(activation_options)

        self.num_inputs: int          = num_inputs
        self.weight    : float        = 1.0
        self.neurons   : list[Neuron] = [Neuron(i, self) for i in range(num_inputs)]

        # The output neuron follows the input neurons
        output = Neuron(num_inputs, self, self._rng.choice(self._activation_options))
        self.neurons.append(output)

        # Randomly select the input neurons connected to the output neuron
        num_conns = max(1, int(num_inputs * initial_cxn_fraction))
        output.inputs.extend(self._rng.sample(range(num_inputs), num_conns))

    @staticmethod
    def _check_activation_options(activation_options: list[str] | None) -> list[str]:
        if activation_options is None:
            return list(activations.keys())
        options = list(activation_options)
        if not options:
            raise ValueError("At least one activation function must be available")
        for name in options:
            if name not in activations:
                raise ValueError(f"Unknown activation function '{name}'")
        return options

    @classmethod
    def from_dict(cls, network_dict: dict, rng: random.Random | None = None) -> 'Network':
        """
        Create a Network from a dictionary description.

        Dictionary format:
            {
                "num_inputs": 2,
                "weight": 0.5,                              # optional, default 1.0
                "activation_options": ["tanh", "step"],     # optional, default all
                "neurons": [
                    {"activation": null,   "inputs": []},   # input  0
                    {"activation": null,   "inputs": []},   # input  1
                    {"activation": "tanh", "inputs": [3]},  # output 2
                    {"activation": "step", "inputs": [0, 1]}
                ]
            }

        Parameters:
            network_dict: Dictionary describing the network structure
            rng:          Source of randomness for later mutations

        Returns:
            A new Network object with the specified structure

        Raises:
            ValueError: If the structure is invalid (dangling indices, cycles, ...)
            KeyError:   If required fields are missing from the dictionary
        """
        num_inputs   = network_dict["num_inputs"]
        neurons_data = network_dict["neurons"]

        if num_inputs < 1:
            raise ValueError(f"A network needs at least one input neuron, got {num_inputs}")
        if len(neurons_data) < num_inputs + 1:
            raise ValueError(f"Expected at least {num_inputs + 1} neurons, got {len(neurons_data)}")

        network = cls.__new__(cls)
        network._rng                = rng if rng is not None else random.Random()
        network._activation_options = cls._check_activation_options(network_dict.get("activation_options"))
        network.num_inputs          = num_inputs
        network.weight              = float(network_dict.get("weight", 1.0))
        network.neurons             = []

        for index, neuron_data in enumerate(neurons_data):
            activation_name = neuron_data.get("activation")
            inputs          = list(neuron_data.get("inputs", []))

            if index < num_inputs:
                if activation_name is not None or inputs:
                    raise ValueError(f"Input neuron {index} cannot have an activation function or inputs")
            elif activation_name is None:
                raise ValueError(f"No activation function specified for neuron {index}")

            for input_index in inputs:
                if not 0 <= input_index < len(neurons_data):
                    raise ValueError(f"Neuron {index} has dangling input index {input_index}")
            if len(set(inputs)) != len(inputs):
                raise ValueError(f"Neuron {index} has duplicate inputs")

            network.neurons.append(Neuron(index, network, activation_name, inputs))

        if len(network._topological_sort()) != len(network.neurons):
            raise ValueError("The network contains a cycle")

        return network

    def to_dict(self) -> dict:
        """
        Convert the network to a JSON-compatible dictionary (see 'from_dict').
        """
        return {
            "num_inputs"        : self.num_inputs,
            "weight"            : self.weight,
            "activation_options": list(self._activation_options),
            "neurons"           : [{"activation": neuron.activation_name, "inputs": list(neuron.inputs)}
                                   for neuron in self.neurons]
        }

    @property
    def output_node(self) -> int:
        """Index of the output neuron."""
        return self.num_inputs

    @property
    def number_nodes(self) -> int:
        """Total number of neurons in the network."""
        return len(self.neurons)

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden neurons in the network."""
        return len(self.neurons) - self.num_inputs - 1

    @property
    def number_connections(self) -> int:
        """Total number of connections in the network."""
        return sum(len(neuron.inputs) for neuron in self.neurons)

    def set_weight(self, weight: float) -> None:
        self.weight = float(weight)

    def complexity(self) -> int:
        """
        Size of the network: number of neurons plus number of connections.
        Always positive, since a network has at least one input and one output neuron.
        """
        return self.number_nodes + self.number_connections

    def has_connection(self, node_in: int, node_out: int) -> bool:
        return node_in in self.neurons[node_out].inputs

    def is_reachable(self, source: int, target: int) -> bool:
        """
        Whether following connections forward from 'source' leads to 'target'.
        Searches backwards from 'target' through the incoming connections.
        """
        visited = set()
        stack   = [target]
        while stack:
            current = stack.pop()
            if current == source:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(self.neurons[current].inputs)
        return False

    def evaluation_order(self) -> list[int]:
        """
        Indices of the non-input neurons the output depends on (the output
        neuron included), ordered so that every neuron comes after its inputs.
        Neurons not connected to the output are left out.
        """
        order = []
        done  = set(range(self.num_inputs))
        stack = [self.output_node]
        while stack:
            index = stack[-1]
            if index in done:
                stack.pop()
                continue
            pending = [i for i in self.neurons[index].inputs if i not in done]
            if pending:
                stack.extend(pending)
            else:
                done.add(index)
                order.append(index)
                stack.pop()
        return order

    def evaluate(self, inputs) -> float:
        """
        Perform a complete forward pass through the network.

        The input values are bound to the input neurons positionally; every other
        neuron the output depends on is computed exactly once, as:
            activation(sum(input_value * shared_weight))

        Parameters:
            inputs: Sequence of 'num_inputs' numbers

        Returns:
            The value of the output neuron

        Raises:
            ValueError: If the number of inputs does not match the number of input neurons
        """
        if len(inputs) != self.num_inputs:
            raise ValueError(f"Expected {self.num_inputs} inputs, got {len(inputs)}")

        values = {index: float(value) for index, value in enumerate(inputs)}
        for index in self.evaluation_order():
            neuron = self.neurons[index]
            total  = 0.0
            for input_index in neuron.inputs:
                total += values[input_index] * self.weight
            values[index] = float(neuron.activation(total))

        return values[self.output_node]

    def get_random_node(self) -> int:
        return self._rng.randrange(len(self.neurons))

    def get_random_input_node(self) -> int:
        return self._rng.randrange(self.num_inputs)

    def new_neuron(self) -> int:
        """
        Append a new hidden neuron with a random activation function and no connections.

        Returns:
            The index of the new neuron
        """
        index = len(self.neurons)
        self.neurons.append(Neuron(index, self, self._rng.choice(self._activation_options)))
        return index

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.neurons):
            raise StructuralMutationError(f"Neuron index {index} out of range [0, {len(self.neurons)})")

    def insert_node(self, node_a: int, node_b: int, new_index: int) -> None:
        """
        Split the connection 'node_a' => 'node_b' with neuron 'new_index', so that
        'node_a' => 'new_index' => 'node_b' replaces it. The new neuron takes the
        position of 'node_a' among the inputs of 'node_b'.

        Splitting an existing connection can never create a cycle.

        Raises:
            StructuralMutationError: If the connection does not exist, or 'new_index'
                                     is not an unconnected hidden neuron
        """
        for index in (node_a, node_b, new_index):
            self._check_index(index)

        if new_index <= self.output_node or new_index in (node_a, node_b):
            raise StructuralMutationError(f"Neuron {new_index} cannot be inserted between {node_a} and {node_b}")
        if self.neurons[new_index].inputs or any(new_index in n.inputs for n in self.neurons):
            raise StructuralMutationError(f"Neuron {new_index} is already connected")
        if not self.has_connection(node_a, node_b):
            raise StructuralMutationError(f"No connection {node_a} => {node_b} to split")

        target = self.neurons[node_b]
        target.inputs[target.inputs.index(node_a)] = new_index
        self.neurons[new_index].inputs.append(node_a)

    def add_connection(self, node_a: int, node_b: int) -> None:
        """
        Add the connection 'node_a' => 'node_b'.

        We cannot add a connection:
         + from a neuron to itself
         + ending   at an INPUT neuron
         + between two neurons already connected by a direct connection
         + which would create a cycle in the DAG network graph

        Raises:
            StructuralMutationError: If any of the constraints above is violated
        """
        self._check_index(node_a)
        self._check_index(node_b)

        # Carry out quick checks first
        if node_a == node_b:
            raise StructuralMutationError(f"Cannot connect neuron {node_a} to itself")
        if node_b < self.num_inputs:
            raise StructuralMutationError(f"Cannot add a connection into input neuron {node_b}")
        if self.has_connection(node_a, node_b):
            raise StructuralMutationError(f"Connection {node_a} => {node_b} already exists")

        # Carry out expensive check last
        if self.is_reachable(node_b, node_a):
            raise StructuralMutationError(f"Connection {node_a} => {node_b} would create a cycle")

        self.neurons[node_b].inputs.append(node_a)

    def randomize_activation_function_for_random_neuron(self) -> None:
        """
        Assign a uniformly chosen activation function to a random non-input neuron.

        Raises:
            StructuralMutationError: If the network has no non-input neuron
        """
        if len(self.neurons) <= self.num_inputs:
            raise StructuralMutationError("The network has no neuron with an activation function")

        index = self._rng.randrange(self.num_inputs, len(self.neurons))
        self.neurons[index].activation_name = self._rng.choice(self._activation_options)

    def modify(self, max_iterations: int | None = 100) -> None:
        """
        Apply one structural mutation, chosen uniformly among:
          + insert a node      (split a random existing connection)
          + add a connection   (between two random neurons)
          + change the activation function of a random neuron

        Random neuron pairs are drawn until the edit succeeds, at most
        'max_iterations' times. If no node could be inserted within that budget,
        a connection from an input neuron to the output neuron is split instead
        (any connection, once none of those is left); if no connection could be
        added, the network is left unchanged. Connections may start at any neuron,
        the output included, as long as they create no cycle.

        Parameters:
            max_iterations: Maximum number of random neuron pairs to try, or None
                            for no limit other than a ceiling derived from the
                            network size
        """
        limit  = self._attempt_limit(max_iterations)
        method = self._rng.randrange(3)

        if method == 0:
            self._mutate_insert_node(limit)
        elif method == 1:
            self._mutate_add_connection(limit)
        elif method == 2:
            self._mutate_activation()
        else:
            raise InternalConsistencyError(f"invalid mutation method number: {method}")

    def _attempt_limit(self, max_iterations: int | None) -> int:
        if max_iterations is None:
            return NO_LIMIT_ATTEMPTS_PER_NODE_PAIR * len(self.neurons) ** 2
        if isinstance(max_iterations, bool) or not isinstance(max_iterations, int) or max_iterations < 1:
            raise ValueError(f"'max_iterations' must be a positive integer or None, got {max_iterations!r}")
        return max_iterations

    def _mutate_insert_node(self, limit: int) -> None:
        new_index = self.new_neuron()

        for _ in range(limit):
            node_a, node_b = self.get_random_node(), self.get_random_node()
            try:
                self.insert_node(node_a, node_b, new_index)
                return
            except StructuralMutationError:
                continue

        # Could not split a random pair; split a connection into the output instead.
        output        = self.neurons[self.output_node]
        direct_inputs = [i for i in output.inputs if i < self.num_inputs]
        if direct_inputs:
            node_a, node_b = self._rng.choice(direct_inputs), self.output_node
        else:
            # every input => output connection has been split already
            connections = [(i, n.index) for n in self.neurons for i in n.inputs]
            if not connections:
                raise InternalConsistencyError(f"could not insert neuron {new_index}: the network has no connection")
            node_a, node_b = self._rng.choice(connections)
        try:
            self.insert_node(node_a, node_b, new_index)
        except StructuralMutationError as err:
            raise InternalConsistencyError(f"could not insert neuron {new_index}: {err}") from err

    def _mutate_add_connection(self, limit: int) -> None:
        for _ in range(limit):
            node_a, node_b = self.get_random_node(), self.get_random_node()
            try:
                self.add_connection(node_a, node_b)
                return
            except StructuralMutationError:
                continue
        # The possibilities for connections might be saturated; leave the network as is.

    def _mutate_activation(self) -> None:
        try:
            self.randomize_activation_function_for_random_neuron()
        except StructuralMutationError:
            pass  # nothing to mutate

    def copy(self) -> 'Network':
        """
        Create an independent copy of this network.
        The copy shares no neuron or connection storage with the original,
        but draws its random numbers from the same source.
        """
        clone = Network.__new__(Network)
        clone._rng                = self._rng
        clone._activation_options = list(self._activation_options)
        clone.num_inputs          = self.num_inputs
        clone.weight              = self.weight
        clone.neurons             = [Neuron(n.index, clone, n.activation_name, n.inputs) for n in self.neurons]
        return clone

    def check_input_neurons(self) -> None:
        """
        Verify that no connection refers to a neuron outside the arena, and that
        input neurons have no incoming connections.

        Raises:
            InternalConsistencyError: If the network is malformed
        """
        for neuron in self.neurons:
            neuron.check_input_neurons()
            if neuron.is_input and neuron.inputs:
                raise InternalConsistencyError(f"input neuron {neuron.index} has incoming connections")

    def _topological_sort(self) -> list[int]:
        """
        Sort all neurons using Kahn's algorithm. If the graph has a cycle,
        the neurons on (or downstream of) the cycle are missing from the result.
        """
        outgoing  = [[] for _ in self.neurons]
        in_degree = [len(neuron.inputs) for neuron in self.neurons]
        for neuron in self.neurons:
            for input_index in neuron.inputs:
                outgoing[input_index].append(neuron.index)

        queue  = deque(i for i, degree in enumerate(in_degree) if degree == 0)
        result = []
        while queue:
            index = queue.popleft()
            result.append(index)
            for neighbor in outgoing[index]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        return result

    def to_python_source(self, function_name: str = "wann_network") -> str:
        """
        Render the network as the source code of a self-contained Python function
        taking a sequence of 'num_inputs' numbers and returning the network output.
        """
        # Import here to avoid circular import
        from wann.phenotype.export import network_to_python_source
        return network_to_python_source(self, function_name)

    def visualize(self, view: bool = False):
        """
        Render the network with Graphviz (see 'wann.phenotype.visualize').
        """
        # Import here to avoid circular import
        from wann.phenotype.visualize import visualize_network
        return visualize_network(self, view)

    def __str__(self):
        inputs  = ''.join(str(n) for n in self.neurons[:self.num_inputs])
        output  = str(self.neurons[self.output_node])
        hidden  = ''.join(str(n) for n in self.neurons[self.output_node + 1:])
        return f"Inputs: {inputs}\nOutput: {output}\nHidden: {hidden}\nWeight: {self.weight:+.4f}"
