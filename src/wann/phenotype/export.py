"""
WANN Export Module

This module renders a Network as the source code of a self-contained Python
function, so that an evolved network can be embedded into other programs
without depending on this package.

Functions:
    network_to_python_source: Render a network as a Python function definition
"""

import keyword
import math
from typing import TYPE_CHECKING

from wann.activations import activation_sources

if TYPE_CHECKING:
    from wann.genotype import Network

def _operand(network: 'Network', index: int) -> str:
    if index < network.num_inputs:
        return f"inputs[{index}]"
    return f"n{index}"

def _float_literal(value: float) -> str:
    if math.isnan(value):
        return "math.nan"
    if math.isinf(value):
        return "math.inf" if value > 0 else "-math.inf"
    return repr(value)

def network_to_python_source(network: 'Network', function_name: str = "wann_network") -> str:
    """
    Render the network as Python source code.

    The generated module imports only 'math' and defines one function taking a
    sequence of 'network.num_inputs' numbers. The function computes the same
    neurons, in the same order and with the same summation order, as
    'Network.evaluate()', with the network's current shared weight baked in.

    Example output (one input, one hidden neuron):

        import math


        def wann_network(inputs):
            # 1 input(s), 1 hidden neuron(s)
            w = 0.5
            s2 = inputs[0] * w
            n2 = math.tanh(s2)
            s1 = n2 * w
            n1 = (1.0 if s1 > 0.0 else 0.0)
            return n1

    Parameters:
        network:       The network to render
        function_name: Name of the generated function

    Returns:
        The generated source code

    Raises:
        ValueError: If 'function_name' is not a valid Python identifier
    """
    if not function_name.isidentifier() or keyword.iskeyword(function_name):
        raise ValueError(f"'{function_name}' is not a valid Python function name")

    lines = ["import math",
             "",
             "",
             f"def {function_name}(inputs):",
             f"    # {network.num_inputs} input(s), {network.number_nodes_hidden} hidden neuron(s)",
             f"    w = {_float_literal(network.weight)}"]

    for index in network.evaluation_order():
        neuron = network.neurons[index]
        terms  = [f"{_operand(network, i)} * w" for i in neuron.inputs] or ["0.0"]
        lines.append(f"    s{index} = {' + '.join(terms)}")
        lines.append(f"    n{index} = {activation_sources[neuron.activation_name].format(z=f's{index}')}")

    lines.append(f"    return n{network.output_node}")
    return '\n'.join(lines) + '\n'
