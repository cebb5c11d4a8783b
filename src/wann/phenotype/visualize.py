"""
WANN Visualization Module

Functions:
    visualize_network: Render a Network as a Graphviz directed graph
"""

from typing import TYPE_CHECKING
import graphviz  # type: ignore

from wann.activations import activation_codes

if TYPE_CHECKING:
    from wann.genotype import Network

def visualize_network(network: 'Network', view: bool = False) -> graphviz.Digraph:
    """
    Visualize the network using Graphviz.

    Input neurons are drawn on the left, the output neuron on the right and the
    hidden neurons in between. Every edge carries the same (shared) weight, which
    is shown once in the graph label.

    Parameters:
        network: The network to visualize
        view:    If True, automatically open the visualization after rendering

    Returns:
        graphviz.Digraph object representing the network
    """
    dot = graphviz.Digraph()
    dot.attr(rankdir='LR')  # Left to right layout
    dot.attr('graph', labelloc='t', label=f"shared weight = {network.weight:.4f}")

    # Define node colors and shapes
    common = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
              'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
    node_attrs = {
        'INPUT':  {**common, 'fillcolor': 'lightgrey'},
        'HIDDEN': {**common, 'fillcolor': 'lightblue'},
        'OUTPUT': {**common, 'fillcolor': 'white'}
    }

    def label(index: int) -> str:
        activation_name = network.neurons[index].activation_name
        if activation_name is None:
            return f"id={index}"
        return f"id={index}\\n{activation_codes[activation_name]}"

    # Create subgraphs for better layout
    with dot.subgraph(name='cluster_input') as input_cluster:
        input_cluster.attr(rank='source', label='Inputs', style='invisible')
        for index in range(network.num_inputs):
            input_cluster.node(str(index), label=label(index), **node_attrs['INPUT'])

    # Add hidden nodes if any
    hidden_nodes = range(network.output_node + 1, network.number_nodes)
    if hidden_nodes:
        with dot.subgraph(name='cluster_hidden') as hidden_cluster:
            hidden_cluster.attr(rank='same', label='Hidden', style='invisible')
            for index in hidden_nodes:
                hidden_cluster.node(str(index), label=label(index), **node_attrs['HIDDEN'])

    with dot.subgraph(name='cluster_output') as output_cluster:
        output_cluster.attr(rank='sink', label='Outputs', style='invisible')
        output_cluster.node(str(network.output_node), label=label(network.output_node), **node_attrs['OUTPUT'])

    for neuron in network.neurons:
        for input_index in neuron.inputs:
            dot.edge(str(input_index), str(neuron.index), penwidth='0.5', arrowsize='0.5')

    if view:
        dot.view(cleanup=True)

    return dot
