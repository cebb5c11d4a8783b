"""
WANN Phenotype Package

This package turns evolved networks into forms usable outside the evolutionary
loop: Python source code for deployment, and Graphviz diagrams for inspection.

Modules:
    export:    Rendering of a network as a self-contained Python function
    visualize: Rendering of a network as a Graphviz directed graph

Exported Functions:
    network_to_python_source: Render a network as Python source code
    visualize_network:        Render a network with Graphviz
"""

from wann.phenotype.export    import network_to_python_source
from wann.phenotype.visualize import visualize_network

__all__ = ['network_to_python_source',
           'visualize_network']
